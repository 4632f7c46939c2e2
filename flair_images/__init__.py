"""
Flair image management.

Derives the three pre-scaled variants of each uploaded flair image,
keeps them in a store directory, and answers which images exist and
which are referenced by flair records.
"""

__version__ = "1.0.0"

from .exceptions import FlairImageError, ImageProcessingError, InvalidAssetNameError
from .size_tier import SizeTier, SIZE_TIERS
from .asset_name import AssetName, ALLOWED_EXTENSIONS
from .flair_config import FlairConfig
from .filesystem import LocalFilesystem
from .backends import BackendKind, ImageBackend, detect, can_process, default_backend
from .store import StoreProvisioner
from .variant_generator import VariantGenerator, scaled_width
from .flair_db import FlairDb, FLAIR_TYPE_IMAGE
from .catalog import AssetCatalog
from .lifecycle import AssetLifecycleManager
from .reporter import Reporter

__all__ = [
    "FlairImageError",
    "ImageProcessingError",
    "InvalidAssetNameError",
    "SizeTier",
    "SIZE_TIERS",
    "AssetName",
    "ALLOWED_EXTENSIONS",
    "FlairConfig",
    "LocalFilesystem",
    "BackendKind",
    "ImageBackend",
    "detect",
    "can_process",
    "default_backend",
    "StoreProvisioner",
    "VariantGenerator",
    "scaled_width",
    "FlairDb",
    "FLAIR_TYPE_IMAGE",
    "AssetCatalog",
    "AssetLifecycleManager",
    "Reporter",
]
