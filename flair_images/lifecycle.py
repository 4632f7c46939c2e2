"""
AssetLifecycleManager - Adds and deletes flair image variant sets.
"""

import logging
import os
from typing import List, Optional, Sequence

from .asset_name import AssetName
from .filesystem import LocalFilesystem
from .size_tier import SIZE_TIERS, SizeTier
from .variant_generator import VariantGenerator


class AssetLifecycleManager:
    """
    Adds and removes flair images in the store.

    Neither operation locks or rolls back. Callers check the store with
    ``StoreProvisioner.ensure_writable`` before adding.
    """

    def __init__(
        self,
        store_path: str,
        generator: Optional[VariantGenerator] = None,
        tiers: Sequence[SizeTier] = SIZE_TIERS,
        filesystem: Optional[LocalFilesystem] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.store_path = store_path
        self.tiers = tuple(tiers)
        self.logger = logger or logging.getLogger(__name__)
        self.fs = filesystem or LocalFilesystem(self.logger)
        self.generator = generator or VariantGenerator(
            store_path, tiers=self.tiers, filesystem=self.fs, logger=self.logger
        )

    def add(self, original_filename: str, source_path: str) -> AssetName:
        """
        Generate the variant set for an uploaded image.

        Args:
            original_filename: Name the image was uploaded as, e.g. 'logo.png'
            source_path: Temporary path of the uploaded file

        Returns:
            The parsed asset name

        Raises:
            InvalidAssetNameError: Filename has no allowed extension
            ImageProcessingError: Generation failed
        """
        asset = AssetName.parse(original_filename)
        self.logger.info(f"Adding image {asset} from {source_path}")
        self.generator.generate(asset, source_path)
        return asset

    def delete(self, name: str) -> List[str]:
        """
        Remove every variant of an image; missing files are ignored.

        Returns:
            Paths that were removed

        Raises:
            InvalidAssetNameError: Name contains a path separator
        """
        asset = AssetName.parse(name, strict=False)
        paths = [
            os.path.join(self.store_path, asset.variant_filename(tier))
            for tier in self.tiers
        ]
        removed = self.fs.remove(paths)
        self.logger.info(f"Deleted image {asset} ({len(removed)} files)")
        return removed
