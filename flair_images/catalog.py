"""
AssetCatalog - Read-only view of flair images on disk and in use.
"""

import logging
import os
import re
from typing import Optional, Sequence, Set

from .asset_name import ALLOWED_EXTENSIONS, AssetName
from .filesystem import LocalFilesystem
from .flair_db import FLAIR_TYPE_IMAGE, UsageRepository
from .size_tier import SIZE_TIERS, SizeTier


class AssetCatalog:
    """
    Lists complete variant sets on disk and image references in the database.

    Nothing is cached; each call re-reads the store directory or queries
    the usage repository. No set arithmetic happens here.
    """

    def __init__(
        self,
        store_path: str,
        usage: UsageRepository,
        tiers: Sequence[SizeTier] = SIZE_TIERS,
        extensions=ALLOWED_EXTENSIONS,
        filesystem: Optional[LocalFilesystem] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.store_path = store_path
        self.usage = usage
        self.tiers = tuple(tiers)
        self.logger = logger or logging.getLogger(__name__)
        self.fs = filesystem or LocalFilesystem(self.logger)

        first = self.tiers[0]
        ext_pattern = '|'.join(sorted(re.escape(ext[1:]) for ext in extensions))
        # Captures: (base, ext) from e.g. 'logo-x1.png'
        self._first_tier_pattern = re.compile(
            rf'^(.+){re.escape(first.suffix)}(\.(?:{ext_pattern}))$',
            re.IGNORECASE
        )

    def list_available(self) -> Set[str]:
        """
        Names of assets with every tier present, e.g. {'logo.png'}.

        Partial sets are skipped without error.
        """
        available = set()
        for filename in self.fs.listdir(self.store_path):
            match = self._first_tier_pattern.match(filename)
            if not match:
                continue

            asset = AssetName(base=match.group(1), ext=match.group(2))
            if self.is_complete(asset):
                available.add(str(asset))
            else:
                self.logger.debug(f"Skipping incomplete variant set: {asset}")

        return available

    def is_complete(self, asset: AssetName) -> bool:
        """True if every tier file exists for the asset."""
        return all(
            self.fs.exists(os.path.join(self.store_path, asset.variant_filename(tier)))
            for tier in self.tiers
        )

    def list_used(self) -> Set[str]:
        """Distinct image names referenced by image flair."""
        return set(self.usage.distinct_images(FLAIR_TYPE_IMAGE))

    def count_references(self, name: str) -> int:
        """Number of image flair records referencing name."""
        return self.usage.count_where(FLAIR_TYPE_IMAGE, name)
