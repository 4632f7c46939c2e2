"""
VariantGenerator - Writes the three size-tier variants of a flair image.
"""

import logging
import os
from typing import List, Optional, Sequence

from .asset_name import AssetName
from .backends import ImageBackend, default_backend
from .exceptions import ImageProcessingError
from .filesystem import LocalFilesystem
from .size_tier import SIZE_TIERS, SizeTier


def scaled_width(src_width: int, src_height: int, height: int) -> int:
    """
    Width for a target height, keeping the source aspect ratio.

    Truncates rather than rounds: 200x100 at height 54 gives 108,
    333x100 at height 16 gives 53.
    """
    return int(src_width * (height / src_height))


class VariantGenerator:
    """
    Generates the pre-scaled variants of a source image.

    Each tier is written to ``{store}/{base}-x{tier}{ext}``. Tiers are
    written in order and independently: if a write fails, earlier tiers
    stay on disk and calling generate() again rewrites the whole set.
    """

    def __init__(
        self,
        store_path: str,
        backend: Optional[ImageBackend] = None,
        tiers: Sequence[SizeTier] = SIZE_TIERS,
        filesystem: Optional[LocalFilesystem] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize variant generator.

        Args:
            store_path: Directory the variants are written to
            backend: Image backend; the detected default is used if omitted
            tiers: Size tiers to produce
            filesystem: Filesystem wrapper for writes
            logger: Optional logger instance
        """
        self.store_path = store_path
        self.backend = backend
        self.tiers = tuple(tiers)
        self.logger = logger or logging.getLogger(__name__)
        self.fs = filesystem or LocalFilesystem(self.logger)

    def _resolve_backend(self) -> ImageBackend:
        backend = self.backend or default_backend()
        if backend is None:
            self.logger.error("No image backend available")
            raise ImageProcessingError("No image backend available")
        return backend

    def variant_path(self, asset: AssetName, tier: SizeTier) -> str:
        return os.path.join(self.store_path, asset.variant_filename(tier))

    def generate(self, asset: AssetName, source_path: str) -> List[str]:
        """
        Generate every tier for an asset.

        Args:
            asset: Target name; its extension picks the output format
            source_path: Path to the uploaded source image

        Returns:
            Paths written, in tier order

        Raises:
            ImageProcessingError: No backend, undecodable source, or a failed write
        """
        backend = self._resolve_backend()

        image, src_width, src_height = backend.open(source_path)
        written = []
        try:
            if src_width <= 0 or src_height <= 0:
                self.logger.error(f"Invalid source dimensions {src_width}x{src_height}: {source_path}")
                raise ImageProcessingError()

            for tier in self.tiers:
                width = scaled_width(src_width, src_height, tier.height)
                if width < 1:
                    self.logger.error(
                        f"Source {src_width}x{src_height} too narrow for height {tier.height}"
                    )
                    raise ImageProcessingError()

                data = backend.resize(
                    image, width, tier.height, asset.ext, asset.supports_alpha
                )

                dest = self.variant_path(asset, tier)
                try:
                    self.fs.write_bytes(dest, data)
                except OSError as e:
                    self.logger.error(f"Could not write {dest}: {e}")
                    raise ImageProcessingError() from e

                self.logger.info(f"Wrote {dest} ({width}x{tier.height}, {len(data)} bytes)")
                written.append(dest)
        finally:
            backend.close(image)

        return written
