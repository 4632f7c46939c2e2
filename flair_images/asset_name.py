"""
AssetName - Parsed base name and extension of a flair image.
"""

import os
from dataclasses import dataclass
from typing import FrozenSet

from .exceptions import InvalidAssetNameError
from .size_tier import SizeTier

ALLOWED_EXTENSIONS: FrozenSet[str] = frozenset({'.gif', '.png', '.jpg', '.jpeg'})

# Formats that carry transparency through the resize
ALPHA_EXTENSIONS: FrozenSet[str] = frozenset({'.gif', '.png'})


@dataclass(frozen=True)
class AssetName:
    """
    A flair image identified by base name and extension.

    The extension keeps its leading period and the case of the upload,
    so ``Logo.PNG`` is stored as ``Logo-x1.PNG``.

    Attributes:
        base: Filename without extension
        ext: Extension including the period, or '' for lenient parses
    """
    base: str
    ext: str

    @classmethod
    def parse(cls, filename: str, strict: bool = True) -> 'AssetName':
        """
        Split a filename at its last period.

        Args:
            filename: Name such as 'logo.png'
            strict: Also reject names that cannot be generated (no
                extension, empty base, disallowed extension)

        Raises:
            InvalidAssetNameError: Name contains a path separator, or is
                not usable under strict parsing
        """
        index = filename.rfind('.')
        if index == -1:
            base, ext = filename, ''
        else:
            base, ext = filename[:index], filename[index:]

        if '/' in filename or os.sep in filename or (os.altsep and os.altsep in filename):
            raise InvalidAssetNameError(f"Path separators not allowed: {filename!r}")

        if strict:
            if not ext:
                raise InvalidAssetNameError(f"Missing extension: {filename!r}")
            if not base:
                raise InvalidAssetNameError(f"Missing base name: {filename!r}")
            if ext.lower() not in ALLOWED_EXTENSIONS:
                raise InvalidAssetNameError(f"Extension not allowed: {ext!r}")

        return cls(base=base, ext=ext)

    @property
    def normalized_ext(self) -> str:
        return self.ext.lower()

    @property
    def supports_alpha(self) -> bool:
        return self.normalized_ext in ALPHA_EXTENSIONS

    def variant_filename(self, tier: SizeTier) -> str:
        """Filename of the variant for a size tier, e.g. 'logo-x2.png'."""
        return f"{self.base}{tier.suffix}{self.ext}"

    def __str__(self) -> str:
        return f"{self.base}{self.ext}"
