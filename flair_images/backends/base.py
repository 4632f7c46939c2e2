"""
ImageBackend - Interface shared by the Pillow and OpenCV backends.
"""

import enum
import logging
from typing import Any, Optional, Tuple


class BackendKind(enum.Enum):
    """Supported backends, in order of preference."""
    PILLOW = 'pillow'
    OPENCV = 'opencv'


class ImageBackend:
    """
    Decodes a source image and produces encoded, resized copies of it.

    Subclasses raise ``ImageProcessingError`` for anything that goes
    wrong inside the image library.
    """

    kind: BackendKind

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def open(self, source_path: str) -> Tuple[Any, int, int]:
        """
        Decode a source file.

        Returns:
            Tuple of (image handle, width, height)
        """
        raise NotImplementedError

    def resize(
        self,
        image: Any,
        width: int,
        height: int,
        extension: str,
        preserve_alpha: bool
    ) -> bytes:
        """
        Resize a decoded image and encode it for the given extension.

        Args:
            image: Handle returned by open()
            width: Target width in pixels
            height: Target height in pixels
            extension: Output extension including the period (e.g. '.png')
            preserve_alpha: Keep transparent pixels transparent

        Returns:
            Encoded image bytes
        """
        raise NotImplementedError

    def close(self, image: Any) -> None:
        """Release a decoded image."""
