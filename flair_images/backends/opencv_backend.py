"""
OpenCVBackend - Low-level pixel-buffer backend built on OpenCV and NumPy.
"""

from typing import Tuple

import cv2
import numpy as np

from ..exceptions import ImageProcessingError
from .base import BackendKind, ImageBackend


class OpenCVBackend(ImageBackend):
    """
    Resizes NumPy pixel buffers with area resampling.

    Only the extensions in ``ENCODE_PARAMS`` are recognized; anything
    else fails before any decoding happens.
    """

    kind = BackendKind.OPENCV

    JPEG_QUALITY = 90

    ENCODE_PARAMS = {
        '.gif': [],
        '.png': [cv2.IMWRITE_PNG_COMPRESSION, 9],
        '.jpg': [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY],
        '.jpeg': [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY],
    }

    def open(self, source_path: str) -> Tuple[np.ndarray, int, int]:
        try:
            data = np.fromfile(source_path, dtype=np.uint8)
            img = cv2.imdecode(data, cv2.IMREAD_UNCHANGED)
        except (OSError, cv2.error) as e:
            self.logger.error(f"OpenCV could not read {source_path}: {e}")
            raise ImageProcessingError() from e

        if img is None:
            self.logger.error(f"OpenCV could not decode {source_path}")
            raise ImageProcessingError()

        height, width = img.shape[:2]
        return img, width, height

    def resize(
        self,
        image: np.ndarray,
        width: int,
        height: int,
        extension: str,
        preserve_alpha: bool
    ) -> bytes:
        ext = extension.lower()
        if ext not in self.ENCODE_PARAMS:
            raise ImageProcessingError(f"Unsupported extension: {extension}")

        try:
            if preserve_alpha:
                working = self._to_bgra(image)
            else:
                working = self._to_bgr(image)

            # Alpha is resampled as its own channel, so nothing is blended
            scaled = cv2.resize(working, (width, height), interpolation=cv2.INTER_AREA)

            ok, buffer = cv2.imencode(ext, scaled, self.ENCODE_PARAMS[ext])
        except cv2.error as e:
            self.logger.error(f"OpenCV could not resize to {width}x{height}: {e}")
            raise ImageProcessingError() from e

        if not ok:
            self.logger.error(f"OpenCV could not encode {ext}")
            raise ImageProcessingError()
        return buffer.tobytes()

    @staticmethod
    def _channels(image: np.ndarray) -> int:
        return 1 if image.ndim == 2 else image.shape[2]

    def _to_bgra(self, image: np.ndarray) -> np.ndarray:
        channels = self._channels(image)
        if channels == 4:
            return image
        if channels == 1:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2BGRA)
        return cv2.cvtColor(image, cv2.COLOR_BGR2BGRA)

    def _to_bgr(self, image: np.ndarray) -> np.ndarray:
        channels = self._channels(image)
        if channels == 1:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if channels == 4:
            # Flatten onto white like the Pillow backend does
            alpha = image[:, :, 3:4].astype(np.float32) / 255.0
            color = image[:, :, :3].astype(np.float32)
            flattened = color * alpha + 255.0 * (1.0 - alpha)
            return flattened.astype(np.uint8)
        return image
