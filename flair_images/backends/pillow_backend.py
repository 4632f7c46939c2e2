"""
PillowBackend - High-level image backend built on Pillow.
"""

import io
from typing import Tuple

from PIL import Image, UnidentifiedImageError

from ..exceptions import ImageProcessingError
from .base import BackendKind, ImageBackend


class PillowBackend(ImageBackend):
    """
    Resizes with Lanczos resampling on Pillow image objects.
    """

    kind = BackendKind.PILLOW

    JPEG_QUALITY = 90

    OUTPUT_FORMATS = {
        '.jpg': 'JPEG',
        '.jpeg': 'JPEG',
        '.png': 'PNG',
        '.gif': 'GIF',
    }

    def open(self, source_path: str) -> Tuple[Image.Image, int, int]:
        try:
            img = Image.open(source_path)
            img.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            self.logger.error(f"Pillow could not decode {source_path}: {e}")
            raise ImageProcessingError() from e
        width, height = img.size
        return img, width, height

    def resize(
        self,
        image: Image.Image,
        width: int,
        height: int,
        extension: str,
        preserve_alpha: bool
    ) -> bytes:
        output_format = self.OUTPUT_FORMATS.get(extension.lower())
        if output_format is None:
            raise ImageProcessingError(f"Unsupported extension: {extension}")

        try:
            if preserve_alpha:
                # Resample in RGBA so transparent pixels are never composited
                working = image.convert('RGBA')
            else:
                working = self._convert_color_mode(image)

            scaled = working.resize((width, height), Image.Resampling.LANCZOS)

            output = io.BytesIO()
            if output_format == 'JPEG':
                scaled.save(output, format='JPEG', quality=self.JPEG_QUALITY, optimize=True)
            elif output_format == 'PNG':
                scaled.save(output, format='PNG', optimize=True)
            else:
                scaled.save(output, format='GIF')
            return output.getvalue()
        except (ValueError, OSError) as e:
            self.logger.error(f"Pillow could not resize to {width}x{height}: {e}")
            raise ImageProcessingError() from e

    def close(self, image: Image.Image) -> None:
        image.close()

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """Flatten transparency onto white for formats without alpha."""
        if img.mode in ('RGBA', 'LA') or (img.mode == 'P' and 'transparency' in img.info):
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, (255, 255, 255))
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode != 'RGB':
            return img.convert('RGB')
        return img
