"""
Image backends and runtime capability detection.

Pillow is preferred; OpenCV is the fallback. Neither library is imported
until a backend is actually built, so detection works when both are absent.
"""

import functools
import importlib.util
import logging
from typing import Optional

from .base import BackendKind, ImageBackend

logger = logging.getLogger(__name__)

# Distributions each backend needs, by import name
BACKEND_MODULES = {
    BackendKind.PILLOW: ('PIL',),
    BackendKind.OPENCV: ('cv2', 'numpy'),
}


def _modules_available(names) -> bool:
    return all(importlib.util.find_spec(name) is not None for name in names)


def detect() -> Optional[BackendKind]:
    """Return the preferred available backend kind, or None."""
    for kind in (BackendKind.PILLOW, BackendKind.OPENCV):
        if _modules_available(BACKEND_MODULES[kind]):
            return kind
    return None


def can_process() -> bool:
    """True if any image backend is installed."""
    return detect() is not None


def create_backend(kind: BackendKind, logger: Optional[logging.Logger] = None) -> ImageBackend:
    """Build a backend of the given kind."""
    if kind is BackendKind.PILLOW:
        from .pillow_backend import PillowBackend
        return PillowBackend(logger)
    if kind is BackendKind.OPENCV:
        from .opencv_backend import OpenCVBackend
        return OpenCVBackend(logger)
    raise ValueError(f"Unknown backend: {kind}")


@functools.lru_cache(maxsize=None)
def default_backend() -> Optional[ImageBackend]:
    """The preferred backend, built once per process, or None if none is installed."""
    kind = detect()
    if kind is None:
        logger.warning("No image backend available (install Pillow or opencv-python)")
        return None
    logger.debug(f"Using image backend: {kind.value}")
    return create_backend(kind)


__all__ = [
    "BackendKind",
    "ImageBackend",
    "detect",
    "can_process",
    "create_backend",
    "default_backend",
]
