"""
Exceptions raised by the flair image core.
"""


class FlairImageError(Exception):
    """Base class for flair image errors."""


class ImageProcessingError(FlairImageError):
    """
    Raised when variant generation fails.

    Covers a missing backend, an undecodable source, and a failed write.
    Backend detail is logged, not carried in the message.
    """

    def __init__(self, message: str = "Image processing failed"):
        super().__init__(message)


class InvalidAssetNameError(FlairImageError, ValueError):
    """Raised when an uploaded filename cannot name an image asset."""
