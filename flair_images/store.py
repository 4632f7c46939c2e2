"""
StoreProvisioner - Makes sure the flair image directory can be written.
"""

import logging
from typing import Optional

from .filesystem import LocalFilesystem, PathLike


class StoreProvisioner:
    """
    Ensures the image store exists and is writable.

    Missing directories are created and read-only directories are opened
    up to ``CHMOD_ALL``. Failures are reported as ``False``, never raised,
    so the caller decides how to surface a misconfigured store.
    """

    def __init__(
        self,
        filesystem: Optional[LocalFilesystem] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.fs = filesystem or LocalFilesystem(self.logger)

    def ensure_writable(self, path: PathLike) -> bool:
        """
        Check that path is writable, fixing it up if possible.

        Args:
            path: Store directory

        Returns:
            True if the directory is writable after any repair attempt
        """
        if self.fs.is_writable(path):
            return True

        try:
            if self.fs.exists(path):
                self.logger.info(f"Store not writable, changing permissions: {path}")
                self.fs.chmod(path, LocalFilesystem.CHMOD_ALL)
            else:
                self.logger.info(f"Creating store: {path}")
                self.fs.mkdir(path, LocalFilesystem.CHMOD_ALL)
        except OSError as e:
            self.logger.warning(f"Could not prepare store {path}: {e}")

        writable = self.fs.is_writable(path)
        if not writable:
            self.logger.warning(f"Store is not writable: {path}")
        return writable
