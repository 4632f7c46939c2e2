"""
LocalFilesystem - Filesystem operations used by the store and generator.
"""

import logging
import os
from typing import Iterable, List, Optional, Union

PathLike = Union[str, os.PathLike]


class LocalFilesystem:
    """
    Thin wrapper over the local filesystem.

    Components take one of these instead of calling ``os`` directly so
    tests can substitute a mock for permission failures.
    """

    CHMOD_ALL = 0o777

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def is_writable(self, path: PathLike) -> bool:
        """True if path exists and the current process may write to it."""
        return os.path.exists(path) and os.access(path, os.W_OK)

    def chmod(self, path: PathLike, mode: int) -> None:
        os.chmod(path, mode)

    def mkdir(self, path: PathLike, mode: int) -> None:
        """Create a directory and its parents, then apply mode past the umask."""
        os.makedirs(path, mode=mode, exist_ok=True)
        os.chmod(path, mode)

    def listdir(self, path: PathLike) -> List[str]:
        try:
            return os.listdir(path)
        except FileNotFoundError:
            return []

    def write_bytes(self, path: PathLike, data: bytes) -> None:
        with open(path, 'wb') as f:
            f.write(data)

    def remove(self, paths: Iterable[PathLike]) -> List[str]:
        """
        Remove files, skipping any that are already gone.

        Returns:
            List of paths that were actually removed
        """
        removed = []
        for path in paths:
            try:
                os.remove(path)
            except FileNotFoundError:
                self.logger.debug(f"Already absent: {path}")
                continue
            removed.append(os.fspath(path))
        return removed
