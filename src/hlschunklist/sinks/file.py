from __future__ import annotations

import logging
import os

from hlschunklist.constants import FILE_MODE
from hlschunklist.core.errors import SinkError

logger = logging.getLogger(__name__)


class FileSink:
    """Overwrites a local chunklist file with each rendition.

    Parameters
    ----------
    path : str
        Target file. An empty path turns every save into a no-op.
    mode : int
        Permission bits used when the file is created (rw-r--r-- by default).
    """

    def __init__(self, path: str, *, mode: int = FILE_MODE) -> None:
        self.path = path
        self.mode = mode

    def save(self, data: bytes) -> None:
        if not self.path:
            return
        try:
            self._write(self.path, data, self.mode)
        except OSError as e:
            logger.error("Error writing %s: %s", self.path, e)
            raise SinkError(f"failed to write chunklist {self.path}: {e}", target=self.path) from e
        logger.debug("Wrote %s (%d bytes)", self.path, len(data))

    def close(self) -> None:
        return None

    @staticmethod
    def _write(path: str, data: bytes, mode: int) -> None:
        """Truncate-and-write with the given creation mode."""
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
