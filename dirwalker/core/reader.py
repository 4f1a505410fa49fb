"""Directory reading for dirwalker.

The DirectoryReader is the walker's only contact with the platform. It
lists one directory at a time and hands back DirEntry snapshots, so the
walker itself never holds an open directory handle.
"""

import errno
import logging
import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .dirent import DirEntry

logger = logging.getLogger(__name__)


class DirectoryReader(ABC):
    """Abstract listing primitive used by the Walker.

    Implementations must close any handle they open before returning
    from ``read_dir``, whether or not an error occurred.
    """

    @abstractmethod
    def read_dir(self, path: Path) -> List[DirEntry]:
        """List the immediate children of ``path``.

        Order is unspecified; the walker sorts what it admits.

        Raises:
            OSError: If the directory cannot be listed
        """
        pass

    @abstractmethod
    def check_root(self, path: Path) -> None:
        """Verify that ``path`` can be used as a walk root.

        Raises:
            OSError: If the path is missing, unreadable or not a directory
        """
        pass


class ScandirReader(DirectoryReader):
    """Reader backed by ``os.scandir``."""

    def read_dir(self, path: Path) -> List[DirEntry]:
        # The whole listing is materialized inside the with-block so the
        # handle is closed before the caller looks at any child.
        with os.scandir(path) as it:
            entries = [DirEntry.from_os(path, entry) for entry in it]
        logger.debug("Listed %d entries in %s", len(entries), path)
        return entries

    def check_root(self, path: Path) -> None:
        # Follows symlinks: a root given as a link to a directory is fine,
        # only links found during the walk are excluded.
        st = os.stat(path)
        if not stat.S_ISDIR(st.st_mode):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
