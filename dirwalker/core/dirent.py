"""Directory entry snapshot for dirwalker.

A DirEntry is a small, immutable copy of what the platform directory
listing reported for one child. Unlike ``os.DirEntry`` it outlives the
listing handle, so it can be stored in the result tree and serialized.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class FileType(Enum):
    """Classification of a filesystem node as seen by the listing primitive."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"  # fifo, socket, device...

    @classmethod
    def of(cls, entry: os.DirEntry) -> 'FileType':
        """Classify an ``os.DirEntry`` without following symlinks.

        The symlink check comes first: a link pointing at a directory
        must never be classified as one.
        """
        if entry.is_symlink():
            return cls.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return cls.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class DirEntry:
    """Information about one filesystem node.

    Attributes:
        path: Path of the node, built by joining the walk root with the
            names of every directory on the way down
        name: Final path component
        file_type: Type reported by the listing primitive
        inode: Inode number when the platform reports it eagerly
    """

    path: Path
    name: str
    file_type: FileType
    inode: Optional[int] = None

    @classmethod
    def from_os(cls, parent: Path, entry: os.DirEntry) -> 'DirEntry':
        """Snapshot an ``os.DirEntry`` produced while listing ``parent``."""
        try:
            inode = entry.inode()
        except OSError:
            inode = None
        return cls(
            path=parent / entry.name,
            name=entry.name,
            file_type=FileType.of(entry),
            inode=inode,
        )

    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    def is_file(self) -> bool:
        return self.file_type is FileType.FILE

    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK

    def is_dotted(self) -> bool:
        """True when the name starts with the hidden-file marker."""
        return self.name.startswith('.')

    def stat(self) -> os.stat_result:
        """Return lstat metadata for this node.

        Not cached: the tree is a snapshot of names and types, and
        metadata is fetched only when a caller asks for it.
        """
        return os.lstat(self.path)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form suitable for JSON or similar encoders."""
        return {
            'path': str(self.path),
            'name': self.name,
            'type': self.file_type.value,
            'inode': self.inode,
        }

    def __str__(self) -> str:
        return str(self.path)
