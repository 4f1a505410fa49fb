"""Test fixtures for dirwalker consumers.

These fixtures let test suites exercise the Walker without depending on
what the host filesystem allows: permission errors, directories vanishing
mid-walk and special files are hard to stage for real, especially when
tests run as root.
"""

import errno
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..core.dirent import DirEntry, FileType
from ..core.reader import DirectoryReader, ScandirReader


class MemoryReader(DirectoryReader):
    """In-memory directory tree implementing the DirectoryReader interface.

    Paths are declared relative to a root; entries ending in "/" are
    directories, the rest are files. Symlinks and special files can be
    declared explicitly.

    Example:
        reader = MemoryReader("root", ["src/", "src/lib.rs", "Cargo.toml"])
        reader.add("link", FileType.SYMLINK)
        reader.fail("src", PermissionError)
        tree = Walker("root", reader=reader).walk()
    """

    def __init__(self, root: Union[str, Path], paths: Iterable[str] = ()):
        self.root = Path(root)
        self._children: Dict[Path, Dict[str, FileType]] = {self.root: {}}
        self._failures: Dict[Path, OSError] = {}
        self.reads: List[Path] = []
        for path in paths:
            if path.endswith('/'):
                self.add(path.rstrip('/'), FileType.DIRECTORY)
            else:
                self.add(path, FileType.FILE)

    def add(self, relative: str, file_type: FileType) -> Path:
        """Declare an entry, creating missing parent directories."""
        parent = self.root
        parts = Path(relative).parts
        for part in parts[:-1]:
            self._children[parent].setdefault(part, FileType.DIRECTORY)
            parent = parent / part
            self._children.setdefault(parent, {})
        path = parent / parts[-1]
        self._children[parent][parts[-1]] = file_type
        if file_type is FileType.DIRECTORY:
            self._children.setdefault(path, {})
        return path

    def fail(self, relative: str, error: type = PermissionError) -> None:
        """Make listing ``relative`` raise ``error``."""
        path = self.root / relative if relative else self.root
        code = errno.EACCES if error is PermissionError else errno.ENOENT
        self._failures[path] = error(code, os.strerror(code), str(path))

    def read_dir(self, path: Path) -> List[DirEntry]:
        self.reads.append(path)
        if path in self._failures:
            raise self._failures[path]
        if path not in self._children:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
        # Reverse insertion order: callers must not rely on listing order
        return [
            DirEntry(path=path / name, name=name, file_type=file_type)
            for name, file_type in reversed(list(self._children[path].items()))
        ]

    def check_root(self, path: Path) -> None:
        if path not in self._children:
            parent_listing = self._children.get(path.parent, {})
            if path.name in parent_listing:
                raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))


class ReadCountingReader(ScandirReader):
    """ScandirReader that records every directory it lists."""

    def __init__(self):
        self.reads: List[Path] = []

    def read_dir(self, path: Path) -> List[DirEntry]:
        self.reads.append(path)
        return super().read_dir(path)


def create_test_tree(base_dir: Path, paths: Optional[Iterable[str]] = None) -> None:
    """Create a directory structure on disk.

    Entries ending in "/" become directories, the rest small text files.
    The default structure mirrors a small Rust crate::

        base_dir/
        ├── .git/
        │   └── HEAD
        ├── src/
        │   └── lib.rs
        ├── target/
        │   └── debug/
        │       └── build.log
        ├── tests/
        │   └── walkdir.rs
        ├── .gitignore
        ├── Cargo.lock
        ├── Cargo.toml
        └── README.md
    """
    if paths is None:
        paths = [
            ".git/", ".git/HEAD",
            "src/", "src/lib.rs",
            "target/", "target/debug/", "target/debug/build.log",
            "tests/", "tests/walkdir.rs",
            ".gitignore", "Cargo.lock", "Cargo.toml", "README.md",
        ]
    for path in paths:
        target = base_dir / path
        if path.endswith('/'):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"content of {path}")
