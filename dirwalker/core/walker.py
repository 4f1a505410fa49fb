"""The Walker: a fluent builder plus a bounded depth-first directory walk.

Typical use::

    tree = (Walker("./src")
            .max_depth(2)
            .skip_dotted()
            .walk())

    for dirent, depth in tree:
        print("  " * depth + dirent.name)

Every configuration method returns a new Walker, so a partially configured
walker can be shared and specialized without surprises.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config import PathLike, WalkerConfig
from ..error_policies import ErrorPolicy
from ..errors import InvalidConfigError, RootAccessError
from .dirent import DirEntry, FileType
from .entry import ROOT_DEPTH, Entry
from .reader import DirectoryReader, ScandirReader

logger = logging.getLogger(__name__)


def sort_key(dirent: DirEntry) -> Tuple[int, str]:
    """Ordering of siblings: directories first, then by name.

    Names compare by code point, so "B" sorts before "a".
    """
    return (0 if dirent.is_dir() else 1, dirent.name)


@dataclass
class WalkStats:
    """Counters gathered during one walk.

    Attributes:
        entries: Nodes admitted into the result
        directories: Admitted directories
        files: Admitted regular files
        skipped: Children discarded (symlinks, special files, dotted,
            excluded paths, and anything left over once the cap was hit)
        truncated: True when max_entries stopped the walk before every
            admitted directory was listed
        errors: Directories below the root that could not be listed
    """

    entries: int = 0
    directories: int = 0
    files: int = 0
    skipped: int = 0
    truncated: bool = False
    errors: List[Path] = field(default_factory=list)


@dataclass(frozen=True)
class WalkResult:
    """Tree produced by ``Walker.run()`` together with its counters.

    ``policy`` is the error policy instance this walk used, holding only
    the failures of this walk.
    """
    root: Entry
    stats: WalkStats
    policy: ErrorPolicy


class Walker:
    """Configure a directory walk, then run it with ``walk()``.

    Args:
        root: Directory to start from. Its immediate children become
            depth-0 nodes under a synthetic root Entry.
        reader: Listing primitive; defaults to ScandirReader
    """

    def __init__(self, root: PathLike, reader: Optional[DirectoryReader] = None):
        self._config = WalkerConfig(root=Path(root))
        self._reader = reader if reader is not None else ScandirReader()

    @classmethod
    def from_config(cls, config: WalkerConfig,
                    reader: Optional[DirectoryReader] = None) -> 'Walker':
        walker = cls(config.root, reader=reader)
        walker._config = config
        return walker

    @property
    def config(self) -> WalkerConfig:
        return self._config

    def _with(self, config: WalkerConfig) -> 'Walker':
        return Walker.from_config(config, reader=self._reader)

    # Configuration

    def skip_dotted(self, enabled: bool = True) -> 'Walker':
        """Prune files and directories whose name starts with a dot."""
        return self._with(replace(self._config, skip_dotted=enabled))

    def skip_directories(self, paths: Iterable[PathLike]) -> 'Walker':
        """Prune entries whose path equals one of ``paths``.

        Paths are compared after normalization, and must be spelled the
        way the walk spells them: relative paths are relative to the
        current directory, like the root.

        Args:
            paths: Paths to exclude; replaces any previous exclusions
        """
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        return self._with(self._config.with_skip_paths(paths))

    skip_paths = skip_directories

    def max_depth(self, depth: int) -> 'Walker':
        """Limit nesting: entries deeper than ``depth`` are never listed.

        Args:
            depth: Deepest depth to list; 0 lists only the root's children
        """
        return self._with(replace(self._config, max_depth=depth))

    def max_entries(self, count: int) -> 'Walker':
        """Cap the total number of nodes in the result."""
        return self._with(replace(self._config, max_entries=count))

    def on_error(self, policy: ErrorPolicy) -> 'Walker':
        """Set the policy for directories that fail to list mid-walk.

        Each walk works on a fresh copy of ``policy``; read the failures
        of a walk from ``run().policy``.
        """
        return self._with(replace(self._config, error_policy=policy))

    # Execution

    def walk(self) -> Entry:
        """Walk the root and return the result tree.

        Returns:
            Synthetic root Entry (no dirent) whose children are the
            admitted children of the root

        Raises:
            InvalidConfigError: If the configuration is unusable
            RootAccessError: If the root is missing, unreadable or not a
                directory
            SubtreeReadError: If the error policy aborts the walk
        """
        return self.run().root

    def run(self) -> WalkResult:
        """Like ``walk()``, also returning the walk's counters."""
        problems = self._config.validate()
        if problems:
            raise InvalidConfigError(problems)
        return _Walk(self._config, self._reader).execute()

    def __repr__(self) -> str:
        return f"Walker({self._config!r})"


class _Walk:
    """State of one execution. Never reused."""

    def __init__(self, config: WalkerConfig, reader: DirectoryReader):
        self.config = config
        self.reader = reader
        self.policy = config.resolve_error_policy()
        self.stats = WalkStats()

    def execute(self) -> WalkResult:
        root_path = self.config.root
        try:
            self.reader.check_root(root_path)
            listing = self.reader.read_dir(root_path)
        except OSError as e:
            raise RootAccessError.from_os_error(e, root_path) from e

        logger.debug("Walking %s (max_depth=%d, max_entries=%d)",
                     root_path, self.config.max_depth, self.config.max_entries)

        root = Entry(dirent=None, depth=ROOT_DEPTH)
        # Pending directories as (node, listing); listing is None until read
        stack: List[Tuple[Entry, Optional[List[DirEntry]]]] = [(root, listing)]

        while stack and not self.stats.truncated:
            node, listing = stack.pop()
            if listing is None:
                if self.stats.entries >= self.config.max_entries:
                    # Cap reached: no child of this directory could be admitted
                    self.stats.truncated = True
                    logger.info("Entry limit of %d reached, result truncated at %s",
                                self.config.max_entries, node.dirent.path)
                    break
                listing = self._read(node.dirent.path)
                if listing is None:
                    continue

            admitted = self._admit(listing, node.depth + 1)
            node.children.extend(admitted)

            # Descend only while strictly shallower than max_depth.
            # Pushed reversed so the first directory is walked first.
            descend = [child for child in admitted
                       if child.dirent.is_dir() and child.depth < self.config.max_depth]
            stack.extend((child, None) for child in reversed(descend))

        logger.debug("Walk of %s finished: %d entries, %d skipped",
                     root_path, self.stats.entries, self.stats.skipped)
        return WalkResult(root=root, stats=self.stats, policy=self.policy)

    def _read(self, path: Path) -> Optional[List[DirEntry]]:
        """List a directory below the root, deferring failures to the policy."""
        try:
            return self.reader.read_dir(path)
        except OSError as e:
            self.stats.errors.append(path)
            # The policy raises to abort; returning means truncate here
            self.policy.handle(e, path)
            return None

    def _admit(self, listing: List[DirEntry], depth: int) -> List[Entry]:
        """Filter, order and admit the children of one directory."""
        candidates = sorted(
            (dirent for dirent in listing if self._accepts(dirent)),
            key=sort_key,
        )
        self.stats.skipped += len(listing) - len(candidates)

        admitted = []
        for dirent in candidates:
            if self.stats.entries >= self.config.max_entries:
                self.stats.truncated = True
                self.stats.skipped += len(candidates) - len(admitted)
                logger.info("Entry limit of %d reached, result truncated at %s",
                            self.config.max_entries, dirent.path)
                break
            self.stats.entries += 1
            if dirent.is_dir():
                self.stats.directories += 1
            else:
                self.stats.files += 1
            admitted.append(Entry(dirent=dirent, depth=depth))
        return admitted

    def _accepts(self, dirent: DirEntry) -> bool:
        if dirent.file_type in (FileType.SYMLINK, FileType.OTHER):
            return False
        if self.config.skip_dotted and dirent.is_dotted():
            logger.debug("Pruning dotted entry %s", dirent.path)
            return False
        if self.config.is_excluded(dirent.path):
            logger.debug("Pruning excluded path %s", dirent.path)
            return False
        return True
