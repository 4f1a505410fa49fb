"""High-level API for dirwalker.

This module provides simple, functional interfaces for common walks.
These functions wrap the Walker builder for ease of use in simple cases.
"""

from collections import OrderedDict
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ENTRIES, PathLike
from .core.dirent import DirEntry
from .core.entry import Entry, EntryItem
from .core.reader import DirectoryReader
from .core.walker import Walker
from .error_policies import ErrorPolicy


def walk_dir(
    root: PathLike,
    skip_dotted: bool = False,
    skip_directories: Optional[Iterable[PathLike]] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_entries: int = DEFAULT_MAX_ENTRIES,
    on_error: Optional[ErrorPolicy] = None,
    reader: Optional[DirectoryReader] = None,
) -> Entry:
    """Simple interface for walking a directory.

    Args:
        root: Directory to walk
        skip_dotted: Prune dotted files and directories
        skip_directories: Paths to prune
        max_depth: Deepest depth to list (root's children are depth 0)
        max_entries: Maximum number of nodes in the result
        on_error: Policy for directories that fail to list mid-walk
        reader: Listing primitive (defaults to os.scandir)

    Returns:
        Synthetic root Entry of the result tree

    Example:
        >>> tree = walk_dir(".", skip_dotted=True, max_depth=2)
        >>> for dirent, depth in tree:
        ...     print("  " * depth + dirent.name)
    """
    walker = (Walker(root, reader=reader)
              .skip_dotted(skip_dotted)
              .max_depth(max_depth)
              .max_entries(max_entries))
    if skip_directories:
        walker = walker.skip_directories(skip_directories)
    if on_error is not None:
        walker = walker.on_error(on_error)
    return walker.walk()


def iter_entries(root: PathLike, **kwargs) -> Iterator[EntryItem]:
    """Walk ``root`` and yield the flat ``(dirent, depth)`` view.

    The walk itself happens eagerly on the first ``next()``; the options
    are those of ``walk_dir``.
    """
    yield from walk_dir(root, **kwargs)


def find_entry(tree: Entry, name: str) -> Optional[Entry]:
    """Find the first node named ``name`` in depth-first pre-order.

    Example:
        >>> found = find_entry(walk_dir("."), "lib.rs")
    """
    return tree.find(name)


def count_entries(tree: Entry) -> int:
    """Count the nodes of a result tree (the synthetic root excluded)."""
    return len(tree)


def group_by_depth(tree: Entry) -> Dict[int, List[DirEntry]]:
    """Group the flat view by depth, keeping pre-order within each level.

    Returns:
        Mapping of depth to the dirents found at that depth
    """
    levels: Dict[int, List[DirEntry]] = OrderedDict()
    for dirent, depth in tree:
        levels.setdefault(depth, []).append(dirent)
    return levels


def get_tree_stats(tree: Entry) -> Dict[str, Any]:
    """Get statistics about a result tree.

    Returns:
        Dictionary with node counts and the deepest depth reached

    Example:
        >>> stats = get_tree_stats(walk_dir("."))
        >>> print(f"Total entries: {stats['total_entries']}")
    """
    stats = {
        'total_entries': 0,
        'directories': 0,
        'files': 0,
        'max_depth': None,
        'depth_distribution': {},
    }

    for dirent, depth in tree:
        stats['total_entries'] += 1
        if dirent.is_dir():
            stats['directories'] += 1
        else:
            stats['files'] += 1
        if stats['max_depth'] is None or depth > stats['max_depth']:
            stats['max_depth'] = depth
        stats['depth_distribution'][depth] = stats['depth_distribution'].get(depth, 0) + 1

    return stats
