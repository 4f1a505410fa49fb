"""dirwalker - bounded, deterministically ordered directory walks.

dirwalker walks a directory into an in-memory tree of entries that can be
read as a tree or as a flat depth-first sequence:

    from dirwalker import Walker

    tree = Walker(".").skip_dotted().max_depth(2).walk()
    for dirent, depth in tree:
        print("  " * depth + dirent.name)

Siblings are always ordered directories first, then by name. Symbolic
links are never followed nor reported.
"""

import logging

__version__ = "0.1.0"

from .core import (
    ROOT_DEPTH,
    DirectoryReader,
    DirEntry,
    Entry,
    EntryItem,
    FileType,
    ScandirReader,
    Walker,
    WalkResult,
    WalkStats,
)
from .config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ENTRIES, WalkerConfig
from .errors import InvalidConfigError, RootAccessError, SubtreeReadError, WalkError
from .error_policies import (
    CollectErrorsPolicy,
    ErrorPolicy,
    FailFastPolicy,
    TruncateSubtreePolicy,
    create_policy,
)
from .api import (
    count_entries,
    find_entry,
    get_tree_stats,
    group_by_depth,
    iter_entries,
    walk_dir,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Walker",
    "WalkResult",
    "WalkStats",
    "Entry",
    "EntryItem",
    "DirEntry",
    "FileType",
    "ROOT_DEPTH",
    "DirectoryReader",
    "ScandirReader",
    # Config
    "WalkerConfig",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_ENTRIES",
    # Errors
    "WalkError",
    "InvalidConfigError",
    "RootAccessError",
    "SubtreeReadError",
    "ErrorPolicy",
    "TruncateSubtreePolicy",
    "CollectErrorsPolicy",
    "FailFastPolicy",
    "create_policy",
    # API
    "walk_dir",
    "iter_entries",
    "find_entry",
    "count_entries",
    "group_by_depth",
    "get_tree_stats",
]
