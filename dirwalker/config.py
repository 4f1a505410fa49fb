"""Configuration for dirwalker.

A WalkerConfig holds everything a walk needs to know before it starts.
It is frozen: the Walker builder produces a new config for every option
it sets, and a walk reads it without ever changing it.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Union

from .error_policies import ErrorPolicy, TruncateSubtreePolicy


DEFAULT_MAX_DEPTH = 100
DEFAULT_MAX_ENTRIES = 10_000

# Directory names pruned by the source_tree() preset
BUILD_DIRECTORIES = frozenset({
    'target',
    'build',
    'dist',
    'node_modules',
    '__pycache__',
})

PathLike = Union[str, os.PathLike]


def normalize_path(path: PathLike) -> str:
    """Normalize a path for exclusion matching.

    Both the configured exclusions and the paths produced during a walk go
    through this, so "./target", "target/" and "target" compare equal.
    """
    return os.path.normpath(os.fspath(path))


@dataclass(frozen=True)
class WalkerConfig:
    """Complete configuration for one walk.

    Attributes:
        root: Directory to walk
        skip_dotted: Prune entries whose name starts with a dot
        skip_paths: Normalized paths to prune
        max_depth: Deepest depth listed; directories at this depth are
            not descended into (root's children have depth 0)
        max_entries: Ceiling on the number of nodes in the result
        error_policy: What to do when a directory below the root cannot be
            listed. Each walk works on its own copy (None means a
            TruncateSubtreePolicy)
    """

    root: Path
    skip_dotted: bool = False
    skip_paths: FrozenSet[str] = field(default_factory=frozenset)
    max_depth: int = DEFAULT_MAX_DEPTH
    max_entries: int = DEFAULT_MAX_ENTRIES
    error_policy: Optional[ErrorPolicy] = None

    # Convenience constructors for common configurations

    @classmethod
    def shallow_scan(cls, root: PathLike, max_depth: int = 0) -> 'WalkerConfig':
        """Create config for listing just the top of a tree.

        Args:
            root: Directory to walk
            max_depth: Deepest depth to list (default 0 = root's children only)
        """
        return cls(root=Path(root), max_depth=max_depth)

    @classmethod
    def source_tree(cls, root: PathLike) -> 'WalkerConfig':
        """Create config for walking a source checkout.

        Skips dotted entries (.git, .venv...) and the usual build output
        directories directly under the root.
        """
        root_path = Path(root)
        return cls(
            root=root_path,
            skip_dotted=True,
            skip_paths=frozenset(normalize_path(root_path / name) for name in BUILD_DIRECTORIES),
        )

    def with_skip_paths(self, paths: Iterable[PathLike]) -> 'WalkerConfig':
        """Return a copy excluding exactly ``paths``.

        Anything that is not a str or path-like object is kept as given,
        for ``validate()`` to report.
        """
        return replace(self, skip_paths=frozenset(
            normalize_path(p) if isinstance(p, (str, os.PathLike)) else p
            for p in paths
        ))

    def resolve_error_policy(self) -> ErrorPolicy:
        """Policy instance for one walk, with no errors recorded yet."""
        if self.error_policy is None:
            return TruncateSubtreePolicy()
        return self.error_policy.fresh()

    def is_excluded(self, path: PathLike) -> bool:
        return bool(self.skip_paths) and normalize_path(path) in self.skip_paths

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            errors.append("max_depth must be an integer")
        elif self.max_depth < 0:
            errors.append("max_depth cannot be negative")

        if not isinstance(self.max_entries, int) or isinstance(self.max_entries, bool):
            errors.append("max_entries must be an integer")
        elif self.max_entries <= 0:
            errors.append("max_entries must be positive")

        if any(not isinstance(p, str) for p in self.skip_paths):
            errors.append("skip_paths must be str paths")

        if self.error_policy is not None and not isinstance(self.error_policy, ErrorPolicy):
            errors.append("error_policy must be an ErrorPolicy instance")

        return errors
