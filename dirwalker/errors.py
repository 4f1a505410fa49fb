"""Exceptions raised by dirwalker.

Reaching a depth or entry limit is never an error; only unusable
configuration and unreadable directories are.
"""

from typing import List


class WalkError(Exception):
    """Base class for every dirwalker error."""
    pass


class InvalidConfigError(WalkError, ValueError):
    """Raised when a walker configuration fails validation."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")


class RootAccessError(WalkError, OSError):
    """Raised when the walk root is missing, unreadable or not a directory.

    Carries the errno, strerror and filename of the underlying OSError,
    which is also chained as ``__cause__``.
    """

    @classmethod
    def from_os_error(cls, error: OSError, path) -> 'RootAccessError':
        return cls(error.errno, error.strerror or str(error), str(path))


class SubtreeReadError(WalkError, OSError):
    """Raised by the fail-fast policy when a directory below the root
    cannot be listed."""

    @classmethod
    def from_os_error(cls, error: OSError, path) -> 'SubtreeReadError':
        return cls(error.errno, error.strerror or str(error), str(path))
