"""
Error handling policies for dirwalker.

A policy decides what happens when a directory below the walk root cannot
be listed: the walk either truncates that subtree and carries on, or
aborts. The chosen policy is applied to every directory below the root;
failures on the root itself are always fatal and never reach a policy.
"""

import copy
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from .errors import SubtreeReadError

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for subtree read failure policies.

    ``handle`` returning normally means "truncate": the failing directory
    stays in the tree with no children. Raising aborts the whole walk.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[Path] = []

    @abstractmethod
    def handle(self, error: OSError, path: Path) -> None:
        """
        Handle a failure to list ``path``.

        Args:
            error: The OSError raised by the directory reader
            path: The directory that could not be listed
        """
        pass

    def fresh(self) -> 'ErrorPolicy':
        """Return a copy of this policy with no recorded errors.

        A walk handles failures with its own copy, so the policy given to
        a Walker only serves as a template and can be shared between runs.
        """
        policy = copy.copy(self)
        policy.errors = []
        policy.skipped_paths = []
        return policy

    def _record(self, error: OSError, path: Path) -> None:
        self.errors.append({
            'path': path,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })
        self.skipped_paths.append(path)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'not_found_errors': sum(1 for e in self.errors if e['error_type'] == 'FileNotFoundError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class TruncateSubtreePolicy(ErrorPolicy):
    """
    Default policy: log a warning and keep what was gathered so far.

    A snapshot of a live filesystem has to tolerate directories vanishing
    or changing permissions mid-walk.
    """

    def handle(self, error: OSError, path: Path) -> None:
        self._record(error, path)
        if isinstance(error, PermissionError):
            logger.warning("Skipping inaccessible directory '%s': %s", path, error)
        else:
            logger.warning("Error listing '%s', subtree truncated: %s", path, error)


class CollectErrorsPolicy(ErrorPolicy):
    """
    Truncate like the default policy, without logging.

    Useful for collecting every failure and presenting them at the end.
    """

    def handle(self, error: OSError, path: Path) -> None:
        self._record(error, path)
        logger.debug("Collected error for '%s': %s", path, error)


class FailFastPolicy(ErrorPolicy):
    """
    Policy that aborts the walk on the first unreadable directory.

    Useful when partial results are not acceptable.
    """

    def handle(self, error: OSError, path: Path) -> None:
        self._record(error, path)
        raise SubtreeReadError.from_os_error(error, path) from error


def create_policy(strict: bool = False, verbose: bool = True) -> ErrorPolicy:
    """
    Convenience function to pick a policy.

    Args:
        strict: If True, use FailFastPolicy
        verbose: If False (and not strict), truncate without warnings

    Returns:
        A new ErrorPolicy instance
    """
    if strict:
        return FailFastPolicy()
    if verbose:
        return TruncateSubtreePolicy()
    return CollectErrorsPolicy()
