"""Testing utilities for dirwalker consumers."""

from .fixtures import MemoryReader, ReadCountingReader, create_test_tree

__all__ = ['MemoryReader', 'ReadCountingReader', 'create_test_tree']
