"""Core components of dirwalker.

This package contains the entry model, the directory reader and the
walker engine.
"""

from .dirent import DirEntry, FileType
from .entry import ROOT_DEPTH, Entry, EntryItem
from .reader import DirectoryReader, ScandirReader
from .walker import Walker, WalkResult, WalkStats, sort_key

__all__ = [
    "DirEntry",
    "FileType",
    "ROOT_DEPTH",
    "Entry",
    "EntryItem",
    "DirectoryReader",
    "ScandirReader",
    "Walker",
    "WalkResult",
    "WalkStats",
    "sort_key",
]
