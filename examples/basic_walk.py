#!/usr/bin/env python3
"""
Basic walk example for dirwalker.

This example demonstrates:
- Configuring a Walker with the fluent builder
- Printing the flat depth-first view as an indented listing
- Reading the walk counters and file metadata
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dirwalker import Walker


def main():
    """Walk a directory and print it as an indented tree."""
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    result = (Walker(root_path)
              .skip_dotted()
              .skip_directories([root_path / "target", root_path / "build"])
              .max_depth(3)
              .max_entries(500)
              .run())

    print(f"Walking: {root_path}")
    print("-" * 50)

    total_size = 0
    for dirent, depth in result.root:
        marker = "/" if dirent.is_dir() else ""
        print(f"{'  ' * depth}{dirent.name}{marker}")
        if dirent.is_file():
            total_size += dirent.stat().st_size

    stats = result.stats
    print(f"\nWalk Summary:")
    print(f"  Directories: {stats.directories:,}")
    print(f"  Files: {stats.files:,}")
    print(f"  Skipped: {stats.skipped:,}")
    print(f"  Total Size: {total_size / 1024:.1f} KB")
    if stats.truncated:
        print("  (entry limit reached, listing truncated)")
    if stats.errors:
        print(f"  Unreadable directories: {len(stats.errors)}")


if __name__ == "__main__":
    main()
