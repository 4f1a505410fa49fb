"""Tests for the functional API.

These double as checks of the properties every walk must satisfy, run
over a handful of option combinations.
"""

import itertools
import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dirwalker import (
    Entry,
    RootAccessError,
    count_entries,
    find_entry,
    get_tree_stats,
    group_by_depth,
    iter_entries,
    walk_dir,
)
from dirwalker.testing import MemoryReader, create_test_tree


@pytest.fixture
def crate(tmp_path):
    create_test_tree(tmp_path)
    return tmp_path


def test_walk_dir_defaults(crate):
    tree = walk_dir(crate)
    assert count_entries(tree) == 13


def test_walk_dir_options(crate):
    tree = walk_dir(
        crate,
        skip_dotted=True,
        skip_directories=[crate / "target"],
        max_depth=0,
    )
    assert [c.dirent.name for c in tree.children] == [
        "src", "tests", "Cargo.lock", "Cargo.toml", "README.md",
    ]


def test_walk_dir_missing_root(tmp_path):
    with pytest.raises(RootAccessError):
        walk_dir(tmp_path / "missing")


def test_iter_entries(crate):
    items = list(iter_entries(crate, skip_dotted=True, max_entries=3))
    assert [(d.name, depth) for d, depth in items] == [
        ("src", 0), ("target", 0), ("tests", 0),
    ]


def test_find_entry(crate):
    tree = walk_dir(crate)
    assert find_entry(tree, "walkdir.rs").dirent.path == crate / "tests" / "walkdir.rs"
    assert find_entry(tree, "nothing") is None


def test_group_by_depth(crate):
    levels = group_by_depth(walk_dir(crate, skip_dotted=True))
    assert list(levels) == [0, 1, 2]
    assert [d.name for d in levels[1]] == ["lib.rs", "debug", "walkdir.rs"]
    assert [d.name for d in levels[2]] == ["build.log"]


def test_get_tree_stats(crate):
    stats = get_tree_stats(walk_dir(crate))
    assert stats['total_entries'] == 13
    assert stats['directories'] == 5
    assert stats['files'] == 8
    assert stats['max_depth'] == 2
    assert stats['depth_distribution'] == {0: 8, 1: 4, 2: 1}


def test_get_tree_stats_empty(tmp_path):
    stats = get_tree_stats(walk_dir(tmp_path))
    assert stats['total_entries'] == 0
    assert stats['max_depth'] is None


def test_tree_serializes_to_json(crate):
    tree = walk_dir(crate, skip_dotted=True)
    data = json.loads(json.dumps(tree.to_dict()))
    assert [c['dirent']['name'] for c in data['children']][:2] == ["src", "target"]


PROPERTY_TREE = [
    "alpha/", "alpha/.cache/", "alpha/.cache/blob", "alpha/Beta/", "alpha/Beta/x.txt",
    "alpha/a.txt", "alpha/B.txt", ".hidden/", ".hidden/secret", "zeta/", "zeta/deep/",
    "zeta/deep/deeper/", "zeta/deep/deeper/bottom.txt", "Readme", "readme", ".env",
]


@pytest.mark.parametrize("skip_dotted, max_depth, max_entries", list(itertools.product(
    [False, True], [0, 1, 2, 100], [1, 4, 10_000],
)))
def test_walk_properties(skip_dotted, max_depth, max_entries):
    reader = MemoryReader("root", PROPERTY_TREE)
    tree = walk_dir("root", skip_dotted=skip_dotted, max_depth=max_depth,
                    max_entries=max_entries, reader=reader)
    items = list(tree)

    assert len(items) <= max_entries
    assert all(depth <= max_depth for _, depth in items)
    assert not any(d.is_symlink() for d, _ in items)
    if skip_dotted:
        assert not any(part.startswith(".") for d, _ in items for part in d.path.parts)

    # Every sibling list is directories first, then ascending names
    stack = [tree]
    while stack:
        node = stack.pop()
        keys = [(0 if c.dirent.is_dir() else 1, c.dirent.name) for c in node.children]
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys)
        assert all(c.depth == node.depth + 1 for c in node.children)
        stack.extend(node.children)

    # Flattening then regrouping reproduces the tree
    assert Entry.from_flat(items) == tree
