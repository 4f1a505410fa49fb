"""Entry model for dirwalker.

An Entry is one node of a walk result. It owns its children outright, so
a result tree is a plain nested structure with no back-references to the
walker or to parent nodes.

The same tree can be consumed two ways:
- as a tree, through the ``dirent``/``children``/``depth`` fields
- as a flat depth-first pre-order sequence of ``(dirent, depth)`` pairs,
  by iterating over the node
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional

from .dirent import DirEntry


# Depth of the synthetic node returned by a walk. Its children, the
# immediate children of the walk root, sit at depth 0.
ROOT_DEPTH = -1


class EntryItem(NamedTuple):
    """One element of the flat view of an Entry tree."""
    dirent: DirEntry
    depth: int


@dataclass(frozen=True)
class Entry:
    """A node in a walk result tree.

    Attributes:
        dirent: The node's directory entry (None for the synthetic root)
        depth: Distance from the walk root; the root's children have depth 0
        children: Admitted children, directories first then files, each
            group sorted by name
    """

    dirent: Optional[DirEntry]
    depth: int = ROOT_DEPTH
    children: List['Entry'] = field(default_factory=list)

    # Children are a mutable list, so entries compare by value but are
    # not hashable
    __hash__ = None

    def is_root(self) -> bool:
        return self.dirent is None

    def walk(self) -> Iterator[EntryItem]:
        """Yield ``(dirent, depth)`` pairs in depth-first pre-order.

        Uses an explicit stack, so arbitrarily deep trees are safe. Nodes
        without a dirent (the synthetic root) are skipped but their
        children are still visited.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if node.dirent is not None:
                yield EntryItem(node.dirent, node.depth)
            # Reversed so the first child is popped first
            stack.extend(reversed(node.children))

    def __iter__(self) -> Iterator[EntryItem]:
        return self.walk()

    def __len__(self) -> int:
        """Number of nodes with a dirent in this subtree."""
        return sum(1 for _ in self.walk())

    def __bool__(self) -> bool:
        # A walk result is truthy even when the root had no children
        return True

    def find(self, name: str) -> Optional['Entry']:
        """Find the first node, in pre-order, whose name equals ``name``.

        Args:
            name: Final path component to look for (e.g. "lib.rs")

        Returns:
            The matching Entry with its subtree, or None
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if node.dirent is not None and node.dirent.name == name:
                return node
            stack.extend(reversed(node.children))
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Nested plain-data representation of this subtree."""
        return {
            'dirent': self.dirent.to_dict() if self.dirent is not None else None,
            'depth': self.depth,
            'children': [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_flat(cls, items: Iterable[EntryItem]) -> 'Entry':
        """Rebuild a tree from a flat pre-order sequence.

        Inverse of ``walk()`` on a synthetic root: the returned node has
        no dirent and holds the depth-0 items as its children.

        Args:
            items: ``(dirent, depth)`` pairs in depth-first pre-order

        Returns:
            Synthetic root Entry

        Raises:
            ValueError: If a depth skips a level or goes below zero
        """
        root = cls(dirent=None, depth=ROOT_DEPTH)
        # path[i] is the most recent node at depth i - 1
        path = [root]
        for dirent, depth in items:
            if depth < 0 or depth > len(path) - 1:
                raise ValueError(
                    f"Invalid depth {depth} for {dirent}: expected at most {len(path) - 1}"
                )
            del path[depth + 1:]
            node = cls(dirent=dirent, depth=depth)
            path[-1].children.append(node)
            path.append(node)
        return root

    def __repr__(self) -> str:
        path = str(self.dirent) if self.dirent is not None else None
        return f"Entry(dirent={path!r}, depth={self.depth}, children={len(self.children)})"
