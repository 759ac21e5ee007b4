"""Folder tree holding key/value leaves, kept as a single chain of folders."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

ROOT_PATH = "/"
MAX_PATH = 255
MAX_KEY = 127
MAX_INDENT = 120


def indent(n: int) -> str:
    """Return ``n`` levels of indentation, two spaces per level."""
    if n < 0 or n >= MAX_INDENT:
        raise ValueError(f"indentation level out of range: {n}")
    return "  " * n


@dataclass
class Leaf:
    """A key/value pair stored under a folder."""

    key: str
    value: str


@dataclass(eq=False)
class Node:
    """A folder: linked to its parent and the next folder, holding leaves."""

    path: str
    parent: Node | None = field(default=None, repr=False)
    child: Node | None = field(default=None, repr=False)
    leaves: list[Leaf] = field(default_factory=list)


class Tree:
    """A chain of folders starting at the root ``/``."""

    def __init__(self) -> None:
        self.root = Node(ROOT_PATH)

    def __iter__(self) -> Iterator[Node]:
        node: Node | None = self.root
        while node is not None:
            yield node
            node = node.child

    def find_node(self, path: str) -> Node | None:
        """Return the folder with exactly this path, or None."""
        return next((node for node in self if node.path == path), None)

    def find_leaf(self, path: str, key: str) -> Leaf | None:
        """Return the leaf with ``key`` in folder ``path``, or None."""
        node = self.find_node(path)
        if node is None:
            return None
        return next((leaf for leaf in node.leaves if leaf.key == key), None)

    def lookup(self, path: str, key: str) -> str | None:
        """Return the value stored under ``key`` in folder ``path``, or None."""
        leaf = self.find_leaf(path, key)
        return leaf.value if leaf is not None else None

    def last_node(self) -> Node:
        """Return the last folder of the chain."""
        return deque(self, maxlen=1)[0]

    def add_node(self, path: str) -> Node:
        """Append a new folder after the last one and return it."""
        parent = self.last_node()
        node = Node(path[:MAX_PATH], parent=parent)
        parent.child = node
        return node

    def add_leaf(self, node: Node, key: str, value: str) -> Leaf:
        """Append a key/value leaf to ``node`` and return it."""
        leaf = Leaf(key[:MAX_KEY], value)
        node.leaves.append(leaf)
        return leaf

    def render(self) -> str:
        """Return the tree as indented text, one folder or leaf per line."""
        lines = []
        for depth, node in enumerate(self):
            lines.append(f"{_indent_or_empty(depth)}{node.path}\n")
            for leaf in node.leaves:
                lines.append(
                    f"{_indent_or_empty(depth + 1)} > {{ {leaf.key} = '{leaf.value}' }}\n"
                )
        return "".join(lines)


def _indent_or_empty(n: int) -> str:
    try:
        return indent(n)
    except ValueError:
        return ""