"""An unbalanced binary tree filled by search-tree insertion."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _preorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


class BinaryTree:
    """Binary tree; smaller values go left, equal or larger values go right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Add ``value`` below the node where the search for it ends."""
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def preorder(self) -> List[Any]:
        """Return values in root, left, right order."""
        return list(_preorder(self._root))

    def inorder(self) -> List[Any]:
        """Return values in left, root, right order."""
        return list(_inorder(self._root))

    def postorder(self) -> List[Any]:
        """Return values in left, right, root order."""
        return list(_postorder(self._root))