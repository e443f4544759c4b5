"""A binary search tree mapping ordered keys to values."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _preorder(node: Optional[_Node]) -> Iterator[Tuple[Any, Any]]:
    if node is not None:
        yield node.key, node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[_Node]) -> Iterator[Tuple[Any, Any]]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key, node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[Tuple[Any, Any]]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key, node.value


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Optional[_Node], key: Any) -> Tuple[Optional[_Node], bool]:
    """Return (new subtree, whether ``key`` was removed)."""
    if node is None:
        return None, False
    if key < node.key:
        node.left, deleted = _delete(node.left, key)
        return node, deleted
    if node.key < key:
        node.right, deleted = _delete(node.right, key)
        return node, deleted
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    successor = _min_node(node.right)
    node.key, node.value = successor.key, successor.value
    node.right, _ = _delete(node.right, successor.key)
    return node, True


class BinarySearchTree:
    """Unbalanced binary search tree; each key appears at most once."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        if self._root is None:
            self._root = _Node(key, value)
            self._size += 1
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    self._size += 1
                    return
                node = node.left
            elif node.key < key:
                if node.right is None:
                    node.right = _Node(key, value)
                    self._size += 1
                    return
                node = node.right
            else:
                node.value = value
                return

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if there is none."""
        node = self._find(key)
        return None if node is None else node.value

    def min(self) -> Tuple[Any, Any]:
        """Return the (key, value) pair with the smallest key, or (None, None)."""
        if self._root is None:
            return None, None
        node = _min_node(self._root)
        return node.key, node.value

    def max(self) -> Tuple[Any, Any]:
        """Return the (key, value) pair with the largest key, or (None, None)."""
        if self._root is None:
            return None, None
        node = _max_node(self._root)
        return node.key, node.value

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not present."""
        self._root, deleted = _delete(self._root, key)
        if deleted:
            self._size -= 1
        return deleted

    def preorder(self) -> List[Tuple[Any, Any]]:
        """Return (key, value) pairs in root, left, right order."""
        return list(_preorder(self._root))

    def inorder(self) -> List[Tuple[Any, Any]]:
        """Return (key, value) pairs in ascending key order."""
        return list(_inorder(self._root))

    def postorder(self) -> List[Tuple[Any, Any]]:
        """Return (key, value) pairs in left, right, root order."""
        return list(_postorder(self._root))

    def __iter__(self) -> Iterator[Any]:
        return (key for key, _ in _inorder(self._root))

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"