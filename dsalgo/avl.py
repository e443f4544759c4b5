"""A self-balancing AVL tree of ordered values."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple


class _Node:
    __slots__ = ("value", "left", "right", "bfactor")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        # Height of left subtree minus height of right subtree.
        self.bfactor = 0


def _rotate_left(node: _Node) -> _Node:
    right = node.right
    node.right = right.left
    right.left = node
    return right


def _rotate_right(node: _Node) -> _Node:
    left = node.left
    node.left = left.right
    left.right = node
    return left


def _double_rotation_factors(grand_bf: int) -> Tuple[int, int]:
    left = 1 if grand_bf == -1 else 0
    right = -1 if grand_bf == 1 else 0
    return left, right


def _rebalance(node: _Node) -> _Node:
    if node.bfactor == 2:
        child = node.left
        if child.bfactor >= 0:
            old_bf = child.bfactor
            root = _rotate_right(node)
            if old_bf == 1:
                root.right.bfactor, root.bfactor = 0, 0
            else:
                root.right.bfactor, root.bfactor = 1, -1
            return root
        grand_bf = child.right.bfactor
        node.left = _rotate_left(child)
        root = _rotate_right(node)
        root.left.bfactor, root.right.bfactor = _double_rotation_factors(grand_bf)
        root.bfactor = 0
        return root
    if node.bfactor == -2:
        child = node.right
        if child.bfactor <= 0:
            old_bf = child.bfactor
            root = _rotate_left(node)
            if old_bf == -1:
                root.left.bfactor, root.bfactor = 0, 0
            else:
                root.left.bfactor, root.bfactor = -1, 1
            return root
        grand_bf = child.left.bfactor
        node.right = _rotate_right(child)
        root = _rotate_left(node)
        root.left.bfactor, root.right.bfactor = _double_rotation_factors(grand_bf)
        root.bfactor = 0
        return root
    return node


def _insert(node: Optional[_Node], value: Any) -> Tuple[_Node, bool, bool]:
    """Return (new subtree, inserted, subtree got deeper)."""
    if node is None:
        return _Node(value), True, True
    if value == node.value:
        return node, False, False
    if node.value < value:
        node.right, inserted, deepened = _insert(node.right, value)
        if deepened:
            node.bfactor -= 1
            deepened = node.bfactor == -1
    else:
        node.left, inserted, deepened = _insert(node.left, value)
        if deepened:
            node.bfactor += 1
            deepened = node.bfactor == 1
    return _rebalance(node), inserted, deepened


def _after_shrink(node: _Node) -> Tuple[_Node, bool]:
    """Settle a node whose balance factor just changed because a side shrank."""
    if node.bfactor == 0:
        return node, True
    if node.bfactor in (1, -1):
        return node, False
    root = _rebalance(node)
    return root, root.bfactor == 0


def _delete(node: Optional[_Node], value: Any) -> Tuple[Optional[_Node], bool, bool]:
    """Return (new subtree, deleted, subtree got shallower)."""
    if node is None:
        return None, False, False
    if value == node.value:
        if node.left is None:
            return node.right, True, True
        if node.right is None:
            return node.left, True, True
        node.value = _min_node(node.right).value
        node.right, deleted, shallowed = _delete(node.right, node.value)
        if shallowed:
            node.bfactor += 1
            node, shallowed = _after_shrink(node)
        return node, deleted, shallowed
    if value < node.value:
        node.left, deleted, shallowed = _delete(node.left, value)
        if shallowed:
            node.bfactor -= 1
            node, shallowed = _after_shrink(node)
    else:
        node.right, deleted, shallowed = _delete(node.right, value)
        if shallowed:
            node.bfactor += 1
            node, shallowed = _after_shrink(node)
    return node, deleted, shallowed


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _inorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _depth(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return max(_depth(node.left), _depth(node.right)) + 1


class AvlTree:
    """Balanced binary search tree holding each value at most once."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def depth(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        return _depth(self._root)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        self._root, inserted, _ = _insert(self._root, value)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present."""
        self._root, deleted, _ = _delete(self._root, value)
        if deleted:
            self._size -= 1
        return deleted

    def find_min(self) -> Any:
        """Return the smallest value; raise ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("empty tree")
        return _min_node(self._root).value

    def inorder(self) -> list:
        """Return the values in ascending order."""
        return list(_inorder(self._root))

    def __iter__(self) -> Iterator[Any]:
        return _inorder(self._root)

    def __repr__(self) -> str:
        return f"AvlTree({self.inorder()!r})"