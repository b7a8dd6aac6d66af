"""A self-balancing binary search tree mapping string keys to string values."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from shellds.keys import equal, greater, less

Visitor = Callable[[str, Optional[str]], object]


class TraverseOrder(Enum):
    """Order in which a traversal visits the nodes."""

    PREORDER = 0
    INORDER = 1
    POSTORDER = 2


@dataclass(eq=False)
class TreeNode:
    """One key/value entry of the tree."""

    key: str
    value: Optional[str]
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _height(node: Optional[TreeNode]) -> int:
    if node is None:
        return -1
    return max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: TreeNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(x: TreeNode) -> TreeNode:
    y = x.right
    x.right = y.left
    y.left = x
    return y


def _rotate_right(x: TreeNode) -> TreeNode:
    y = x.left
    x.left = y.right
    y.right = x
    return y


def _find(node: Optional[TreeNode], key: str) -> Optional[TreeNode]:
    while node is not None:
        if equal(node.key, key):
            return node
        node = node.right if less(node.key, key) else node.left
    return None


def _leftmost(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def _balance_insert(root: TreeNode, key: str) -> TreeNode:
    bf = _balance_factor(root)
    if bf > 1 and less(key, root.left.key):
        return _rotate_right(root)
    if bf > 1 and greater(key, root.left.key):
        root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if bf < -1 and greater(key, root.right.key):
        return _rotate_left(root)
    if bf < -1 and less(key, root.right.key):
        root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def _balance_remove(root: TreeNode) -> TreeNode:
    bf = _balance_factor(root)
    if bf < -1 and _balance_factor(root.right) <= 0:
        return _rotate_left(root)
    if bf > 1 and _balance_factor(root.left) < 0:
        root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if bf < -1 and _balance_factor(root.right) > 0:
        root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root


def _insert(root: Optional[TreeNode], key: str, value: Optional[str]) -> TreeNode:
    if root is None:
        return TreeNode(key, value)
    if less(root.key, key):
        root.right = _insert(root.right, key, value)
    elif greater(root.key, key):
        root.left = _insert(root.left, key, value)
    else:
        if value is not None:
            root.value = value
        return root
    return _balance_insert(root, key)


def _remove(root: Optional[TreeNode], key: str) -> Optional[TreeNode]:
    if root is None:
        return None
    if less(root.key, key):
        root.right = _remove(root.right, key)
    elif greater(root.key, key):
        root.left = _remove(root.left, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = _leftmost(root.right)
        root.key = successor.key
        root.value = successor.value
        root.right = _remove(root.right, successor.key)
        return root
    return _balance_remove(root)


def _copy(node: Optional[TreeNode]) -> Optional[TreeNode]:
    if node is None:
        return None
    return TreeNode(node.key, node.value, _copy(node.left), _copy(node.right))


def _walk(node: Optional[TreeNode], order: TraverseOrder) -> Iterator[TreeNode]:
    if node is None:
        return
    if order is TraverseOrder.PREORDER:
        yield node
    yield from _walk(node.left, order)
    if order is TraverseOrder.INORDER:
        yield node
    yield from _walk(node.right, order)
    if order is TraverseOrder.POSTORDER:
        yield node


def _print_entry(key: str, value: Optional[str]) -> None:
    print(f"{key}={'(null)' if value is None else value}")


class StringTree:
    """Ordered mapping of string keys to optional string values."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[Tuple[str, Optional[str]]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in _walk(self.root, TraverseOrder.INORDER):
            yield node.key, node.value

    def insert(self, key: str, value: Optional[str]) -> None:
        """Add ``key`` or update its value; a ``None`` value keeps an existing one."""
        if not self.contains(key):
            self._size += 1
        self.root = _insert(self.root, key, value)

    def remove(self, key: str) -> None:
        """Remove ``key`` if present."""
        if self.contains(key):
            self._size -= 1
        self.root = _remove(self.root, key)

    def get(self, key: str) -> Optional[str]:
        """Value stored under ``key``, or ``None`` if it is absent."""
        node = _find(self.root, key)
        return None if node is None else node.value

    def get_range(self, text: str, begin: int, end: int) -> Optional[str]:
        """Value stored under the key ``text[begin:end]``."""
        begin = operator.index(begin)
        end = operator.index(end)
        if begin < 0 or end < begin:
            raise ValueError(f"invalid range {begin}..{end}")
        return self.get(text[begin:end])

    def contains(self, key: str) -> bool:
        """True if ``key`` is present."""
        return _find(self.root, key) is not None

    def find_min(self) -> Optional[str]:
        """Value stored under the smallest key, or ``None`` for an empty tree."""
        node = _leftmost(self.root)
        return None if node is None else node.value

    def find_max(self) -> Optional[str]:
        """Value stored under the largest key, or ``None`` for an empty tree."""
        node = _rightmost(self.root)
        return None if node is None else node.value

    def height(self) -> int:
        """Height of the tree; -1 when empty, 0 for a single node."""
        return _height(self.root)

    def copy(self) -> "StringTree":
        """Independent copy with the same shape and contents."""
        other = StringTree()
        other.root = _copy(self.root)
        other._size = self._size
        return other

    def clear(self) -> None:
        """Remove every entry."""
        self.root = None
        self._size = 0

    def traverse(self, order: TraverseOrder, visitor: Optional[Visitor] = None) -> None:
        """Call ``visitor(key, value)`` for each node in the given order.

        Without a visitor each entry is printed as ``key=value``.
        """
        try:
            order = TraverseOrder(order)
        except ValueError:
            raise ValueError(f"invalid traversal order: {order!r}") from None
        visit = _print_entry if visitor is None else visitor
        for node in _walk(self.root, order):
            visit(node.key, node.value)