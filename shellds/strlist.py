"""A doubly linked list of strings with node-level access."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional

from shellds.search import compare_prefix

# Values are compared by this many leading characters when counting.
_COUNT_WIDTH = 8


@dataclass(eq=False)
class ListNode:
    """One element of a :class:`StringList`."""

    value: str
    prev: Optional["ListNode"] = field(default=None, repr=False)
    next: Optional["ListNode"] = field(default=None, repr=False)


def _node_value(value: Optional[str]) -> str:
    return "" if value is None else value


def _walk(node: Optional[ListNode], end: Optional[ListNode] = None) -> Iterator[ListNode]:
    while node is not None and node is not end:
        following = node.next
        yield node
        node = following


def matches(word: str, other: str) -> bool:
    """True if the two words are identical."""
    return word == other


def find_word(node: Optional[ListNode], word: str) -> Optional[ListNode]:
    """First node from ``node`` onwards whose value equals ``word``."""
    return next((n for n in _walk(node) if matches(n.value, word)), None)


def find_word_range(
    node: Optional[ListNode], end: Optional[ListNode], word: str
) -> Optional[ListNode]:
    """First node in ``[node, end)`` whose value equals ``word``; ``end`` if none."""
    return next((n for n in _walk(node, end) if matches(n.value, word)), end)


def copy_range(node: Optional[ListNode], end: Optional[ListNode]) -> "StringList":
    """New list holding the values of ``[node, end)``.

    A missing start node gives a list holding a single empty string.
    """
    if node is None:
        return StringList([""])
    return StringList(n.value for n in _walk(node, end))


def size_from(head: Optional[ListNode]) -> int:
    """Number of nodes from ``head`` to the end of its chain."""
    return sum(1 for _ in _walk(head))


def values_from(head: Optional[ListNode]) -> List[str]:
    """Values of the nodes from ``head`` to the end of its chain."""
    return [n.value for n in _walk(head)]


class StringList:
    """Doubly linked list of strings."""

    def __init__(self, items: Optional[Iterable[Optional[str]]] = None) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return (node.value for node in _walk(self.head))

    def __repr__(self) -> str:
        return f"StringList({self.to_list()!r})"

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from head to tail."""
        return _walk(self.head)

    def empty(self) -> bool:
        """True if the list holds no nodes."""
        return self.head is None

    def push_back(self, value: Optional[str]) -> ListNode:
        """Append ``value`` (``None`` stores an empty string) and return its node."""
        node = ListNode(_node_value(value))
        if self.tail is None:
            self.head = self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self._size += 1
        return node

    def push_front(self, value: Optional[str]) -> ListNode:
        """Prepend ``value`` (``None`` stores an empty string) and return its node."""
        node = ListNode(_node_value(value))
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self._size += 1
        return node

    def insert_after(self, node: Optional[ListNode], value: Optional[str]) -> Optional[ListNode]:
        """Insert ``value`` right after ``node`` and return the new node.

        Nothing happens, and ``None`` is returned, when ``node`` or ``value``
        is missing.
        """
        if node is None or value is None:
            return None
        if self.empty() or node is self.tail:
            return self.push_back(value)
        new = ListNode(value, prev=node, next=node.next)
        node.next.prev = new
        node.next = new
        self._size += 1
        return new

    def extend_move(self, other: "StringList") -> None:
        """Append the contents of ``other``.

        When this list is empty the values of ``other`` are copied and
        ``other`` is left as it was; otherwise its nodes are moved over and
        ``other`` ends up empty.
        """
        if other.empty():
            return
        if self.empty():
            for value in other:
                self.push_back(value)
            return
        self.tail.next = other.head
        other.head.prev = self.tail
        self.tail = other.tail
        self._size += other._size
        other.head = other.tail = None
        other._size = 0

    def remove_value(self, value: str) -> None:
        """Remove every node whose value equals ``value``."""
        self.remove_value_range(self.head, None, value)

    def remove_value_range(
        self, start: Optional[ListNode], end: Optional[ListNode], value: str
    ) -> None:
        """Remove nodes in ``[start, end)`` whose value equals ``value``."""
        if self.empty():
            return
        for node in list(_walk(start, end)):
            if matches(node.value, value):
                self.remove_node(node)

    def remove_node(self, node: Optional[ListNode]) -> Optional[ListNode]:
        """Unlink ``node`` and return the node that followed it."""
        if node is None:
            return None
        following = node.next
        if node is self.head:
            self.pop_front()
        elif node is self.tail:
            self.pop_back()
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            node.prev = node.next = None
            self._size -= 1
        return following

    def _node_at(self, index: int) -> ListNode:
        if index < 0 or index >= self._size or self.empty():
            raise IndexError("Error: Out of range")
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def remove_at(self, index: int) -> None:
        """Remove the node at ``index``; raises IndexError when out of range."""
        self.remove_node(self._node_at(index))

    def pop_back(self) -> str:
        """Remove the last node and return its value; raises IndexError when empty."""
        if self.empty():
            raise IndexError("The list is empty")
        node = self.tail
        self.tail = node.prev
        if self.tail is None:
            self.head = None
        else:
            self.tail.next = None
        node.prev = None
        self._size -= 1
        return node.value

    def pop_front(self) -> str:
        """Remove the first node and return its value; raises IndexError when empty."""
        if self.empty():
            raise IndexError("The list is empty")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        node.next = None
        self._size -= 1
        return node.value

    def clear(self) -> None:
        """Remove every node."""
        self.head = self.tail = None
        self._size = 0

    def at(self, index: int) -> str:
        """Value at ``index``; raises IndexError when out of range."""
        return self._node_at(index).value

    def copy(self) -> "StringList":
        """Independent copy of the list."""
        return StringList(self)

    def count(self, value: str) -> int:
        """Number of nodes whose value agrees with ``value`` in the first 8 characters."""
        return sum(
            1 for item in self if compare_prefix(item, value, _COUNT_WIDTH) == 0
        )

    def find(self, word: str) -> Optional[ListNode]:
        """First node whose value equals ``word``, or ``None``."""
        return find_word(self.head, word)

    def find_if(self, predicate: Callable[[str], bool]) -> Optional[ListNode]:
        """First node whose value satisfies ``predicate``, or ``None``."""
        return next((n for n in _walk(self.head) if predicate(n.value)), None)

    def index_of(self, node: Optional[ListNode]) -> int:
        """Position of ``node``; the list length if it is not in the list, 0 if empty."""
        if self.empty():
            return 0
        for index, current in enumerate(_walk(self.head)):
            if current is node:
                return index
        return self._size

    def to_list(self) -> List[str]:
        """Values as a Python list."""
        return list(self)