"""A singly linked list of arbitrary elements."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("element", "next")

    def __init__(self, element: Any, next_node: _Node | None = None) -> None:
        self.element = element
        self.next = next_node


class LinkedList:
    """Singly linked list.

    Membership checks (``index_of``, ``contains``, ``contains_all``) compare
    elements by identity, not by equality.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.add(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of length {self._size}")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def add(self, element: Any) -> None:
        """Append an element at the end of the list."""
        self.push(self._size, element)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        return self._node_at(index).element

    def set(self, index: int, element: Any) -> None:
        """Replace the element at ``index``."""
        self._node_at(index).element = element

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        node = self._node_at(index)
        if index == 0:
            self._head = node.next
            previous = None
        else:
            previous = self._node_at(index - 1)
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def index_of(self, element: Any) -> int:
        """Return the index of the first occurrence of ``element``.

        Raises ValueError when the element is not in the list.
        """
        for position, item in enumerate(self):
            if item is element:
                return position
        raise ValueError("element is not in the list")

    def is_empty(self) -> bool:
        return self._size == 0

    def push(self, index: int, element: Any) -> None:
        """Insert ``element`` so that it ends up at ``index`` (0 to len inclusive)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range for insertion into list of length {self._size}")
        if index == 0:
            node = _Node(element, self._head)
            self._head = node
            if self._tail is None:
                self._tail = node
        elif index == self._size:
            node = _Node(element)
            self._tail.next = node
            self._tail = node
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(element, previous.next)
        self._size += 1

    def pop(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        element = self.get(index)
        self.remove(index)
        return element

    def contains(self, element: Any) -> bool:
        """Tell whether ``element`` itself is in the list. ``None`` is never contained."""
        if element is None:
            return False
        return any(item is element for item in self)

    def contains_all(self, other: LinkedList) -> bool:
        """Tell whether every non-None element of ``other`` is in this list.

        A list with no non-None elements is not considered contained.
        """
        result = False
        for element in other:
            if element is None:
                continue
            result = self.contains(element)
            if not result:
                break
        return result

    def sub_list(self, start: int, stop: int) -> LinkedList:
        """Return a new list with the elements from ``start`` up to, not including, ``stop``."""
        if start < 0 or stop > self._size:
            raise IndexError(f"range {start}:{stop} out of bounds for list of length {self._size}")
        if start >= stop:
            raise ValueError("start must be lower than stop")
        result = LinkedList()
        for position, element in enumerate(self):
            if position >= stop:
                break
            if position >= start:
                result.add(element)
        return result

    def clone(self) -> LinkedList:
        """Return a new list holding the same elements."""
        return LinkedList(self)

    def sort(self, compare: Callable[[Any, Any], int], ascending: bool = True) -> None:
        """Sort in place using ``compare``, which returns a negative, zero or positive number.

        Pairs in which either element is ``None`` are left as they are.
        """
        if not callable(compare):
            raise TypeError("compare must be callable")
        outer = self._head
        while outer is not None:
            inner = outer.next
            while inner is not None:
                if outer.element is not None and inner.element is not None:
                    order = compare(outer.element, inner.element)
                    if (order > 0 and ascending) or (order < 0 and not ascending):
                        outer.element, inner.element = inner.element, outer.element
                inner = inner.next
            outer = outer.next