"""A singly linked sequence with positional updates, swaps and bubble sort."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

Comparator = Callable[[Any, Any], int]


def _natural_cmp(first: Any, second: Any) -> int:
    return (first > second) - (first < second)


class LinkedList:
    """An ordered collection of values, appended at the tail."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"

    def _require_items(self, action: str) -> None:
        if not self._items:
            raise ValueError(f"cannot {action} an empty list")

    def push(self, value: Any) -> None:
        """Append a value at the end."""
        self._items.append(value)

    def update_at(self, pos: int, value: Any) -> None:
        """Replace the value at ``pos``; if ``pos`` is past the end, append it once."""
        self._require_items("update")
        if pos < 0:
            raise ValueError("position must not be negative")
        if pos < len(self._items):
            self._items[pos] = value
        else:
            self._items.append(value)

    def swap(self, first_pos: int, second_pos: int) -> None:
        """Exchange the values at two positions, ``first_pos`` before ``second_pos``."""
        self._require_items("swap in")
        if first_pos < 0 or second_pos < 0:
            raise ValueError("positions must not be negative")
        if first_pos >= second_pos:
            raise ValueError("first position must come before the second")
        if second_pos >= len(self._items):
            raise IndexError("second position is past the end of the list")
        items = self._items
        items[first_pos], items[second_pos] = items[second_pos], items[first_pos]

    def contains(self, value: Any, cmp: Comparator | None = None) -> bool:
        """Tell whether some element compares equal (``cmp`` returns 0) to ``value``.

        Without ``cmp``, elements are compared with ``==``.
        """
        self._require_items("search")
        if cmp is None:
            return any(item == value for item in self._items)
        return any(cmp(item, value) == 0 for item in self._items)

    def copy(self) -> LinkedList:
        """Return an independent list holding the same values."""
        self._require_items("copy")
        return LinkedList(self._items)

    def bubble_sort(self, length: int | None = None, cmp: Comparator | None = None) -> None:
        """Bubble sort the first ``length`` elements in place, stopping early when sorted."""
        self._require_items("sort")
        if length is None:
            length = len(self._items)
        if length <= 0:
            raise ValueError("length must be positive")
        compare = cmp or _natural_cmp
        items = self._items
        for i in range(length - 1):
            swapped = False
            for j in range(min(length - i - 1, len(items) - 1)):
                if compare(items[j], items[j + 1]) > 0:
                    items[j], items[j + 1] = items[j + 1], items[j]
                    swapped = True
            if not swapped:
                break

    def print(self, printer: Callable[[Any], Any] | None = None) -> None:
        """Hand every value in order to ``printer`` (default: one per line on stdout)."""
        emit = printer or print
        for item in self._items:
            emit(item)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()