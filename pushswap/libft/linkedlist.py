"""A singly linked sequence of items with release-aware clearing and mapping."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional

Release = Optional[Callable[[Any], object]]


class LinkedList:
    """An ordered collection that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: Deque[Any] = deque(items)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` before the first element."""
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        """Append ``item`` after the last element."""
        self._items.append(item)

    def last(self) -> Any:
        """Return the last item, or None when the list is empty."""
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def clear(self, release: Release = None) -> None:
        """Empty the list, handing each item to ``release`` from the last to the first."""
        while self._items:
            item = self._items.pop()
            if release is not None:
                release(item)

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on every item that is not None, front to back."""
        for item in self._items:
            if item is not None:
                func(item)

    def map(self, func: Callable[[Any], Any], release: Release = None) -> "LinkedList":
        """Return a new list of ``func(item)`` for each item.

        If ``func`` raises, the items already produced are released and the
        exception propagates.
        """
        result = LinkedList()
        try:
            for item in self._items:
                result.push_back(func(item))
        except BaseException:
            result.clear(release)
            raise
        return result