"""Immutable OR-search path used for cycle detection."""

from __future__ import annotations

from typing import Any, Hashable, Iterator, Optional


_NO_STATE = object()


class Path:
    """Linked list of states, most recent first.

    Prepending shares the existing path as the new tail, so every OR-node
    along a branch can hold its own path without copying. Membership is the
    only query the search needs; it is checked by equality.

    Usage:
        path = Path.empty().prepend("s0").prepend("s1")
        assert "s0" in path
        assert list(path) == ["s1", "s0"]
    """

    __slots__ = ("_head", "_tail", "_length")

    _EMPTY: Optional["Path"] = None

    def __init__(self, head: Any = _NO_STATE, tail: Optional["Path"] = None) -> None:
        if (head is _NO_STATE) != (tail is None):
            raise ValueError("Path head and tail must be given together; use prepend()")
        self._head = None if head is _NO_STATE else head
        self._tail = tail
        self._length = 0 if tail is None else tail._length + 1

    @classmethod
    def empty(cls) -> "Path":
        """Return the zero-length path."""
        if cls._EMPTY is None:
            cls._EMPTY = cls()
        return cls._EMPTY

    def prepend(self, state: Hashable) -> "Path":
        """Return a new path with ``state`` as its most recent entry."""
        return Path(state, self)

    def contains(self, state: Hashable) -> bool:
        node = self
        while node._tail is not None:
            if node._head == state:
                return True
            node = node._tail
        return False

    def __contains__(self, state: object) -> bool:
        return self.contains(state)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[Any]:
        node = self
        while node._tail is not None:
            yield node._head
            node = node._tail

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"Path({list(self)!r})"
