"""A stack that can be rewound to earlier snapshots."""

from __future__ import annotations

import enum
from typing import Any, Generic, TypeVar, overload

T = TypeVar("T")


class _OpKind(enum.Enum):
    PUSH = enum.auto()
    POP = enum.auto()


class Stack(Generic[T]):
    """A stack that logs its pushes and pops so it can be rewound.

    :meth:`snapshot` marks the current state and :meth:`restore` returns to
    the most recent mark, or to an empty stack if there is none.
    """

    def __init__(self) -> None:
        self._ops: list[tuple[_OpKind, T]] = []
        self._cache: list[T] = []
        self._snapshots: list[int] = []

    def is_empty(self) -> bool:
        return not self._cache

    def peek(self) -> T | None:
        """Return the top element, or ``None`` if the stack is empty."""
        return self._cache[-1] if self._cache else None

    def push(self, elem: T) -> None:
        self._ops.append((_OpKind.PUSH, elem))
        self._cache.append(elem)

    def pop(self) -> T | None:
        """Remove and return the top element, or ``None`` if empty."""
        if not self._cache:
            return None
        value = self._cache.pop()
        self._ops.append((_OpKind.POP, value))
        return value

    def __len__(self) -> int:
        return len(self._cache)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._cache[index]

    def snapshot(self) -> None:
        """Remember the current state."""
        self._snapshots.append(len(self._ops))

    def clear_snapshot(self) -> None:
        """Forget the most recent snapshot, keeping the current state."""
        if self._snapshots:
            self._snapshots.pop()

    def restore(self) -> None:
        """Rewind to the most recent snapshot, or clear the stack if none."""
        if not self._snapshots:
            self._cache.clear()
            self._ops.clear()
            return
        index = self._snapshots.pop()
        for kind, elem in reversed(self._ops[index:]):
            if kind is _OpKind.PUSH:
                self._cache.pop()
            else:
                self._cache.append(elem)
        del self._ops[index:]

    def __repr__(self) -> str:
        return f"Stack({self._cache!r})"