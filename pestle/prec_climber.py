"""Infix operator parsing with the precedence climbing method.

The items fed to a climber start with a primary item and then alternate
between an operator item and a primary item.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, Hashable, Iterable, TypeVar

__all__ = ["Assoc", "ClimbError", "Operator", "PrecClimber"]

T = TypeVar("T")


class Assoc(Enum):
    """Associativity of an infix operator."""

    LEFT = "left"
    RIGHT = "right"


class ClimbError(ValueError):
    """Raised when the items do not alternate between primaries and operators."""


class Operator:
    """One or more infix operators sharing a precedence level.

    Combine operators of equal precedence with ``|``.
    """

    __slots__ = ("entries",)

    def __init__(self, rule: Hashable, assoc: Assoc) -> None:
        self.entries: tuple[tuple[Hashable, Assoc], ...] = ((rule, assoc),)

    @classmethod
    def _from_entries(cls, entries: Iterable[tuple[Hashable, Assoc]]) -> Operator:
        operator = cls.__new__(cls)
        operator.entries = tuple(entries)
        return operator

    def __or__(self, other: object) -> Operator:
        if not isinstance(other, Operator):
            return NotImplemented
        return Operator._from_entries(self.entries + other.entries)

    def __repr__(self) -> str:
        parts = " | ".join(f"{rule!r}:{assoc.value}" for rule, assoc in self.entries)
        return f"Operator({parts})"


class PrecClimber:
    """Operator table for precedence climbing.

    Each entry of ``ops`` gets precedence *index + 1*, so later entries bind
    tighter. ``rule_of`` extracts the rule of an item; by default an item is
    its own rule.
    """

    def __init__(
        self,
        ops: Iterable[Operator],
        rule_of: Callable[[Any], Hashable] | None = None,
    ) -> None:
        table = [
            (rule, prec, assoc)
            for prec, operator in enumerate(ops, start=1)
            for rule, assoc in operator.entries
        ]
        self._setup(table, rule_of)

    @classmethod
    def from_table(
        cls,
        table: Iterable[tuple[Hashable, int, Assoc]],
        rule_of: Callable[[Any], Hashable] | None = None,
    ) -> PrecClimber:
        """Create a climber from ``(rule, precedence, assoc)`` triples.

        Precedences start from 1; the triples need not be in any order.
        """
        climber = cls.__new__(cls)
        climber._setup(list(table), rule_of)
        return climber

    def _setup(
        self,
        table: list[tuple[Hashable, int, Assoc]],
        rule_of: Callable[[Any], Hashable] | None,
    ) -> None:
        self._rule_of: Callable[[Any], Hashable] = rule_of or (lambda item: item)
        self._ops: dict[Hashable, tuple[int, Assoc]] = {}
        for rule, prec, assoc in table:
            # The first entry for a rule wins.
            self._ops.setdefault(rule, (prec, assoc))

    def _get(self, item: Any) -> tuple[int, Assoc] | None:
        return self._ops.get(self._rule_of(item))

    def climb(
        self,
        pairs: Iterable[Any],
        primary: Callable[[Any], T],
        infix: Callable[[T, Any, T], T],
    ) -> T:
        """Map primaries with ``primary`` and reduce them with ``infix``."""
        queue: Deque[Any] = deque(pairs)
        if not queue:
            raise ClimbError("precedence climbing requires a non-empty Pairs")
        lhs = primary(queue.popleft())
        return self._climb_rec(lhs, 0, queue, primary, infix)

    def _climb_rec(
        self,
        lhs: T,
        min_prec: int,
        pairs: Deque[Any],
        primary: Callable[[Any], T],
        infix: Callable[[T, Any, T], T],
    ) -> T:
        while pairs:
            found = self._get(pairs[0])
            if found is None or found[0] < min_prec:
                break
            prec = found[0]
            op = pairs.popleft()
            if not pairs:
                raise ClimbError(
                    "infix operator must be followed by a primary expression"
                )
            rhs = primary(pairs.popleft())

            while pairs:
                following = self._get(pairs[0])
                if following is None:
                    break
                new_prec, assoc = following
                if new_prec > prec or (assoc is Assoc.RIGHT and new_prec == prec):
                    rhs = self._climb_rec(rhs, new_prec, pairs, primary, infix)
                else:
                    break

            lhs = infix(lhs, op, rhs)
        return lhs