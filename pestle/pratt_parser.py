"""Pratt parsing of prefix, postfix and infix operator expressions.

The items fed to a parser should come in the order
``prefix* primary postfix* (infix prefix* primary postfix*)*``.
"""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Generic, Hashable, Iterable, TypeVar

T = TypeVar("T")

_PREC_STEP = 10


class Assoc(enum.Enum):
    """Associativity of an infix binary operator."""

    LEFT = "left"
    RIGHT = "right"


class PrattError(ValueError):
    """Raised when the items do not form an expression the parser can map."""


class _Affix(enum.Enum):
    PREFIX = "prefix"
    POSTFIX = "postfix"
    INFIX = "infix"


@dataclass(frozen=True)
class _OpEntry:
    rule: Hashable
    affix: _Affix
    assoc: Assoc | None = None


@dataclass(frozen=True)
class _Binding:
    affix: _Affix
    assoc: Assoc | None
    prec: int


class Op:
    """One or more operators sharing a precedence level.

    Combine operators of equal precedence with ``|``.
    """

    __slots__ = ("entries",)

    def __init__(self, entries: Iterable[_OpEntry]) -> None:
        self.entries: tuple[_OpEntry, ...] = tuple(entries)

    @classmethod
    def prefix(cls, rule: Hashable) -> Op:
        """Define ``rule`` as a prefix unary operator."""
        return cls([_OpEntry(rule, _Affix.PREFIX)])

    @classmethod
    def postfix(cls, rule: Hashable) -> Op:
        """Define ``rule`` as a postfix unary operator."""
        return cls([_OpEntry(rule, _Affix.POSTFIX)])

    @classmethod
    def infix(cls, rule: Hashable, assoc: Assoc) -> Op:
        """Define ``rule`` as an infix binary operator with ``assoc``."""
        return cls([_OpEntry(rule, _Affix.INFIX, assoc)])

    def __or__(self, other: object) -> Op:
        if not isinstance(other, Op):
            return NotImplemented
        return Op(self.entries + other.entries)

    def __repr__(self) -> str:
        parts = " | ".join(f"{e.affix.value}({e.rule!r})" for e in self.entries)
        return f"Op({parts})"


class PrattParser:
    """Operator table with precedences; later calls to :meth:`op` bind tighter.

    ``rule_of`` extracts the rule of an item; by default an item is its own
    rule.
    """

    def __init__(self, rule_of: Callable[[Any], Hashable] | None = None) -> None:
        self._rule_of: Callable[[Any], Hashable] = rule_of or (lambda item: item)
        self._prec = _PREC_STEP
        self._ops: dict[Hashable, _Binding] = {}
        self.has_prefix = False
        self.has_postfix = False
        self.has_infix = False

    def op(self, op: Op) -> PrattParser:
        """Add ``op`` at a precedence above every operator added so far."""
        self._prec += _PREC_STEP
        for entry in op.entries:
            if entry.affix is _Affix.PREFIX:
                self.has_prefix = True
            elif entry.affix is _Affix.POSTFIX:
                self.has_postfix = True
            else:
                self.has_infix = True
            self._ops[entry.rule] = _Binding(entry.affix, entry.assoc, self._prec)
        return self

    def map_primary(self, primary: Callable[[Any], T]) -> PrattParserMap[T]:
        """Start a mapping that turns primary items into values with ``primary``."""
        return PrattParserMap(self, primary)

    def _binding(self, item: Any) -> _Binding | None:
        return self._ops.get(self._rule_of(item))


class PrattParserMap(Generic[T]):
    """How to map primaries and operators to values; finish with :meth:`parse`."""

    def __init__(self, pratt: PrattParser, primary: Callable[[Any], T]) -> None:
        self._pratt = pratt
        self._primary = primary
        self._prefix: Callable[[Any, T], T] | None = None
        self._postfix: Callable[[T, Any], T] | None = None
        self._infix: Callable[[T, Any, T], T] | None = None

    def map_prefix(self, prefix: Callable[[Any, T], T]) -> PrattParserMap[T]:
        """Map prefix operators with ``prefix(op, rhs)``."""
        self._prefix = prefix
        return self

    def map_postfix(self, postfix: Callable[[T, Any], T]) -> PrattParserMap[T]:
        """Map postfix operators with ``postfix(lhs, op)``."""
        self._postfix = postfix
        return self

    def map_infix(self, infix: Callable[[T, Any, T], T]) -> PrattParserMap[T]:
        """Map infix operators with ``infix(lhs, op, rhs)``."""
        self._infix = infix
        return self

    def parse(self, pairs: Iterable[Any]) -> T:
        """Run the parser over ``pairs`` and return the mapped value."""
        return self._expr(deque(pairs), 0)

    def _expr(self, pairs: Deque[Any], rbp: int) -> T:
        lhs = self._nud(pairs)
        while rbp < self._lbp(pairs):
            lhs = self._led(pairs, lhs)
        return lhs

    def _nud(self, pairs: Deque[Any]) -> T:
        if not pairs:
            raise PrattError("Pratt parsing expects non-empty Pairs")
        pair = pairs.popleft()
        binding = self._pratt._binding(pair)
        if binding is None:
            return self._primary(pair)
        if binding.affix is not _Affix.PREFIX:
            raise PrattError(f"Expected prefix or primary expression, found {pair}")
        rhs = self._expr(pairs, binding.prec - 1)
        if self._prefix is None:
            raise PrattError(f"Could not map {pair}, no `.map_prefix(...)` specified")
        return self._prefix(pair, rhs)

    def _led(self, pairs: Deque[Any], lhs: T) -> T:
        pair = pairs.popleft()
        binding = self._pratt._binding(pair)
        if binding is not None and binding.affix is _Affix.INFIX:
            rbp = binding.prec if binding.assoc is Assoc.LEFT else binding.prec - 1
            rhs = self._expr(pairs, rbp)
            if self._infix is None:
                raise PrattError(f"Could not map {pair}, no `.map_infix(...)` specified")
            return self._infix(lhs, pair, rhs)
        if binding is not None and binding.affix is _Affix.POSTFIX:
            if self._postfix is None:
                raise PrattError(
                    f"Could not map {pair}, no `.map_postfix(...)` specified"
                )
            return self._postfix(lhs, pair)
        raise PrattError(f"Expected postfix or infix expression, found {pair}")

    def _lbp(self, pairs: Deque[Any]) -> int:
        if not pairs:
            return 0
        binding = self._pratt._binding(pairs[0])
        if binding is None:
            raise PrattError(f"Expected operator, found {pairs[0]}")
        return binding.prec