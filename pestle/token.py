"""Tokens marking where a matched rule starts and ends."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from .position import Position


class TokenKind(enum.Enum):
    START = "start"
    END = "end"


@dataclass(frozen=True)
class Token:
    """The start or end position of a matched rule."""

    kind: TokenKind
    rule: Any
    pos: Position

    @classmethod
    def start(cls, rule: Any, pos: Position) -> Token:
        return cls(TokenKind.START, rule, pos)

    @classmethod
    def end(cls, rule: Any, pos: Position) -> Token:
        return cls(TokenKind.END, rule, pos)