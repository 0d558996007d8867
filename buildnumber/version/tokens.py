"""Token types for the version-string lexer.

Defines all token kinds and the Token dataclass used by the lexer and parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """All token types recognized by the version lexer."""

    NUMBER = auto()  # 42
    DOT = auto()  # .
    WHITESPACE = auto()  # run of ASCII whitespace
    ANNOTATION = auto()  # (git-rev abcdef10), value holds the inner text
    EOF = auto()


DIGITS = "0123456789"
BLANKS = " \t\n\r\f\v"


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    kind: TokenKind
    value: str
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, C{self.column})"
