"""Hand-written lexer for version strings.

Tokenizes text such as ``1.0.1.1 (git-rev abcdef10)`` into a stream of Token
objects. The parenthesized annotation is free-form, so it is emitted as a
single ANNOTATION token covering everything up to the final ``)``.
"""

from __future__ import annotations

from buildnumber.core.errors import FormatError
from buildnumber.version.tokens import BLANKS, DIGITS, Token, TokenKind


class Lexer:
    """Tokenize a version string.

    Usage:
        tokens = Lexer("1.2.3").tokenize()
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return all tokens including EOF."""
        while not self._at_end():
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, "", self._column()))
        return self._tokens

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._peek()

        if ch in DIGITS:
            self._scan_while(TokenKind.NUMBER, DIGITS)
            return

        if ch in BLANKS:
            self._scan_while(TokenKind.WHITESPACE, BLANKS)
            return

        if ch == ".":
            self._tokens.append(Token(TokenKind.DOT, ch, self._column()))
            self._pos += 1
            return

        if ch == "(":
            self._scan_annotation()
            return

        raise FormatError(f"Unexpected character {ch!r}", self._source, self._column())

    def _scan_while(self, kind: TokenKind, charset: str) -> None:
        start = self._pos
        while not self._at_end() and self._peek() in charset:
            self._pos += 1
        self._tokens.append(Token(kind, self._source[start : self._pos], start + 1))

    def _scan_annotation(self) -> None:
        """Consume ``(`` ... ``)`` where the closing paren ends the source."""
        start = self._pos
        if not self._source.endswith(")") or len(self._source) - start < 3:
            raise FormatError("Unterminated or empty revision annotation", self._source, start + 1)

        content = self._source[start + 1 : -1]
        if "\n" in content or "\r" in content:
            raise FormatError("Revision annotation spans lines", self._source, start + 1)

        self._tokens.append(Token(TokenKind.ANNOTATION, content, start + 1))
        self._pos = len(self._source)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self) -> str:
        if self._at_end():
            return "\0"
        return self._source[self._pos]

    def _column(self) -> int:
        return self._pos + 1
