"""Recursive descent parser for version strings.

Consumes the Lexer's tokens and produces a VersionComponents record. The
grammar, after trimming surrounding whitespace:

    version    := NUMBER "." NUMBER [ "." NUMBER [ "." NUMBER ] ] [ WS annotation ]
    annotation := "(" content ")"

A build number can only follow a patch number, so ``1.2..3`` is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from buildnumber.core.errors import FormatError
from buildnumber.version.lexer import Lexer
from buildnumber.version.tokens import BLANKS, Token, TokenKind


@dataclass(frozen=True)
class VersionComponents:
    """Structured result of parsing a version string."""

    major: int
    minor: int
    patch: int | None = None
    build: int | None = None
    revision: str | None = None
    revision_kind: str | None = None


def split_annotation(content: str) -> tuple[str | None, str]:
    """Split annotation content into ``(revision_kind, revision)``.

    The content names a kind only when it starts with a token free of
    whitespace, followed by whitespace and a non-empty remainder. The
    remainder is kept verbatim and may contain further spaces. Anything else
    is a bare revision.
    """
    head_end = 0
    while head_end < len(content) and content[head_end] not in BLANKS:
        head_end += 1

    rest_start = head_end
    while rest_start < len(content) and content[rest_start] in BLANKS:
        rest_start += 1

    if head_end == 0 or rest_start == head_end or rest_start == len(content):
        return None, content
    return content[:head_end], content[rest_start:]


class Parser:
    """Parse a version token stream into VersionComponents.

    Usage:
        components = Parser(Lexer(text).tokenize(), text).parse()
    """

    def __init__(self, tokens: list[Token], source: str = "") -> None:
        self._tokens = tokens
        self._source = source
        self._pos = 0

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def parse(self) -> VersionComponents:
        """Parse the full token stream."""
        major = self._number("Expected major version number")
        self._consume(TokenKind.DOT, "Expected '.' after major version")
        minor = self._number("Expected minor version number")

        patch = build = None
        if self._match(TokenKind.DOT):
            patch = self._number("Expected patch number after '.'")
            if self._match(TokenKind.DOT):
                build = self._number("Expected build number after '.'")

        revision = revision_kind = None
        if self._match(TokenKind.WHITESPACE):
            annotation = self._consume(
                TokenKind.ANNOTATION, "Expected parenthesized revision after whitespace"
            )
            revision_kind, revision = split_annotation(annotation.value)

        self._consume(TokenKind.EOF, "Unexpected trailing input")

        return VersionComponents(
            major=major,
            minor=minor,
            patch=patch,
            build=build,
            revision=revision,
            revision_kind=revision_kind,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _check(self, kind: TokenKind) -> bool:
        return self._current().kind == kind

    def _match(self, kind: TokenKind) -> bool:
        if self._check(kind):
            self._pos += 1
            return True
        return False

    def _consume(self, kind: TokenKind, message: str) -> Token:
        token = self._current()
        if token.kind != kind:
            raise FormatError(message, self._source, token.column)
        if kind != TokenKind.EOF:
            self._pos += 1
        return token

    def _number(self, message: str) -> int:
        return int(self._consume(TokenKind.NUMBER, message).value)


def parse_components(text: str) -> VersionComponents:
    """Trim ``text`` and parse it into VersionComponents."""
    source = text.strip()
    return Parser(Lexer(source).tokenize(), source).parse()
