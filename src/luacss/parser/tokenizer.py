"""Hand-written tokenizer for LuaCSS source.

Every character of the input belongs to exactly one token. Characters that
start no other token become single-character punctuation tokens, so
tokenizing never fails.

Token classes, in priority order at each position:
    -- comment            to end of line
    whitespace run
    0xFF00AA              hex literal (zero digits allowed)
    "text" / 'text'       string, backslash escapes the next character
    12  -1.5  .5rem  50%  number with optional unit
    font_size  nth-child  identifier
    anything else         punctuation
"""

from __future__ import annotations

from collections.abc import Iterable

from luacss.model.token import Token, TokenKind

__all__ = ["tokenize", "significant_tokens"]

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = _DIGITS | frozenset("abcdefABCDEF")
_IDENT_START = _LETTERS | {"_"}
_IDENT_CHARS = _IDENT_START | _DIGITS | {"-"}
_NUMBER_CHARS = _DIGITS | {"."}
_UNIT_CHARS = _LETTERS | {"%"}
_QUOTES = ('"', "'")


class _Scanner:
    """Cursor over the source text that keeps track of line and column."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def char(self, offset: int = 0) -> str:
        """The character *offset* positions ahead, or '' past the end."""
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return ""

    def advance(self, count: int = 1) -> str:
        text = self.source[self.pos : self.pos + count]
        for ch in text:
            if ch == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.pos += len(text)
        return text

    def advance_while(self, allowed: frozenset[str]) -> str:
        start = self.pos
        while not self.at_end() and self.source[self.pos] in allowed:
            self.advance()
        return self.source[start : self.pos]

    def advance_until(self, stop: str) -> str:
        start = self.pos
        while not self.at_end() and self.source[self.pos] != stop:
            self.advance()
        return self.source[start : self.pos]


def _starts_number(scanner: _Scanner) -> bool:
    first, second, third = scanner.char(), scanner.char(1), scanner.char(2)
    if first in _DIGITS:
        return True
    if first == ".":
        return second in _DIGITS
    if first in ("+", "-"):
        return second in _DIGITS or (second == "." and third in _DIGITS)
    return False


def _consume_whitespace(scanner: _Scanner) -> str:
    start = scanner.pos
    while not scanner.at_end() and scanner.char().isspace():
        scanner.advance()
    return scanner.source[start : scanner.pos]


def _consume_string(scanner: _Scanner) -> str:
    quote = scanner.advance()
    value = ""
    while not scanner.at_end() and scanner.char() != quote:
        if scanner.char() == "\\":
            scanner.advance()
            if scanner.at_end():
                break
        value += scanner.advance()
    scanner.advance()  # closing quote, if any
    return value


def _consume_number(scanner: _Scanner) -> tuple[str, str]:
    number = ""
    if scanner.char() in ("+", "-"):
        number += scanner.advance()
    number += scanner.advance_while(_NUMBER_CHARS)
    unit = scanner.advance_while(_UNIT_CHARS)
    return number, unit


def tokenize(source: str) -> list[Token]:
    """Split *source* into tokens, whitespace and comments included."""
    scanner = _Scanner(source)
    tokens: list[Token] = []

    while not scanner.at_end():
        line, column = scanner.line, scanner.column
        unit = ""

        ch = scanner.char()
        if ch == "-" and scanner.char(1) == "-":
            kind, value = TokenKind.COMMENT, scanner.advance_until("\n")
        elif ch.isspace():
            kind, value = TokenKind.WHITESPACE, _consume_whitespace(scanner)
        elif ch == "0" and scanner.char(1) in ("x", "X"):
            prefix = scanner.advance(2)
            kind, value = TokenKind.HEX, prefix + scanner.advance_while(_HEX_DIGITS)
        elif ch in _QUOTES:
            kind, value = TokenKind.STRING, _consume_string(scanner)
        elif _starts_number(scanner):
            kind = TokenKind.NUMBER
            value, unit = _consume_number(scanner)
        elif ch in _IDENT_START:
            kind, value = TokenKind.IDENTIFIER, scanner.advance_while(_IDENT_CHARS)
        else:
            kind, value = TokenKind.PUNCTUATION, scanner.advance()

        tokens.append(Token(kind, value, unit=unit, line=line, column=column))

    return tokens


def significant_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Drop whitespace and comment tokens, which the parser never sees."""
    return [
        t
        for t in tokens
        if t.kind not in (TokenKind.WHITESPACE, TokenKind.COMMENT)
    ]
