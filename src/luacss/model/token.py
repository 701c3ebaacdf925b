"""Token model: the typed units produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical class of a token."""

    COMMENT = "comment"
    STRING = "string"
    HEX = "hex"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"


_WORD_LIKE = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.STRING, TokenKind.HEX}
)


@dataclass(frozen=True)
class Token:
    """A single token from LuaCSS source.

    Attributes:
        kind: Lexical class.
        value: Token text. Strings hold their unescaped interior, hex
            literals keep their ``0x`` prefix, numbers exclude the unit.
        unit: Unit suffix of a number (``rem``, ``%``), empty otherwise.
        line: 1-based line of the first character.
        column: 1-based column of the first character.
    """

    kind: TokenKind
    value: str
    unit: str = ""
    line: int = 1
    column: int = 1

    @property
    def is_word_like(self) -> bool:
        return self.kind in _WORD_LIKE

    def is_punct(self, char: str) -> bool:
        return self.kind is TokenKind.PUNCTUATION and self.value == char

    def is_ident(self, name: str | None = None) -> bool:
        if self.kind is not TokenKind.IDENTIFIER:
            return False
        return name is None or self.value == name
