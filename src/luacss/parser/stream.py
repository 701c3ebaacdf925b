"""Token cursor shared by the block and value parsers."""

from __future__ import annotations

from luacss.model.diagnostic import Diagnostic, DiagnosticKind
from luacss.model.token import Token, TokenKind

__all__ = ["TokenStream"]


class TokenStream:
    """Sequential, consume-once view over significant tokens.

    The stream also owns the diagnostics list for one compilation; parsers
    record problems here and keep going.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.diagnostics: list[Diagnostic] = []

    def peek(self, offset: int = 0) -> Token | None:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def next(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek_is_punct(self, char: str, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token is not None and token.is_punct(char)

    def peek_is_ident(self, name: str | None = None, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token is not None and token.is_ident(name)

    def error(
        self,
        message: str,
        token: Token | None = None,
        kind: DiagnosticKind = DiagnosticKind.SYNTAX,
    ) -> None:
        if token is None:
            self.diagnostics.append(Diagnostic(message, kind=kind))
        else:
            self.diagnostics.append(
                Diagnostic(message, kind=kind, line=token.line, column=token.column)
            )

    def expect(self, value: str) -> Token | None:
        """Consume the next token if its text is *value*.

        Otherwise record a syntax diagnostic and leave the token in place.
        String tokens never match, so ``"}"`` cannot close a block.
        """
        token = self.peek()
        if token is None or token.value != value or token.kind is TokenKind.STRING:
            got = "EOF" if token is None else token.value
            self.error(f"Expected '{value}' but got '{got}'", token)
            return None
        return self.next()

    def skip_comma(self) -> None:
        if self.peek_is_punct(","):
            self.next()
