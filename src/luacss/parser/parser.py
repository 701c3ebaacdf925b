"""Block parser for LuaCSS.

Syntax example::

    h1 = {
      font_size = "2rem",
      hover = function()
        opacity = 0.8
      end,
      span = { color = 0xa78bfa },
      ["&:nth-child(2)"] = { color = color.hex("#fff") },
    }

The parser never raises on malformed input. Unexpected tokens are skipped
and recorded as diagnostics on the token stream.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from luacss.model.diagnostic import Diagnostic
from luacss.model.rule import Declaration, RuleNode
from luacss.model.token import TokenKind
from luacss.parser.selectors import (
    hyphenate,
    is_pseudo,
    pseudo_selector,
    resolve_selector,
)
from luacss.parser.stream import TokenStream
from luacss.parser.tokenizer import significant_tokens, tokenize
from luacss.parser.values import parse_value

__all__ = ["Parser", "parse_luacss"]


@dataclass
class _BlockFrame:
    """A block that is still open: its selector and what it has collected."""

    selector: str
    declarations: list[Declaration] = field(default_factory=list)
    children: list[RuleNode] = field(default_factory=list)

    def to_node(self) -> RuleNode:
        return RuleNode(self.selector, tuple(self.declarations), tuple(self.children))



class Parser:
    """Builds the rule tree for one piece of LuaCSS source."""

    def __init__(self, source: str) -> None:
        self.stream = TokenStream(significant_tokens(tokenize(source)))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.stream.diagnostics

    # -- top level ------------------------------------------------------------

    def parse(self) -> list[RuleNode]:
        """Parse every ``selector = { ... }`` assignment in the source."""
        stream = self.stream
        nodes: list[RuleNode] = []

        while not stream.at_end():
            token = stream.peek()
            if token.is_ident():
                selector = stream.next().value
            elif token.is_punct("["):
                selector = self._bracketed_selector()
            else:
                stream.next()
                continue

            if not stream.peek_is_punct("="):
                continue
            stream.next()
            if not stream.peek_is_punct("{"):
                continue

            declarations, children = self.parse_block(selector)
            nodes.append(RuleNode(selector, declarations, children))

        return nodes

    def _bracketed_selector(self) -> str:
        """Consume ``["selector"]`` and return the selector text."""
        stream = self.stream
        stream.next()  # [
        selector = ""
        token = stream.peek()
        if token is not None and token.kind is TokenKind.STRING:
            selector = stream.next().value
        stream.expect("]")
        return selector

    # -- blocks ---------------------------------------------------------------

    def parse_block(
        self, selector: str
    ) -> tuple[tuple[Declaration, ...], tuple[RuleNode, ...]]:
        """Parse ``{ entries }`` whose entries apply to *selector*.

        Returns the block's own declarations and its nested rule nodes.
        Nested blocks are tracked on an explicit stack, so nesting depth is
        bounded by memory rather than the interpreter's recursion limit.
        """
        stream = self.stream
        stream.expect("{")
        stack = [_BlockFrame(selector)]

        while True:
            frame = stack[-1]
            if stream.at_end() or stream.peek_is_punct("}"):
                stream.expect("}")
                stack.pop()
                if not stack:
                    return tuple(frame.declarations), tuple(frame.children)
                stack[-1].children.append(frame.to_node())
                stream.skip_comma()
                continue

            child = self._parse_entry(frame)
            if child is not None:
                stream.expect("{")
                stack.append(_BlockFrame(child))

    def _parse_entry(self, frame: _BlockFrame) -> str | None:
        """Parse one block entry into *frame*.

        Returns the child selector when the entry opens a nested block, with
        the ``{`` still unconsumed.
        """
        stream = self.stream
        token = stream.peek()

        if token.is_punct("["):
            fragment = self._bracketed_selector()
            stream.expect("=")
            if stream.peek_is_punct("{"):
                return resolve_selector(frame.selector, fragment)
            stream.skip_comma()
            return None

        if not token.is_ident():
            stream.next()
            return None

        key = stream.next().value
        if not stream.peek_is_punct("="):
            # A bare key is dropped silently.
            stream.skip_comma()
            return None
        stream.next()  # =

        if is_pseudo(key) and stream.peek_is_ident("function"):
            pseudo_declarations = self.parse_function_block()
            frame.children.append(
                RuleNode(pseudo_selector(frame.selector, key), pseudo_declarations)
            )
        elif stream.peek_is_punct("{"):
            return resolve_selector(frame.selector, hyphenate(key))
        else:
            value = parse_value(stream)
            if value:
                frame.declarations.append(Declaration(hyphenate(key), value))
        stream.skip_comma()
        return None

    def parse_function_block(self) -> tuple[Declaration, ...]:
        """Parse ``function() key = value ... end`` into declarations."""
        stream = self.stream
        stream.expect("function")
        stream.expect("(")
        stream.expect(")")
        declarations: list[Declaration] = []

        while not stream.at_end() and not stream.peek_is_ident("end"):
            if not stream.peek_is_ident():
                stream.next()
                continue

            key = stream.next().value
            if not stream.peek_is_punct("="):
                stream.skip_comma()
                continue
            stream.next()  # =

            value = parse_value(stream)
            if value:
                declarations.append(Declaration(hyphenate(key), value))
            stream.skip_comma()

        stream.expect("end")
        return tuple(declarations)


def parse_luacss(source: str) -> tuple[list[RuleNode], list[Diagnostic]]:
    """Parse *source* into top-level rule nodes plus recorded diagnostics."""
    parser = Parser(source)
    nodes = parser.parse()
    return nodes, parser.diagnostics
