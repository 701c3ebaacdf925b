"""Compile LuaCSS source into a CSS stylesheet.

Compilation is best effort: malformed input is skipped and reported as
diagnostics, and :func:`compile_luacss` never raises for bad source. The only
failure it reports is producing no rules while recording diagnostics, in
which case ``stylesheet`` is ``None``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from luacss.config import CompilerConfig
from luacss.emitter import emit_stylesheet, flatten_rules
from luacss.errors import CompileError
from luacss.model.diagnostic import Diagnostic
from luacss.model.rule import FlatRule
from luacss.parser.parser import Parser

__all__ = ["CompileResult", "compile_luacss", "compile_or_raise"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompileResult:
    """Output of one compilation.

    Attributes:
        stylesheet: Rendered CSS; ``""`` for input with nothing to compile,
            ``None`` when no rules were produced and diagnostics were recorded.
        diagnostics: Non-fatal problems as :class:`Diagnostic` objects, in
            the order they were found. :attr:`messages` gives the same
            sequence as plain message strings.
        rules: The flattened rules the stylesheet was rendered from.
    """

    stylesheet: str | None
    diagnostics: tuple[Diagnostic, ...] = ()
    rules: tuple[FlatRule, ...] = ()

    @property
    def ok(self) -> bool:
        """True if a stylesheet was produced."""
        return self.stylesheet is not None

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]


def compile_luacss(
    source: str, config: CompilerConfig | None = None
) -> CompileResult:
    """Compile *source* and return the stylesheet with its diagnostics."""
    config = config or CompilerConfig()

    parser = Parser(source)
    logger.debug(
        "Tokenized LuaCSS source: %d significant tokens", len(parser.stream.tokens)
    )
    nodes = parser.parse()
    rules = flatten_rules(nodes)
    diagnostics = tuple(parser.diagnostics)
    logger.debug(
        "Parsed %d top-level block(s) into %d rule(s) with %d diagnostic(s)",
        len(nodes),
        len(rules),
        len(diagnostics),
    )

    if not rules and diagnostics:
        return CompileResult(stylesheet=None, diagnostics=diagnostics)

    stylesheet = emit_stylesheet(rules, indent=config.indent)
    return CompileResult(
        stylesheet=stylesheet, diagnostics=diagnostics, rules=tuple(rules)
    )


def compile_or_raise(
    source: str, config: CompilerConfig | None = None
) -> CompileResult:
    """Compile *source*; raises :class:`CompileError` on failure.

    Failure means no stylesheet was produced, or, when ``config.strict`` is
    set, that any diagnostic was recorded.
    """
    config = config or CompilerConfig()
    result = compile_luacss(source, config)
    if not result.ok or (config.strict and result.diagnostics):
        raise CompileError(list(result.diagnostics))
    return result
