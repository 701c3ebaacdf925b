"""Compiler error types."""

from __future__ import annotations

from luacss.model.diagnostic import Diagnostic


class CompileError(Exception):
    """Raised by :func:`luacss.compiler.compile_or_raise` when LuaCSS source
    could not be compiled (or, in strict mode, compiled with diagnostics)."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics]
        super().__init__(
            f"Compilation failed with {len(messages)} diagnostic(s): "
            + "; ".join(messages)
        )
