"""Diagnostic model: non-fatal messages recorded while compiling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Category of a recovered parse anomaly."""

    SYNTAX = "syntax"
    SEMANTIC = "semantic"


@dataclass(frozen=True)
class Diagnostic:
    """A single recovered problem in LuaCSS source.

    Attributes:
        message: Human-readable description of the problem.
        kind: Syntax (unexpected token) or semantic (e.g. unknown color
            function).
        line: Source line of the offending token, if there was one.
        column: Source column of the offending token, if there was one.
    """

    message: str
    kind: DiagnosticKind = DiagnosticKind.SYNTAX
    line: int | None = None
    column: int | None = None

    @property
    def is_syntax(self) -> bool:
        return self.kind is DiagnosticKind.SYNTAX

    @property
    def is_semantic(self) -> bool:
        return self.kind is DiagnosticKind.SEMANTIC

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line {self.line}, col {self.column}]"
        return f"{self.kind.value}{location}: {self.message}"
