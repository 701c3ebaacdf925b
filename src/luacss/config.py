from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    indent: int = 2  # spaces before each declaration
    strict: bool = False  # treat any diagnostic as a failure in compile_or_raise

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("indent must be zero or positive")
