"""LuaCSS: compile a Lua-inspired style syntax into CSS."""

__version__ = "0.1.0"

from luacss.compiler import CompileResult, compile_luacss, compile_or_raise  # noqa: E402
from luacss.config import CompilerConfig  # noqa: E402
from luacss.errors import CompileError  # noqa: E402

__all__ = [
    "__version__",
    "CompileResult",
    "CompileError",
    "CompilerConfig",
    "compile_luacss",
    "compile_or_raise",
]
