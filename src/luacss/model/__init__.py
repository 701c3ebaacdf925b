"""LuaCSS model layer -- public type re-exports."""

from luacss.model.diagnostic import Diagnostic, DiagnosticKind
from luacss.model.rule import Declaration, FlatRule, RuleNode
from luacss.model.token import Token, TokenKind

__all__ = [
    # token
    "TokenKind",
    "Token",
    # rule
    "Declaration",
    "RuleNode",
    "FlatRule",
    # diagnostic
    "DiagnosticKind",
    "Diagnostic",
]
