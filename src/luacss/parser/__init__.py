"""LuaCSS front end: tokenizer, selector resolution, value and block parsing."""

from luacss.parser.parser import Parser, parse_luacss
from luacss.parser.selectors import (
    hyphenate,
    is_pseudo,
    pseudo_selector,
    resolve_selector,
)
from luacss.parser.tokenizer import significant_tokens, tokenize

__all__ = [
    "Parser",
    "parse_luacss",
    "tokenize",
    "significant_tokens",
    "hyphenate",
    "is_pseudo",
    "pseudo_selector",
    "resolve_selector",
]
