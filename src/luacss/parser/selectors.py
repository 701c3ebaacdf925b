"""Selector resolution for nested blocks and pseudo-state keys."""

from __future__ import annotations

from types import MappingProxyType

__all__ = [
    "PSEUDO_CLASSES",
    "PSEUDO_ELEMENTS",
    "PSEUDO_NAMES",
    "hyphenate",
    "is_pseudo",
    "pseudo_selector",
    "resolve_selector",
]

# Keys that become ``:name`` pseudo-classes.
PSEUDO_CLASSES = frozenset(
    {
        "hover", "focus", "active", "visited", "disabled", "checked",
        "placeholder", "first_child", "last_child", "nth_child",
        "first_of_type", "last_of_type", "focus_within", "focus_visible",
        "not", "root", "empty", "link", "enabled", "read_only", "read_write",
    }
)

# Keys that become ``::name`` pseudo-elements. ``placeholder`` is listed in
# both sets and resolves to ``::placeholder``.
PSEUDO_ELEMENTS = frozenset(
    {"before", "after", "first_line", "first_letter", "selection", "placeholder"}
)

PSEUDO_NAMES = MappingProxyType(
    {
        "first_child": "first-child",
        "last_child": "last-child",
        "nth_child": "nth-child",
        "first_of_type": "first-of-type",
        "last_of_type": "last-of-type",
        "focus_within": "focus-within",
        "focus_visible": "focus-visible",
        "read_only": "read-only",
        "read_write": "read-write",
        "first_line": "first-line",
        "first_letter": "first-letter",
    }
)


def hyphenate(name: str) -> str:
    """``font_size`` -> ``font-size``."""
    return name.replace("_", "-")


def is_pseudo(key: str) -> bool:
    return key in PSEUDO_CLASSES or key in PSEUDO_ELEMENTS


def pseudo_selector(parent: str, key: str) -> str:
    """Append the pseudo-class or pseudo-element named by *key* to *parent*.

    >>> pseudo_selector("button", "hover")
    'button:hover'
    >>> pseudo_selector("p", "before")
    'p::before'
    """
    css_name = PSEUDO_NAMES.get(key, key)
    prefix = "::" if key in PSEUDO_ELEMENTS else ":"
    return parent + prefix + css_name


def resolve_selector(parent: str, child: str) -> str:
    """Combine a nested block's selector fragment with its parent's selector.

    ``&`` in *child* is replaced by *parent* everywhere it occurs; a fragment
    starting with ``:`` is appended directly; anything else becomes a
    descendant selector.
    """
    if "&" in child:
        return child.replace("&", parent)
    if child.startswith(":"):
        return parent + child
    return parent + " " + child
