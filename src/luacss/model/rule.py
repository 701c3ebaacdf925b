"""Rule model: declarations, the nested rule tree, and flattened rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A ``property: value`` pair; ``property`` is already hyphen-cased."""

    property: str
    value: str


@dataclass(frozen=True)
class RuleNode:
    """A selector block as written in source, with its nested blocks.

    A node without declarations only groups its children and produces no
    CSS rule of its own.
    """

    selector: str
    declarations: tuple[Declaration, ...] = ()
    children: tuple[RuleNode, ...] = ()


@dataclass(frozen=True)
class FlatRule:
    """A selector and its declarations, ready to be rendered as CSS."""

    selector: str
    declarations: tuple[Declaration, ...]
