"""Flatten the nested rule tree and render it as CSS text."""

from __future__ import annotations

from collections.abc import Iterable

from luacss.model.rule import FlatRule, RuleNode

__all__ = ["emit_stylesheet", "flatten_rules", "render_rule"]


def flatten_rules(nodes: Iterable[RuleNode]) -> list[FlatRule]:
    """Walk *nodes* depth-first, pre-order, collecting rules in source order.

    Nodes without declarations contribute no rule, but their children are
    still visited.
    """
    rules: list[FlatRule] = []
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        if node.declarations:
            rules.append(FlatRule(node.selector, node.declarations))
        stack.extend(reversed(node.children))
    return rules


def render_rule(rule: FlatRule, indent: int = 2) -> str:
    pad = " " * indent
    body = "\n".join(f"{pad}{d.property}: {d.value};" for d in rule.declarations)
    return f"{rule.selector} {{\n{body}\n}}"


def emit_stylesheet(rules: Iterable[FlatRule], indent: int = 2) -> str:
    """Render *rules* as CSS, one blank line between rule blocks."""
    return "\n\n".join(render_rule(rule, indent) for rule in rules)
