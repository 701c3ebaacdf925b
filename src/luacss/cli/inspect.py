"""CLI command: luacss inspect -- display the parsed rule tree."""

from __future__ import annotations

from pathlib import Path

import click

from luacss.model.rule import RuleNode
from luacss.parser import Parser, significant_tokens, tokenize


def _echo_tree(nodes: list[RuleNode]) -> None:
    stack = [(node, 0) for node in reversed(nodes)]
    while stack:
        node, depth = stack.pop()
        pad = "  " * depth
        click.echo(f"{pad}{node.selector}  ({len(node.declarations)} declaration(s))")
        for decl in node.declarations:
            click.echo(f"{pad}  {decl.property}: {decl.value}")
        stack.extend((child, depth + 1) for child in reversed(node.children))


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--tokens", "show_tokens", is_flag=True, help="Show the token stream instead"
)
def inspect(source: str, show_tokens: bool) -> None:
    """Parse a LuaCSS file and display its structure.

    Shows the nested rule tree with each block's declarations, or with
    --tokens the significant tokens and their positions.
    """
    text = Path(source).read_text(encoding="utf-8")

    if show_tokens:
        for token in significant_tokens(tokenize(text)):
            unit = f" unit={token.unit}" if token.unit else ""
            click.echo(
                f"{token.line}:{token.column}  {token.kind.value:<12} {token.value!r}{unit}"
            )
        return

    parser = Parser(text)
    nodes = parser.parse()
    click.echo(f"Blocks: {len(nodes)}")
    click.echo()
    _echo_tree(nodes)

    if parser.diagnostics:
        click.echo()
        click.echo("Diagnostics:")
        for diag in parser.diagnostics:
            click.echo(f"  {diag}")
