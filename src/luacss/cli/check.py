"""CLI command: luacss check -- report diagnostics without writing CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from luacss.compiler import compile_luacss


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def check(source: str) -> None:
    """Compile a LuaCSS file and print its diagnostics.

    Exits with code 0 if a stylesheet could be produced, or code 1 if not.
    """
    path = Path(source)
    result = compile_luacss(path.read_text(encoding="utf-8"))

    if not result.diagnostics:
        click.echo(f"OK: {path.name} compiles cleanly ({len(result.rules)} rule(s))")
        sys.exit(0)

    syntax = [d for d in result.diagnostics if d.is_syntax]
    semantic = [d for d in result.diagnostics if d.is_semantic]

    for diag in result.diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(syntax)} syntax, {len(semantic)} semantic, "
        f"{len(result.rules)} rule(s)"
    )

    if not result.ok:
        sys.exit(1)
    sys.exit(0)
