"""CLI command: luacss compile -- write the CSS for a LuaCSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from luacss.compiler import compile_or_raise
from luacss.config import CompilerConfig
from luacss.errors import CompileError


@click.command("compile")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write CSS to this file instead of stdout",
)
@click.option(
    "--indent",
    default=2,
    type=click.IntRange(min=0),
    help="Declaration indent width",
)
@click.option("--strict", is_flag=True, help="Fail on any diagnostic")
def compile_command(source: str, output: str | None, indent: int, strict: bool) -> None:
    """Compile a LuaCSS file to CSS.

    Diagnostics are printed to stderr. Exits with code 1 if no stylesheet
    could be produced (or, with --strict, if anything was reported).
    """
    config = CompilerConfig(indent=indent, strict=strict)
    text = Path(source).read_text(encoding="utf-8")

    try:
        result = compile_or_raise(text, config)
    except CompileError as exc:
        for diag in exc.diagnostics:
            click.echo(f"  {diag}", err=True)
        click.echo(f"Compilation failed: {Path(source).name}", err=True)
        sys.exit(1)

    for diag in result.diagnostics:
        click.echo(f"  {diag}", err=True)

    css = result.stylesheet + "\n" if result.stylesheet else ""
    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {len(result.rules)} rule(s) to {output}", err=True)
    else:
        click.echo(css, nl=False)
