"""LuaCSS CLI entry point: Click group with subcommands."""

import logging

import click

from luacss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="luacss")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """LuaCSS - compile Lua-inspired style sheets into CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from luacss.cli.compile import compile_command  # noqa: E402
from luacss.cli.check import check  # noqa: E402
from luacss.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_command)
cli.add_command(check)
cli.add_command(inspect)
