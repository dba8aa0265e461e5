"""Subcommand modules for quantified.

Provides register_commands() which uses deferred imports to keep
``quantified --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from quantified.commands.compare import compare
    from quantified.commands.match import match
    from quantified.commands.parse import parse
    from quantified.commands.sort import sort

    cli.add_command(parse)
    cli.add_command(compare)
    cli.add_command(sort)
    cli.add_command(match)
