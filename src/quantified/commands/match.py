"""Command: test candidate payloads against a Quantified pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quantified.commands._base import QuantifiedCommand

if TYPE_CHECKING:
    from quantified.commands._context import AppContext


@click.command(
    cls=QuantifiedCommand,
    examples="""\
  quantified match 'Excluding("root")' root alice bob
  quantified --payload-type int match 'Some(3)' 1 2 3""",
)
@click.argument("pattern")
@click.argument("candidates", nargs=-1)
@click.pass_obj
def match(app: AppContext, pattern: str, candidates: tuple[str, ...]) -> None:
    """Show which CANDIDATES the PATTERN includes."""
    app.emit(app.service.match(pattern, list(candidates)))
