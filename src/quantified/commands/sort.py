"""Command: sort Quantified values by structural order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quantified.commands._base import QuantifiedCommand

if TYPE_CHECKING:
    from quantified.commands._context import AppContext


@click.command(
    cls=QuantifiedCommand,
    examples="""\
  quantified sort All 'Some(2)' None 'Excluding(1)' 'Some(1)'
  quantified sort --reverse All None""",
)
@click.argument("values", nargs=-1, required=True)
@click.option("--reverse", is_flag=True, help="Sort descending (also set by [sort] reverse).")
@click.pass_obj
def sort(app: AppContext, values: tuple[str, ...], reverse: bool) -> None:
    """Sort VALUES in structural order."""
    app.emit(app.service.sort(list(values), reverse=True if reverse else None))
