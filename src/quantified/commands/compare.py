"""Command: structural comparison of two Quantified values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quantified.commands._base import QuantifiedCommand

if TYPE_CHECKING:
    from quantified.commands._context import AppContext


@click.command(
    cls=QuantifiedCommand,
    examples="""\
  quantified compare 'Some(5)' 'Some(5)'
  quantified compare None All
  quantified --json compare 'Some(NaN)' 'Some(1)'""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Compare LEFT with RIGHT (None < Some < Excluding < All)."""
    app.emit(app.service.compare(left, right))
