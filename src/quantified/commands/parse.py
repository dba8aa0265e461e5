"""Command: parse a Quantified value and show its forms."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quantified.commands._base import QuantifiedCommand

if TYPE_CHECKING:
    from quantified.commands._context import AppContext


@click.command(
    cls=QuantifiedCommand,
    examples="""\
  quantified parse 'Some(5)'
  quantified parse 'excluding("admin")'
  quantified --json parse All
  quantified --payload-type int parse 'Some("7")'""",
)
@click.argument("text")
@click.pass_obj
def parse(app: AppContext, text: str) -> None:
    """Parse TEXT and show its variant, payload, and renderings."""
    app.emit(app.service.parse(text))
