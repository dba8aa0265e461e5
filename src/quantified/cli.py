"""Root CLI group for quantified with global flags and command registration."""

from __future__ import annotations

import click

from quantified import __version__
from quantified.commands import register_commands
from quantified.commands._context import AppContext
from quantified.config.settings import QuantifiedSettings
from quantified.domain.payloads import PAYLOAD_TYPES


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="quantified")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--payload-type",
    type=click.Choice(list(PAYLOAD_TYPES)),
    default=None,
    help="Validate payloads as this type (default from [payload] type).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    payload_type: str | None,
) -> None:
    """quantified — inspect None / Some / Excluding / All values."""
    settings = QuantifiedSettings.from_cli(
        config_path=config_path,
        payload_type=payload_type,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
