"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from quantified.output.console import create_console, get_output, style_for_variant

if TYPE_CHECKING:
    from quantified.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the global CLI options."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_value(key: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        return escape(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    text = escape(str(value))
    if key == "variant":
        style = style_for_variant(str(value))
        if style:
            return f"[{style}]{text}[/{style}]"
    return text


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable, non-verbose.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console(no_color=True)
    if result.ok:
        console.print(f"[q.ok]OK[/q.ok]: [q.op]{escape(result.op)}[/q.op]")
        if not settings.quiet:
            for key, value in result.data.items():
                console.print(f"  [q.key]{escape(key)}[/q.key]: {_format_value(key, value)}")
        if settings.verbose and result.meta:
            for key, value in result.meta.items():
                console.print(f"  [q.key]meta.{escape(key)}[/q.key]: {_format_value(key, value)}")
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[q.error]ERROR[/q.error]: [q.op]{escape(result.op)}[/q.op] - {escape(message)}"
        )
    return get_output(console).rstrip("\n")
