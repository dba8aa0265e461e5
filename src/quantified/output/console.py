"""Rich Console factory and theme for quantified output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

QUANTIFIED_THEME = Theme(
    {
        "q.ok": "bold green",
        "q.error": "bold red",
        "q.warning": "bold yellow",
        "q.op": "bold cyan",
        "q.key": "dim",
        "q.variant.none": "red",
        "q.variant.some": "green",
        "q.variant.excluding": "yellow",
        "q.variant.all": "blue",
    }
)

_VARIANT_STYLES: dict[str, str] = {
    "none": "q.variant.none",
    "some": "q.variant.some",
    "excluding": "q.variant.excluding",
    "all": "q.variant.all",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=QUANTIFIED_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
        soft_wrap=True,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_variant(variant: str) -> str:
    """Return the Rich style name for a variant wire name."""
    return _VARIANT_STYLES.get(variant, "")
