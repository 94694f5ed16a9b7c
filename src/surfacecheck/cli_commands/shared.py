"""Shared CLI app objects and store helpers."""

import typer
from rich.console import Console

from surfacecheck.utils.debug import set_debug_enabled

app = typer.Typer(
    name="surfacecheck",
    help="Attack-surface discovery and breach monitoring",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    debug: bool = typer.Option(False, "--debug", help="Print probe and API debug output"),
) -> None:
    """Attack-surface discovery and breach monitoring."""
    set_debug_enabled(debug)


def mask_secret(value: str | None) -> str:
    """Mask an API key for display."""
    if not value:
        return "[dim]not set[/dim]"
    if len(value) > 12:
        return value[:8] + "..." + value[-4:]
    return "***"

