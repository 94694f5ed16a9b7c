"""Debug output for probes, enrichment and breach lookups.

Enabled per thread by the CLI ``--debug`` flag; writes to stderr so JSON
reports on stdout stay clean.
"""

import threading
from typing import Any

from rich.console import Console

MAX_VALUE_LENGTH = 100

_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    return getattr(_debug_state, "enabled", False)


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        text = ", ".join(str(item) for item in value)
    else:
        text = str(value)
    if len(text) > MAX_VALUE_LENGTH:
        return f"{text[:MAX_VALUE_LENGTH]}... ({len(text)} chars)"
    return text


def debug_print(category: str, message: str, **data: Any) -> None:
    """Print one debug line plus any non-empty ``key: value`` details.

    Args:
        category: Debug category (probe, enrich, hibp)
        message: Main message to display
        **data: Details; lists are joined, long values truncated
    """
    if not is_debug_enabled():
        return
    console = Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False, soft_wrap=True)
    for key, value in data.items():
        if value is None:
            continue
        console.print(f"  {key}: {_format_value(value)}", style="dim", markup=False, soft_wrap=True)


def debug_probe(url: str, outcome: str, elapsed: float | None = None) -> None:
    """Log one probe outcome in debug mode."""
    if not is_debug_enabled():
        return
    timing = f" +{elapsed:.2f}s" if elapsed is not None else ""
    debug_print("probe", f"GET {url} -> {outcome}{timing}")
