"""Console and logging helpers for the ic-wasm launcher."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

# Reports go to stdout, launcher diagnostics to stderr so the wrapped
# tool's stdout is never polluted.
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
_verbose = False

_STYLES = {
    "error": ("❌", "bold red"),
    "warning": ("⚠️", "yellow"),
    "success": ("✅", "green"),
    "info": ("", "blue"),
    "debug": ("🔍", "dim"),
}


def setup_logging(verbose: bool = False) -> None:  # noqa: FBT001, FBT002
    """Configure logging level based on verbosity."""
    global _verbose  # noqa: PLW0603
    _verbose = verbose
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


def log(
    message: str,
    level: str = "info",
) -> None:
    """Print a styled message to stderr.

    Args:
        message: Plain text, escaped before printing.
        level: One of ``error``, ``warning``, ``success``, ``info`` or ``debug``.

    """
    if level == "debug" and not _verbose:
        return
    emoji, style = _STYLES[level]
    prefix = f"{emoji} " if emoji else ""
    err_console.print(f"{prefix}[{style}]{escape(message)}[/{style}]")
