"""CLI console helpers with optional Rich support.

Everything rendered here goes to **stderr**: diagnostics and error
reports.  Result lines are never routed through this module.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``-h``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from sw_cli.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def strip_markup(text: str) -> str:
    """Remove simple Rich style tags such as ``[bold red]`` / ``[/bold red]``."""
    return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render markup with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)

    def diagnostic(self, message: str) -> None:
        """Print a progress line verbatim (no markup interpretation)."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(message, file=sys.stderr)
            return
        rich_console.print(message, markup=False, style="dim")

    def error(self, message: str, hint: str | None = None) -> None:
        """Print ``Error: <message>`` and an optional ``Hint:`` line."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(f"Error: {message}", file=sys.stderr)
            if hint:
                print(f"Hint: {hint}", file=sys.stderr)
            return

        from rich.text import Text

        rich_console.print(Text.assemble(("Error:", "bold red"), " ", message))
        if hint:
            rich_console.print(Text.assemble(("Hint:", "yellow"), " ", hint))


console = _ConsoleProxy()
