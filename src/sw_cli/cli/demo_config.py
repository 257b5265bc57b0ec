"""Extended configuration for the demo line-processing application."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sw_cli.core.config import CliConfig


@dataclass(frozen=True)
class DemoConfig(CliConfig):
    """Standard flags plus the demo's input/output and mode switches."""

    inputs: tuple[Path, ...] = ()
    """Input files in the order given; empty means standard input."""

    output: Path | None = None
    """Destination for result lines; ``None`` means standard output."""

    pattern: str | None = None
    """Substring to search for (``-p/--pattern``)."""

    count: bool = False
    """``--count`` mode switch."""

    reverse: bool = False
    """``--reverse`` mode switch."""

    def sources(self) -> tuple[Path | None, ...]:
        """Return the input sources, with ``None`` standing for stdin."""
        return self.inputs if self.inputs else (None,)
