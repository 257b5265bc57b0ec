"""``-p/--pattern`` — print lines containing a substring."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from sw_cli.cli.actions.base import LineCommand
from sw_cli.cli.demo_config import DemoConfig
from sw_cli.infra.line_io import LineSink


class GrepCommand(LineCommand):
    name = "grep"

    def accepts(self, config: DemoConfig) -> bool:
        return config.pattern is not None

    def would(self, config: DemoConfig, label: str) -> str:
        return f"Would search for '{config.pattern}' in: {label}"

    def process(
        self,
        config: DemoConfig,
        source: Path | None,
        lines: Iterator[str],
        sink: LineSink,
    ) -> None:
        pattern = config.pattern or ""
        prefixed = source is not None and config.verbosity() > 0
        for line in lines:
            if pattern in line:
                sink.write_line(f"{source}: {line}" if prefixed else line)
