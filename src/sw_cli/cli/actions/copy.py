"""Default command — echo every line unchanged.

Accepts any demo configuration, so it must keep the default priority
and be registered after the mode-specific commands.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from sw_cli.cli.actions.base import LineCommand
from sw_cli.cli.demo_config import DemoConfig
from sw_cli.infra.line_io import LineSink


class CopyCommand(LineCommand):
    name = "copy"

    def accepts(self, config: DemoConfig) -> bool:
        return True

    def would(self, config: DemoConfig, label: str) -> str:
        return f"Would copy: {label}"

    def process(
        self,
        config: DemoConfig,
        source: Path | None,
        lines: Iterator[str],
        sink: LineSink,
    ) -> None:
        for line in lines:
            sink.write_line(line)
