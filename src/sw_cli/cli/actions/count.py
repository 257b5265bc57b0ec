"""``--count`` — print the number of lines in each source."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from sw_cli.cli.actions.base import LineCommand
from sw_cli.cli.demo_config import DemoConfig
from sw_cli.infra.line_io import LineSink


class CountCommand(LineCommand):
    name = "count"

    def accepts(self, config: DemoConfig) -> bool:
        return config.count

    def would(self, config: DemoConfig, label: str) -> str:
        return f"Would count lines in: {label}"

    def process(
        self,
        config: DemoConfig,
        source: Path | None,
        lines: Iterator[str],
        sink: LineSink,
    ) -> None:
        total = sum(1 for _ in lines)
        if source is not None and config.verbosity() > 0:
            sink.write_line(f"{source}: {total} lines")
        else:
            sink.write_line(str(total))
