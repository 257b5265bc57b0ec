"""``--reverse`` — print each source's lines last-to-first."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from sw_cli.cli.actions.base import LineCommand
from sw_cli.cli.demo_config import DemoConfig
from sw_cli.infra.line_io import LineSink


class ReverseCommand(LineCommand):
    name = "reverse"

    def accepts(self, config: DemoConfig) -> bool:
        return config.reverse

    def would(self, config: DemoConfig, label: str) -> str:
        return f"Would reverse lines in: {label}"

    def process(
        self,
        config: DemoConfig,
        source: Path | None,
        lines: Iterator[str],
        sink: LineSink,
    ) -> None:
        # A read error must leave no partial output for this source.
        buffered = list(lines)
        for line in reversed(buffered):
            sink.write_line(line)
