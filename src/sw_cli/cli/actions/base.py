"""Shared skeleton for the demo's line-processing commands.

Every command here:

* only claims configurations it can introspect; anything that is not a
  :class:`~sw_cli.cli.demo_config.DemoConfig` is rejected by
  ``can_handle``;
* under ``--dry-run`` prints one ``Would ...`` line per source (plus the
  output file, if any) to stdout and touches nothing;
* otherwise processes each source in order, writing result lines to the
  sink, with ``Processing: ...`` diagnostics on stderr when verbose.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from pathlib import Path

from sw_cli.cli.console import console
from sw_cli.cli.demo_config import DemoConfig
from sw_cli.core.command import Command
from sw_cli.core.config import CliConfig
from sw_cli.infra.line_io import LineSink, describe_source, open_sink, open_source


class LineCommand(Command[CliConfig]):
    """Base class for commands that transform input lines into output lines."""

    def can_handle(self, config: CliConfig) -> bool:
        demo = config.downcast(DemoConfig)
        return demo is not None and self.accepts(demo)

    def execute(self, config: CliConfig) -> None:
        demo = config.require(DemoConfig)
        if demo.is_dry_run():
            self._announce(demo)
            return

        with open_sink(demo.output) as sink:
            for source in demo.sources():
                if demo.verbosity() > 0:
                    console.diagnostic(
                        "Reading from stdin..." if source is None
                        else f"Processing: {source}"
                    )
                with open_source(source) as lines:
                    self.process(demo, source, lines, sink)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def accepts(self, config: DemoConfig) -> bool:
        """Return whether the mode switches select this command."""

    @abstractmethod
    def would(self, config: DemoConfig, label: str) -> str:
        """Return the dry-run announcement for the source named *label*."""

    @abstractmethod
    def process(
        self,
        config: DemoConfig,
        source: Path | None,
        lines: Iterator[str],
        sink: LineSink,
    ) -> None:
        """Consume *lines* from *source* and write results to *sink*."""

    # ------------------------------------------------------------------
    # Dry run
    # ------------------------------------------------------------------

    def _announce(self, config: DemoConfig) -> None:
        with open_sink(None) as stdout:
            for source in config.sources():
                stdout.write_line(self.would(config, describe_source(source)))
            if config.output is not None:
                stdout.write_line(f"Would write to: {config.output}")
