"""Built-in commands registered by :meth:`Dispatcher.with_builtins`.

Both write their text verbatim to an injected stream, resolved to the
current ``sys.stdout`` at execute time when none was given.
"""

from __future__ import annotations

import sys
from typing import TextIO

from sw_cli.core.command import HELP_PRIORITY, VERSION_PRIORITY, Command
from sw_cli.core.config import CliConfig
from sw_cli.core.version_info import VersionInfo


class _StreamCommand(Command[CliConfig]):
    def __init__(self, out: TextIO | None = None) -> None:
        self._out: TextIO | None = out

    def _write(self, text: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(f"{text}\n")


class VersionCommand(_StreamCommand):
    """Print version and build information for ``-V/--version``."""

    name = "version"
    priority = VERSION_PRIORITY

    def __init__(self, version_info: VersionInfo, out: TextIO | None = None) -> None:
        super().__init__(out)
        self.version_info: VersionInfo = version_info

    def can_handle(self, config: CliConfig) -> bool:
        return config.wants_version()

    def execute(self, config: CliConfig) -> None:
        self._write(str(self.version_info))


class HelpCommand(_StreamCommand):
    """Print short help for ``-h`` and long help for ``--help``."""

    name = "help"
    priority = HELP_PRIORITY

    def __init__(
        self,
        short_help: str,
        long_help: str,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(out)
        self.short_help: str = short_help
        self.long_help: str = long_help

    def can_handle(self, config: CliConfig) -> bool:
        return config.wants_help()

    def execute(self, config: CliConfig) -> None:
        if config.wants_long_help():
            self._write(self.long_help)
        else:
            self._write(self.short_help)
