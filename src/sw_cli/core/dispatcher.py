"""Priority-ordered chain of commands; exactly one runs per invocation.

The dispatcher keeps its commands sorted ascending by ``priority``.
Python's ``list.sort`` is stable, so commands sharing a priority stay in
registration order, which is the tie-break rule.

Guarantees
----------
* Predicates are evaluated in sorted order and only until one matches.
* The matching command's failure is propagated unchanged; no later
  command is tried.
* No output, no process termination.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Generic, TextIO, TypeVar

from sw_cli.core.builtins import HelpCommand, VersionCommand
from sw_cli.core.command import Command
from sw_cli.core.config import CliConfig
from sw_cli.core.version_info import VersionInfo
from sw_cli.exceptions import UnhandledRequestError

ConfigT = TypeVar("ConfigT", bound=CliConfig)

_by_priority = attrgetter("priority")


class Dispatcher(Generic[ConfigT]):
    """Select and run the first command that accepts a configuration.

    Usage::

        dispatcher = (
            Dispatcher.with_builtins(version_info, short_help, long_help)
            .register(CountCommand())
            .register(CopyCommand())
        )
        dispatcher.dispatch(config)
    """

    def __init__(self) -> None:
        self._commands: list[Command[Any]] = []

    @classmethod
    def with_builtins(
        cls,
        version_info: VersionInfo,
        short_help: str,
        long_help: str,
        *,
        out: TextIO | None = None,
    ) -> Dispatcher[ConfigT]:
        """Create a dispatcher with the version and help commands registered."""
        dispatcher: Dispatcher[ConfigT] = cls()
        dispatcher.register(VersionCommand(version_info, out=out))
        dispatcher.register(HelpCommand(short_help, long_help, out=out))
        return dispatcher

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, command: Command[Any]) -> Dispatcher[ConfigT]:
        """Add *command* and restore priority order; returns ``self``.

        Duplicate names are allowed; every registered command remains
        a candidate.
        """
        self._commands.append(command)
        self._commands.sort(key=_by_priority)
        return self

    @property
    def commands(self) -> tuple[Command[Any], ...]:
        """Registered commands in dispatch order."""
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def select(self, config: ConfigT) -> Command[Any] | None:
        """Return the first command whose predicate accepts *config*."""
        for command in self._commands:
            if command.can_handle(config):
                return command
        return None

    def dispatch(self, config: ConfigT) -> None:
        """Run the selected command for *config*.

        Raises
        ------
        UnhandledRequestError
            If no registered command accepts *config*.
        SwCliError
            Whatever the selected command raises, unchanged.
        """
        command = self.select(config)
        if command is None:
            raise UnhandledRequestError("No command could handle this request")
        command.execute(config)
