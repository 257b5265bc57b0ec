"""The command abstraction consumed by :class:`~sw_cli.core.dispatcher.Dispatcher`.

A command is a predicate-gated unit of behaviour with a static ordering
key.  ``can_handle`` is a hard commitment: once it returns ``True`` the
dispatcher runs ``execute`` and never consults another command, even if
execution fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sw_cli.core.config import CliConfig

VERSION_PRIORITY: int = 0
"""Reserved for the built-in version command."""

HELP_PRIORITY: int = 1
"""Reserved for the built-in help command."""

DEFAULT_PRIORITY: int = 100
"""Priority of ordinary application commands."""

ConfigT_contra = TypeVar("ConfigT_contra", bound=CliConfig, contravariant=True)


class Command(ABC, Generic[ConfigT_contra]):
    """Base class for dispatchable commands.

    Subclasses set :attr:`name` and, when they must be tried before
    ordinary commands, :attr:`priority`.  Lower priorities are tried
    first; application commands should keep the default so that the
    built-in ``--version`` / ``--help`` handlers always win.
    """

    name: str = "command"
    """Diagnostic label; not used for dispatch."""

    priority: int = DEFAULT_PRIORITY

    @abstractmethod
    def can_handle(self, config: ConfigT_contra) -> bool:
        """Return whether this command accepts *config*.

        Must be cheap, idempotent, and free of side effects.
        """

    @abstractmethod
    def execute(self, config: ConfigT_contra) -> None:
        """Perform the command.

        Raises
        ------
        SwCliError
            Any failure; the dispatcher propagates it unchanged.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"
