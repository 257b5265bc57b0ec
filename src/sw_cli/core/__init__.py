"""Core layer — configuration model, command abstraction, dispatcher.

Rules
-----
* No process termination and no argument parsing.
* No filesystem or network I/O; built-in commands write only to the
  text stream they are given.
* No imports from ``cli`` or ``infra``.
"""

from sw_cli.core.builtins import HelpCommand, VersionCommand
from sw_cli.core.command import (
    DEFAULT_PRIORITY,
    HELP_PRIORITY,
    VERSION_PRIORITY,
    Command,
)
from sw_cli.core.config import BaseConfig, CliConfig, HelpRequest
from sw_cli.core.dispatcher import Dispatcher
from sw_cli.core.version_info import BuildInfo, VersionInfo

__all__: list[str] = [
    "DEFAULT_PRIORITY",
    "HELP_PRIORITY",
    "VERSION_PRIORITY",
    "BaseConfig",
    "BuildInfo",
    "CliConfig",
    "Command",
    "Dispatcher",
    "HelpCommand",
    "HelpRequest",
    "VersionCommand",
    "VersionInfo",
]
