"""Configuration model shared by every sw-cli application.

All models are **frozen** dataclasses: values are fixed once the
argument source has produced them and stay immutable for the lifetime
of one invocation.  Every query below is a pure function of the stored
fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from sw_cli.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Help request
# ---------------------------------------------------------------------------

class HelpRequest(Enum):
    """Which help text, if any, the user asked for."""

    NONE = "none"
    SHORT = "short"
    """``-h`` — quick reference."""
    LONG = "long"
    """``--help`` — detailed help with examples."""


# ---------------------------------------------------------------------------
# Standard flags
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BaseConfig:
    """Flags recognised by every sw-cli application."""

    verbose: bool = False
    """``-v/--verbose`` — emit progress diagnostics on stderr."""

    dry_run: bool = False
    """``-n/--dry-run`` — announce mutations instead of performing them."""

    help: HelpRequest = HelpRequest.NONE
    """Requested help variant."""

    version: bool = False
    """``-V/--version`` — print version information."""

    quiet: bool = False
    """``-q/--quiet`` — suppress diagnostics; overrides ``verbose``."""

    def verbosity(self) -> int:
        """Return ``1`` when diagnostics are wanted, else ``0``.

        ``quiet`` wins over ``verbose`` when both are set.
        """
        if self.quiet:
            return 0
        return 1 if self.verbose else 0


# ---------------------------------------------------------------------------
# Capability interface
# ---------------------------------------------------------------------------

ConfigT = TypeVar("ConfigT", bound="CliConfig")


@dataclass(frozen=True)
class CliConfig:
    """Read-only capability view over a parsed configuration.

    Applications subclass this (as a frozen dataclass) to add their own
    fields.  Commands written against :class:`CliConfig` use the queries
    below; commands that need extension fields recover the concrete type
    with :meth:`downcast` or :meth:`require`.
    """

    base: BaseConfig = field(default_factory=BaseConfig)

    def wants_help(self) -> bool:
        return self.base.help is not HelpRequest.NONE

    def wants_short_help(self) -> bool:
        return self.base.help is HelpRequest.SHORT

    def wants_long_help(self) -> bool:
        return self.base.help is HelpRequest.LONG

    def wants_version(self) -> bool:
        return self.base.version

    def verbosity(self) -> int:
        return self.base.verbosity()

    def is_dry_run(self) -> bool:
        return self.base.dry_run

    def is_quiet(self) -> bool:
        return self.base.quiet

    # ------------------------------------------------------------------
    # Concrete-type recovery
    # ------------------------------------------------------------------

    def downcast(self, config_type: type[ConfigT]) -> ConfigT | None:
        """Return ``self`` as *config_type*, or ``None`` if it is not one."""
        if isinstance(self, config_type):
            return self
        return None

    def require(self, config_type: type[ConfigT]) -> ConfigT:
        """Return ``self`` as *config_type* or raise :class:`ConfigurationError`."""
        concrete = self.downcast(config_type)
        if concrete is None:
            raise ConfigurationError(
                f"Expected {config_type.__name__} configuration, "
                f"got {type(self).__name__}.",
            )
        return concrete
