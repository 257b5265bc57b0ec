"""Custom exception hierarchy for sw-cli.

All exceptions that cross layer boundaries must inherit from
:class:`SwCliError`.  Raw ``OSError`` / ``UnicodeError`` from file and
stream access must NEVER propagate beyond the infrastructure layer;
they are caught and re-raised as a typed subclass defined here, with
the original message kept verbatim.

Hierarchy
---------
SwCliError
├── UnhandledRequestError
├── ConfigurationError
├── InputError
├── OutputError
└── EnvironmentError
"""

from __future__ import annotations


class SwCliError(Exception):
    """Base exception for all sw-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean
    ``Error: <message>`` line without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Dispatch --------------------------------------------------------------

class UnhandledRequestError(SwCliError):
    """Raised when no registered command accepts the configuration."""


class ConfigurationError(SwCliError):
    """Raised when a command receives a configuration it cannot introspect."""


# --- Input / output --------------------------------------------------------

class InputError(SwCliError):
    """Raised when reading an input file or standard input fails."""


class OutputError(SwCliError):
    """Raised when writing results to stdout or the output file fails."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SwCliError):
    """Raised when a required runtime dependency is not available."""
