"""CLI application entry point for the sw-cli demo.

This module is the **sole error boundary** for the entire application.
It catches :class:`~sw_cli.exceptions.SwCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering ``Error: ...`` messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No command logic lives here; the dispatcher picks exactly one
  registered command per invocation.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence

from sw_cli.cli import builder, exit_codes
from sw_cli.cli.actions import CopyCommand, CountCommand, GrepCommand, ReverseCommand
from sw_cli.cli.console import console
from sw_cli.cli.demo_config import DemoConfig
from sw_cli.core.dispatcher import Dispatcher
from sw_cli.core.version_info import VersionInfo
from sw_cli.exceptions import SwCliError
from sw_cli.infra.build_metadata import build_info_from_env
from sw_cli.version import COPYRIGHT, LICENSE_NAME, LICENSE_URL, __version__


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def version_info(environ: Mapping[str, str] | None = None) -> VersionInfo:
    """Assemble the ``--version`` payload from release and build constants."""
    return VersionInfo(
        version=__version__,
        copyright=COPYRIGHT,
        license_name=LICENSE_NAME,
        license_url=LICENSE_URL,
        build_info=build_info_from_env(os.environ if environ is None else environ),
    )


def build_dispatcher(
    parser: argparse.ArgumentParser | None = None,
) -> Dispatcher[DemoConfig]:
    """Register the built-ins and the demo's commands.

    Equal-priority commands are tried in the order registered here, so
    the catch-all :class:`CopyCommand` goes last.
    """
    parser = parser or builder.build_parser()
    dispatcher: Dispatcher[DemoConfig] = Dispatcher.with_builtins(
        version_info(),
        builder.short_help(parser),
        builder.long_help(parser),
    )
    return (
        dispatcher
        .register(CountCommand())
        .register(GrepCommand())
        .register(ReverseCommand())
        .register(CopyCommand())
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the sw-cli demo.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SwCliError
        When no command handles the request or the selected command fails.
    """
    parser = builder.build_parser()
    config = builder.parse_config(argv, parser)
    build_dispatcher(parser).dispatch(config)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SwCliError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue."
        )
        console.diagnostic(f"  {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
