"""``sw-cli-build-env`` — print build metadata for the build tool to export.

Run once at build time, for example::

    export $(sw-cli-build-env)

The installed application then reads the same variables back when
rendering ``--version``.
"""

from __future__ import annotations

import sys

from sw_cli.cli import exit_codes
from sw_cli.infra.build_metadata import as_environment, probe_build_info


def main() -> int:
    """Probe the build environment and print ``KEY=value`` lines to stdout."""
    for key, value in as_environment(probe_build_info()).items():
        print(f"{key}={value}")
    return exit_codes.SUCCESS


def cli() -> None:
    sys.exit(main())
