"""Allow ``python -m sw_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m sw_cli`` behaves identically to the ``sw-cli-demo``
console script.
"""

from __future__ import annotations

from sw_cli.cli.app import cli

if __name__ == "__main__":
    cli()
