"""sw-cli — configuration/command/dispatch framework for small CLIs.

An application registers predicate-gated commands with a dispatcher and
exactly one of them runs per invocation.
"""

from sw_cli.version import __version__

__all__: list[str] = ["__version__"]
