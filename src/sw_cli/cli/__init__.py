"""CLI layer — argument source, demo commands, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``.
Result lines go to stdout; diagnostics and errors go to stderr through
:mod:`sw_cli.cli.console`.
"""
