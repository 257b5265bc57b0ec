"""Argument source — turns process arguments into configuration values.

argparse owns tokenisation and validation.  Help is *not* an argparse
action here: ``-h`` and ``--help`` are plain flags that feed
:class:`~sw_cli.core.config.HelpRequest`, and the dispatched help
command prints the text rendered by :func:`short_help` /
:func:`long_help`.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from sw_cli.cli.demo_config import DemoConfig
from sw_cli.core.config import BaseConfig, HelpRequest

PROG: str = "sw-cli-demo"

_DESCRIPTION = "Builder-Config-Dispatcher pattern demo: line-oriented file tools."

_EXAMPLES = """\
examples:
  sw-cli-demo --count -i notes.txt        count lines
  sw-cli-demo -p TODO -i a.txt -i b.txt   print lines containing TODO
  sw-cli-demo --reverse -i notes.txt      print lines in reverse order
  sw-cli-demo -i notes.txt -o copy.txt    copy lines to a file
  sw-cli-demo -n --reverse -i notes.txt   show what would be done
  cat notes.txt | sw-cli-demo --count     read from standard input

Priority: --version, then -h/--help, then --count, --pattern, --reverse;
copying is the default when no other mode is selected.
"""


# ---------------------------------------------------------------------------
# Standard flags
# ---------------------------------------------------------------------------

def add_standard_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the flags every sw-cli application recognises."""
    group = parser.add_argument_group("standard options")
    group.add_argument(
        "-V", "--version",
        action="store_true",
        help="Show version information",
    )
    group.add_argument(
        "-h",
        dest="help_short",
        action="store_true",
        help="Show short help (quick reference)",
    )
    group.add_argument(
        "--help",
        dest="help_long",
        action="store_true",
        help="Show detailed help with examples",
    )
    group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Increase output verbosity",
    )
    group.add_argument(
        "-n", "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Show what would be done without doing it",
    )
    group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output (overrides --verbose)",
    )


def parse_base_config(namespace: argparse.Namespace) -> BaseConfig:
    """Derive :class:`BaseConfig` from parsed standard flags.

    ``--help`` wins over ``-h`` when both are given.
    """
    if namespace.help_long:
        help_request = HelpRequest.LONG
    elif namespace.help_short:
        help_request = HelpRequest.SHORT
    else:
        help_request = HelpRequest.NONE

    return BaseConfig(
        verbose=namespace.verbose,
        dry_run=namespace.dry_run,
        help=help_request,
        version=namespace.version,
        quiet=namespace.quiet,
    )


# ---------------------------------------------------------------------------
# Demo application flags
# ---------------------------------------------------------------------------

def _add_demo_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("options")
    group.add_argument(
        "-i", "--input",
        dest="inputs",
        metavar="FILE",
        action="append",
        type=Path,
        default=None,
        help="Input file (repeatable); reads stdin when omitted",
    )
    group.add_argument(
        "-o", "--output",
        metavar="FILE",
        type=Path,
        default=None,
        help="Output file; writes stdout when omitted",
    )
    group.add_argument(
        "-p", "--pattern",
        metavar="PATTERN",
        default=None,
        help="Print lines containing PATTERN",
    )
    group.add_argument(
        "--count",
        action="store_true",
        help="Count lines in input",
    )
    group.add_argument(
        "--reverse",
        action="store_true",
        help="Reverse line order",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the demo application's argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=_DESCRIPTION,
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    add_standard_arguments(parser)
    _add_demo_arguments(parser)
    return parser


def parse_config(
    argv: Sequence[str] | None = None,
    parser: argparse.ArgumentParser | None = None,
) -> DemoConfig:
    """Parse *argv* (``sys.argv[1:]`` when ``None``) into a :class:`DemoConfig`."""
    namespace = (parser or build_parser()).parse_args(argv)
    return DemoConfig(
        base=parse_base_config(namespace),
        inputs=tuple(namespace.inputs or ()),
        output=namespace.output,
        pattern=namespace.pattern,
        count=namespace.count,
        reverse=namespace.reverse,
    )


# ---------------------------------------------------------------------------
# Help text
# ---------------------------------------------------------------------------

def short_help(parser: argparse.ArgumentParser | None = None) -> str:
    """Return the quick-reference text printed for ``-h``."""
    parser = parser or build_parser()
    return "\n".join(
        (
            _DESCRIPTION,
            "",
            parser.format_usage().rstrip(),
            "",
            "Use --help for detailed help with examples.",
        )
    )


def long_help(parser: argparse.ArgumentParser | None = None) -> str:
    """Return the detailed text printed for ``--help``."""
    parser = parser or build_parser()
    return parser.format_help().rstrip()
