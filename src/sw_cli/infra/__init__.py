"""Infrastructure layer — external system integration.

This layer wraps all interaction with files, standard streams, git and
the host system.  Every raw ``OSError`` must be caught here and
re-raised as a :class:`~sw_cli.exceptions.SwCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No diagnostics or Rich rendering.
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from sw_cli.infra.build_metadata import (
    as_environment,
    build_info_from_env,
    probe_build_info,
)
from sw_cli.infra.line_io import LineSink, describe_source, open_sink, open_source

__all__: list[str] = [
    "LineSink",
    "as_environment",
    "build_info_from_env",
    "describe_source",
    "open_sink",
    "open_source",
    "probe_build_info",
]
