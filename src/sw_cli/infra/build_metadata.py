"""Infrastructure: capture and load per-build metadata.

The build tool runs :func:`probe_build_info` once (via the
``sw-cli-build-env`` script) and exports the resulting variables; the
installed application reads them back with :func:`build_info_from_env`.
Nothing here is consulted during dispatch beyond that read.

Rules
-----
* Missing or malformed values degrade to ``"unknown"`` / ``0``; build
  metadata never blocks a run.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import socket
import subprocess
import time
from collections.abc import Mapping

from sw_cli.core.version_info import BuildInfo

ENV_BUILD_HOST: str = "SW_CLI_BUILD_HOST"
ENV_COMMIT_SHA: str = "SW_CLI_GIT_COMMIT_SHA"
ENV_BUILD_TIMESTAMP: str = "SW_CLI_BUILD_TIMESTAMP"

UNKNOWN: str = "unknown"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _parse_timestamp(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def build_info_from_env(environ: Mapping[str, str]) -> BuildInfo:
    """Build a :class:`BuildInfo` from exported build variables."""
    return BuildInfo(
        build_host=environ.get(ENV_BUILD_HOST) or UNKNOWN,
        commit_sha=environ.get(ENV_COMMIT_SHA) or UNKNOWN,
        build_timestamp_ms=_parse_timestamp(environ.get(ENV_BUILD_TIMESTAMP)),
    )


def as_environment(build_info: BuildInfo) -> dict[str, str]:
    """Return the variables that :func:`build_info_from_env` reads back."""
    return {
        ENV_BUILD_HOST: build_info.build_host,
        ENV_COMMIT_SHA: build_info.commit_sha,
        ENV_BUILD_TIMESTAMP: str(build_info.build_timestamp_ms),
    }


# ---------------------------------------------------------------------------
# Probing (build time)
# ---------------------------------------------------------------------------

def _probe_host() -> str:
    try:
        host = socket.gethostname().strip()
    except OSError:
        return UNKNOWN
    return host or UNKNOWN


def _probe_commit_sha() -> str:
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return UNKNOWN
    sha = result.stdout.strip()
    if result.returncode != 0 or not sha:
        return UNKNOWN
    return sha


def probe_build_info() -> BuildInfo:
    """Collect host name, current git commit, and the current time."""
    return BuildInfo(
        build_host=_probe_host(),
        commit_sha=_probe_commit_sha(),
        build_timestamp_ms=time.time_ns() // 1_000_000,
    )
