"""Version and build-metadata value objects.

Both objects are frozen dataclasses whose ``str()`` is the deterministic
display text printed by the built-in version command.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SHORT_SHA_LENGTH = 7


def _format_timestamp(timestamp_ms: int) -> str:
    """Render milliseconds since the epoch as an RFC 3339 UTC string.

    Out-of-range values render as the epoch itself.
    """
    try:
        moment = _EPOCH + timedelta(milliseconds=timestamp_ms)
    except OverflowError:
        moment = _EPOCH
    timespec = "seconds" if moment.microsecond == 0 else "milliseconds"
    return moment.isoformat(timespec=timespec)


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Metadata captured when the distribution was built."""

    build_host: str
    """Host name of the build machine."""

    commit_sha: str
    """Full git commit identifier."""

    build_timestamp_ms: int
    """Build time in milliseconds since the Unix epoch."""

    @property
    def short_sha(self) -> str:
        return self.commit_sha[:_SHORT_SHA_LENGTH]

    def __str__(self) -> str:
        return (
            f"Build: {self.short_sha} @ {self.build_host} "
            f"({_format_timestamp(self.build_timestamp_ms)})"
        )


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """Everything ``--version`` reports."""

    version: str
    copyright: str
    license_name: str
    license_url: str
    build_info: BuildInfo

    def __str__(self) -> str:
        return "\n".join(
            (
                f"Version: {self.version}",
                self.copyright,
                f"{self.license_name} License: {self.license_url}",
                str(self.build_info),
            )
        )
