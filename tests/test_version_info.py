"""Tests for the version/build-info value objects (core/version_info.py)."""

from __future__ import annotations

import pytest

from sw_cli.core.version_info import BuildInfo, VersionInfo


def _build(**overrides: object) -> BuildInfo:
    defaults: dict[str, object] = {
        "build_host": "builder.local",
        "commit_sha": "abc123def456",
        "build_timestamp_ms": 1_700_000_000_000,
    }
    defaults.update(overrides)
    return BuildInfo(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# BuildInfo
# ---------------------------------------------------------------------------

class TestBuildInfo:
    def test_display(self) -> None:
        assert (
            str(_build())
            == "Build: abc123d @ builder.local (2023-11-14T22:13:20+00:00)"
        )

    def test_short_sha_is_seven_chars(self) -> None:
        assert _build().short_sha == "abc123d"

    def test_short_commit_is_kept_whole(self) -> None:
        assert _build(commit_sha="abc").short_sha == "abc"
        assert str(_build(commit_sha="unknown")).startswith("Build: unknown @ ")

    def test_milliseconds_shown_when_present(self) -> None:
        info = _build(build_timestamp_ms=1_700_000_000_123)
        assert str(info).endswith("(2023-11-14T22:13:20.123+00:00)")

    def test_negative_timestamp(self) -> None:
        info = _build(build_timestamp_ms=-1_000)
        assert str(info).endswith("(1969-12-31T23:59:59+00:00)")

    @pytest.mark.parametrize("timestamp", [10**15, 10**20, -(10**20)])
    def test_out_of_range_timestamp_renders_epoch(self, timestamp: int) -> None:
        info = _build(build_timestamp_ms=timestamp)
        assert str(info).endswith("(1970-01-01T00:00:00+00:00)")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            _build().build_host = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# VersionInfo
# ---------------------------------------------------------------------------

class TestVersionInfo:
    def test_display_is_four_lines(self) -> None:
        version = VersionInfo(
            version="0.1.0",
            copyright="Copyright (c) 2025 Example Corp",
            license_name="MIT",
            license_url="https://github.com/example/repo/blob/main/LICENSE",
            build_info=_build(),
        )
        assert str(version) == "\n".join(
            (
                "Version: 0.1.0",
                "Copyright (c) 2025 Example Corp",
                "MIT License: https://github.com/example/repo/blob/main/LICENSE",
                "Build: abc123d @ builder.local (2023-11-14T22:13:20+00:00)",
            )
        )

    def test_display_is_deterministic(self) -> None:
        version = VersionInfo("1.2.3", "(c)", "MIT", "https://x", _build())
        assert str(version) == str(version)
