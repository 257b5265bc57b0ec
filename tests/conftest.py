"""Shared pytest fixtures and configuration for the sw-cli test suite.

Guidelines
----------
* No network access and no dependence on git or the host name.
* File-based tests use ``tmp_path``; stdin is replaced via ``monkeypatch``.
* Core tests must be pure: no side effects beyond captured streams.
"""

from __future__ import annotations

import pytest

from sw_cli.infra.build_metadata import (
    ENV_BUILD_HOST,
    ENV_BUILD_TIMESTAMP,
    ENV_COMMIT_SHA,
)


@pytest.fixture(autouse=True)
def _clean_build_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep build metadata from the surrounding shell out of every test."""
    for key in (ENV_BUILD_HOST, ENV_COMMIT_SHA, ENV_BUILD_TIMESTAMP):
        monkeypatch.delenv(key, raising=False)
