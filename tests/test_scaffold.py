"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version constants are accessible.
* The core and infra layers re-export their public API.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from sw_cli import __version__
from sw_cli.cli import exit_codes
from sw_cli.cli.app import main
from sw_cli.exceptions import (
    ConfigurationError,
    EnvironmentError,
    InputError,
    OutputError,
    SwCliError,
    UnhandledRequestError,
)
import sw_cli.core
import sw_cli.infra
from sw_cli.core import command, config, dispatcher
from sw_cli.version import COPYRIGHT, LICENSE_NAME, LICENSE_URL


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_license_constants(self) -> None:
        assert COPYRIGHT.startswith("Copyright")
        assert LICENSE_NAME == "MIT"
        assert LICENSE_URL.startswith("https://")


# ---------------------------------------------------------------------------
# Package exports
# ---------------------------------------------------------------------------

class TestPackageExports:
    @pytest.mark.parametrize("name", sw_cli.core.__all__)
    def test_core_exports_resolve(self, name: str) -> None:
        assert getattr(sw_cli.core, name) is not None

    def test_core_reexports_are_the_defining_objects(self) -> None:
        from sw_cli.core import CliConfig, Command, DEFAULT_PRIORITY, Dispatcher

        assert Dispatcher is dispatcher.Dispatcher
        assert Command is command.Command
        assert CliConfig is config.CliConfig
        assert DEFAULT_PRIORITY == command.DEFAULT_PRIORITY == 100

    @pytest.mark.parametrize("name", sw_cli.infra.__all__)
    def test_infra_exports_resolve(self, name: str) -> None:
        assert callable(getattr(sw_cli.infra, name))


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            UnhandledRequestError,
            ConfigurationError,
            InputError,
            OutputError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[SwCliError]
    ) -> None:
        assert issubclass(exc_class, SwCliError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(SwCliError, Exception)

    def test_hint_is_stored(self) -> None:
        err = SwCliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = SwCliError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag_returns_success(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["--version"])
        assert code == exit_codes.SUCCESS
        assert f"Version: {__version__}" in capsys.readouterr().out

    def test_short_help_returns_success(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["-h"])
        assert code == exit_codes.SUCCESS
        assert "usage: sw-cli-demo" in capsys.readouterr().out

    def test_unknown_flag_exits_with_argparse_code(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--definitely-not-a-flag"])
        assert exc_info.value.code == 2
