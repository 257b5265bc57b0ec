"""Tests for line-oriented sources and sinks (infra/line_io.py)."""

from __future__ import annotations

import io
import sys
from pathlib import Path
from unittest.mock import MagicMock, mock_open, patch

import pytest

from sw_cli.exceptions import InputError, OutputError
from sw_cli.infra.line_io import (
    STDIN_LABEL,
    LineSink,
    describe_source,
    open_sink,
    open_source,
)


class TestDescribeSource:
    def test_stdin(self) -> None:
        assert describe_source(None) == STDIN_LABEL == "<stdin>"

    def test_path(self) -> None:
        assert describe_source(Path("a/b.txt")) == str(Path("a/b.txt"))


class TestOpenSource:
    def test_file_lines_without_newlines(self, tmp_path: Path) -> None:
        path = tmp_path / "in.txt"
        path.write_text("a\n\nb", encoding="utf-8")
        with open_source(path) as lines:
            assert list(lines) == ["a", "", "b"]

    def test_file_is_closed_when_caller_fails(self, tmp_path: Path) -> None:
        opener = mock_open(read_data="a\nb\n")
        with patch("sw_cli.infra.line_io.open", opener, create=True):
            with pytest.raises(RuntimeError):
                with open_source(tmp_path / "in.txt") as lines:
                    next(lines)
                    raise RuntimeError("caller failure")
        opener.return_value.__exit__.assert_called_once()

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("x\ny\n"))
        with open_source(None) as lines:
            assert list(lines) == ["x", "y"]

    def test_stdin_read_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        broken = MagicMock()
        broken.__iter__.side_effect = OSError("read failed")
        monkeypatch.setattr(sys, "stdin", broken)
        with pytest.raises(InputError, match="<stdin>: read failed"):
            with open_source(None) as lines:
                list(lines)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputError, match="No such file or directory"):
            with open_source(tmp_path / "nope.txt"):
                pass


class TestOpenSink:
    def test_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        with open_sink(None) as sink:
            sink.write_line("hello")
        assert capsys.readouterr().out == "hello\n"

    def test_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        with open_sink(target) as sink:
            sink.write_line("one")
            sink.write_line("two")
        assert target.read_text(encoding="utf-8") == "one\ntwo\n"

    def test_broken_pipe_is_output_error(self) -> None:
        stream = MagicMock()
        stream.write.side_effect = BrokenPipeError("Broken pipe")
        sink = LineSink(stream, "<stdout>")
        with pytest.raises(OutputError, match="<stdout>: Broken pipe"):
            sink.write_line("data")

    def test_target_appears_only_after_clean_exit(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        with open_sink(target) as sink:
            sink.write_line("pending")
            assert not target.exists()
        assert target.read_text(encoding="utf-8") == "pending\n"

    def test_failure_discards_staged_lines(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        target.write_text("kept\n", encoding="utf-8")
        with pytest.raises(RuntimeError):
            with open_sink(target) as sink:
                sink.write_line("partial")
                raise RuntimeError("boom")
        assert target.read_text(encoding="utf-8") == "kept\n"
        assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]
