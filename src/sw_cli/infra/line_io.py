"""Infrastructure: line-oriented input sources and output sinks.

Sources are input files or standard input; sinks are standard output
or an output file.  Both are context managers so the underlying handle
is released on every exit path, including errors raised by the caller
mid-iteration.

Rules
-----
* Raw ``OSError`` / ``UnicodeDecodeError`` are re-raised as
  :class:`~sw_cli.exceptions.InputError` /
  :class:`~sw_cli.exceptions.OutputError` with the original message.
* Standard streams are looked up at use time and never closed.
* No user-facing output beyond the data lines callers write.
"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from sw_cli.exceptions import InputError, OutputError

STDIN_LABEL: str = "<stdin>"
"""Display name used for standard input in messages."""

_ENCODING = "utf-8"


def describe_source(path: Path | None) -> str:
    """Return the display name of an input source."""
    return STDIN_LABEL if path is None else str(path)


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def _iter_lines(stream: TextIO, label: str) -> Iterator[str]:
    """Yield lines from *stream* without their trailing newline."""
    try:
        for line in stream:
            yield line[:-1] if line.endswith("\n") else line
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"{label}: {exc}") from exc


@contextmanager
def open_source(path: Path | None) -> Iterator[Iterator[str]]:
    """Open *path* (or stdin when ``None``) and yield an iterator of lines.

    Raises
    ------
    InputError
        If the file cannot be opened or a read fails.
    """
    if path is None:
        yield _iter_lines(sys.stdin, STDIN_LABEL)
        return

    try:
        handle = open(path, encoding=_ENCODING)
    except OSError as exc:
        raise InputError(str(exc)) from exc

    with handle:
        yield _iter_lines(handle, str(path))


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class LineSink:
    """Write result lines to a text stream, mapping failures to ``OutputError``."""

    def __init__(self, stream: TextIO, label: str) -> None:
        self._stream: TextIO = stream
        self.label: str = label

    def write_line(self, text: str) -> None:
        try:
            self._stream.write(f"{text}\n")
        except OSError as exc:
            raise OutputError(f"{self.label}: {exc}") from exc

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise OutputError(f"{self.label}: {exc}") from exc


@contextmanager
def open_sink(path: Path | None) -> Iterator[LineSink]:
    """Yield a sink writing to *path* or stdout when ``None``.

    File output is staged in a sibling temporary file that replaces
    *path* only when the ``with`` block exits cleanly, so *path* may
    also be one of the inputs and a failed run leaves it untouched.

    Raises
    ------
    OutputError
        If the file cannot be created or a write fails.
    """
    if path is None:
        sink = LineSink(sys.stdout, "<stdout>")
        yield sink
        sink.flush()
        return

    try:
        handle = tempfile.NamedTemporaryFile(
            "w",
            encoding=_ENCODING,
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        )
    except OSError as exc:
        raise OutputError(str(exc)) from exc

    staged = Path(handle.name)
    try:
        with handle:
            yield LineSink(handle, str(path))
    except OSError as exc:
        staged.unlink(missing_ok=True)
        raise OutputError(f"{path}: {exc}") from exc
    except BaseException:
        staged.unlink(missing_ok=True)
        raise

    try:
        if path.exists():
            shutil.copymode(path, staged)
        os.replace(staged, path)
    except OSError as exc:
        staged.unlink(missing_ok=True)
        raise OutputError(f"{path}: {exc}") from exc
