"""Stream-backed console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write rendered lines to a Python stream (``sys.stderr`` by default) and
answer whether that stream is an interactive terminal.

Contents
--------
* :func:`is_interactive` - terminal probe for an arbitrary stream.
* :class:`StreamConsoleAdapter` - the console used by the logging handler.

System Role
-----------
Outermost edge of the rendering path. Terminal detection is delegated to
:class:`rich.console.Console`, so ``FORCE_COLOR`` and ``TTY_COMPATIBLE``
are honoured the same way Rich honours them. Each line is written with a
single call; I/O errors propagate to the caller.
"""

from __future__ import annotations

import io
from typing import IO, Any

from rich.console import Console

from lib_log_columns.application.ports.console import ConsolePort


def is_interactive(stream: IO[Any]) -> bool:
    """Return ``True`` when Rich considers ``stream`` a terminal.

    Examples
    --------
    >>> from io import StringIO
    >>> is_interactive(StringIO())
    False
    """

    return Console(file=stream).is_terminal


class StreamConsoleAdapter(ConsolePort):
    """Write rendered lines to a text or binary stream.

    Parameters
    ----------
    stream:
        Destination; ``sys.stderr`` (resolved at write time) when omitted.
    force_terminal:
        ``True`` treats the destination as a terminal whatever it reports;
        ``None`` lets Rich decide from the stream and the environment.
    """

    def __init__(self, stream: IO[Any] | None = None, *, force_terminal: bool | None = None) -> None:
        self._console = Console(file=stream, stderr=True, force_terminal=force_terminal)

    @property
    def stream(self) -> IO[Any]:
        """Return the target stream."""
        return self._console.file

    @stream.setter
    def stream(self, value: IO[Any] | None) -> None:
        self._console.file = value  # type: ignore[assignment]

    def is_interactive(self) -> bool:
        return self._console.is_terminal

    def write(self, data: bytes) -> None:
        """Write ``data`` in one call and flush.

        Binary streams receive the bytes unchanged; text streams receive the
        UTF-8 decoded line.
        """

        stream = self.stream
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream.write(data)
        else:
            stream.write(data.decode("utf-8"))
        stream.flush()


__all__ = ["StreamConsoleAdapter", "is_interactive"]
