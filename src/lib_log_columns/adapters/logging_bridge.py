"""Bridge between the stdlib :mod:`logging` package and the column renderer.

Purpose
-------
The stdlib logging framework owns event collection, level filtering and the
output stream. This module plugs the renderer into it: records become
:class:`LogEvent` objects, a formatter renders them, a handler writes them
through :class:`StreamConsoleAdapter`.

Contents
--------
* :data:`TRACE` / :data:`PANIC` - extra numeric levels registered with
  :mod:`logging` on import.
* :func:`event_from_record` - ``LogRecord`` to ``LogEvent`` conversion.
* :class:`ColumnFormatter` - :class:`logging.Formatter` subclass.
* :class:`ColumnHandler` - :class:`logging.Handler` writing one line per record.

System Role
-----------
Used by :func:`lib_log_columns.init`; also usable on its own with any logger
configuration. Fields travel in ``extra={"fields": {...}}``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import IO, Any

from lib_log_columns.application.use_cases.emit_event import create_emit_event
from lib_log_columns.domain import FormatterConfig, LogEvent, LogLevel

from .console.stream_console import StreamConsoleAdapter
from .hook_registry import HookRegistry
from .renderer import render_event

TRACE = LogLevel.TRACE.value
PANIC = LogLevel.PANIC.value
FIELDS_ATTRIBUTE = "fields"
ERROR_FIELD = "error"

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(PANIC, "PANIC")


def _record_fields(record: logging.LogRecord) -> list[tuple[str, Any]]:
    raw = getattr(record, FIELDS_ATTRIBUTE, None)
    if raw is None:
        pairs: list[tuple[str, Any]] = []
    elif isinstance(raw, Mapping):
        pairs = list(raw.items())
    else:
        pairs = [tuple(item) for item in raw]  # type: ignore[misc]
    if record.exc_info and record.exc_info[1] is not None:
        exc = record.exc_info[1]
        pairs.append((ERROR_FIELD, f"{type(exc).__name__}: {exc}"))
    return pairs


def event_from_record(record: logging.LogRecord) -> LogEvent:
    """Convert ``record`` into a :class:`LogEvent`.

    The timestamp is the record creation time in the local zone, the level
    is mapped with :meth:`LogLevel.from_python_level`, fields come from the
    ``fields`` attribute (a mapping or ``(name, value)`` pairs) and an
    attached exception adds an ``error`` field.
    """

    return LogEvent(
        timestamp=datetime.fromtimestamp(record.created).astimezone(),
        level=LogLevel.from_python_level(record.levelno),
        message=record.getMessage(),
        fields=_record_fields(record),  # type: ignore[arg-type]
    )


class ColumnFormatter(logging.Formatter):
    """Format records as column-aligned lines.

    :meth:`format` returns the line without its trailing newline because the
    stdlib stream handlers append their own terminator. Use :meth:`render`
    for the full byte line.
    """

    def __init__(
        self,
        config: FormatterConfig | None = None,
        registry: HookRegistry | None = None,
        *,
        interactive: bool = False,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else FormatterConfig()
        self.registry = registry if registry is not None else HookRegistry()
        self.interactive = interactive

    def render(self, record: logging.LogRecord, *, interactive: bool | None = None) -> bytes:
        """Return the rendered line for ``record`` including the newline."""
        flag = self.interactive if interactive is None else interactive
        return render_event(event_from_record(record), self.config, self.registry, flag)

    def render_event(self, event: LogEvent, interactive: bool) -> bytes:
        """Render an already converted event with this formatter's settings."""
        return render_event(event, self.config, self.registry, interactive)

    def format(self, record: logging.LogRecord) -> str:
        return self.render(record).decode("utf-8").rstrip("\n")


class ColumnHandler(logging.Handler):
    """Write each record as one rendered line to a stream.

    Interactivity of the stream is checked on every record, so swapping the
    stream with :meth:`setStream` takes effect immediately.
    """

    def __init__(
        self,
        stream: IO[Any] | None = None,
        config: FormatterConfig | None = None,
        registry: HookRegistry | None = None,
        *,
        force_interactive: bool = False,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self.console = StreamConsoleAdapter(stream, force_terminal=True if force_interactive else None)
        self.force_interactive = force_interactive
        self.setFormatter(ColumnFormatter(config, registry))

    @property
    def column_formatter(self) -> ColumnFormatter:
        formatter = self.formatter
        if not isinstance(formatter, ColumnFormatter):
            raise TypeError("ColumnHandler requires a ColumnFormatter")
        return formatter

    @property
    def stream(self) -> IO[Any]:
        return self.console.stream

    def setStream(self, stream: IO[Any]) -> IO[Any] | None:  # noqa: N802 - stdlib naming
        """Replace the target stream and return the previous one."""
        previous = self.console.stream
        if stream is previous:
            return None
        self.acquire()
        try:
            self.console.stream = stream
        finally:
            self.release()
        return previous

    def emit(self, record: logging.LogRecord) -> None:
        try:
            formatter = self.column_formatter
            emit = create_emit_event(console=self.console, render=formatter.render_event)
            emit(event_from_record(record))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)


__all__ = [
    "ColumnFormatter",
    "ColumnHandler",
    "PANIC",
    "TRACE",
    "event_from_record",
]
