from __future__ import annotations

import io
import logging
import sys
from typing import Any

import pytest

from lib_log_columns.adapters.hook_registry import HookRegistry
from lib_log_columns.adapters.logging_bridge import (
    PANIC,
    TRACE,
    ColumnFormatter,
    ColumnHandler,
    event_from_record,
)
from lib_log_columns.domain import FormatterConfig, LogLevel


class _FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


def _record(level: int = logging.INFO, msg: str = "Some log", args: Any = (), **attributes: Any) -> logging.LogRecord:
    record = logging.LogRecord("tests.bridge", level, __file__, 1, msg, args, None)
    for key, value in attributes.items():
        setattr(record, key, value)
    return record


def _attach(logger: logging.Logger, stream: io.StringIO, config: FormatterConfig, **kwargs: Any) -> ColumnHandler:
    handler = ColumnHandler(stream, config, HookRegistry(), **kwargs)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return handler


def test_trace_and_panic_level_names_are_registered() -> None:
    assert logging.getLevelName(TRACE) == "TRACE"
    assert logging.getLevelName(PANIC) == "PANIC"


def test_event_from_record_maps_level_message_and_fields() -> None:
    record = _record(logging.WARNING, "hello %s", ("world",), fields={"f1": "v1", "n": 2})
    event = event_from_record(record)

    assert event.level is LogLevel.WARN
    assert event.message == "hello world"
    assert event.fields == (("f1", "v1"), ("n", 2))
    assert event.timestamp.tzinfo is not None
    assert event.timestamp.timestamp() == pytest.approx(record.created)


def test_event_from_record_accepts_field_pairs() -> None:
    event = event_from_record(_record(fields=[("a", 1), ("a", 2)]))
    assert event.fields == (("a", 1), ("a", 2))


def test_event_from_record_without_fields() -> None:
    assert event_from_record(_record()).fields == ()


def test_exception_info_becomes_error_field() -> None:
    try:
        raise ValueError("bad input")
    except ValueError:
        record = _record(logging.ERROR, "boom", exc_info=sys.exc_info(), fields={"step": 3})
    event = event_from_record(record)
    assert event.fields == (("step", 3), ("error", "ValueError: bad input"))


def test_formatter_format_omits_trailing_newline(column_config: FormatterConfig) -> None:
    formatter = ColumnFormatter(column_config, HookRegistry())
    assert formatter.format(_record(fields={"f1": "v1"})) == "Some log" + " " * 22 + '| f1="v1"'


def test_formatter_render_returns_full_line(column_config: FormatterConfig) -> None:
    formatter = ColumnFormatter(column_config, HookRegistry())
    assert formatter.render(_record(msg="", fields={"COMMAND_RESULT": 0})) == b" ==> OK\n"


def test_formatter_works_with_stdlib_stream_handler(
    isolated_logger: logging.Logger, column_config: FormatterConfig
) -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColumnFormatter(column_config))
    isolated_logger.addHandler(handler)
    isolated_logger.setLevel(logging.INFO)

    isolated_logger.info("", extra={"fields": {"COMMAND_START": "ls -al /"}})

    assert stream.getvalue() == "Running ls -al /\n"


def test_handler_writes_one_line_per_record(isolated_logger: logging.Logger, column_config: FormatterConfig) -> None:
    stream = io.StringIO()
    _attach(isolated_logger, stream, column_config)

    isolated_logger.error("Some log", extra={"fields": {"f1": "v1"}})
    isolated_logger.info("", extra={"fields": {"COMMAND_RESULT": 1}})

    assert stream.getvalue().splitlines() == [
        "Some log" + " " * 22 + '| f1="v1"',
        " ==> Failed (exit code 1)",
    ]


@pytest.mark.parametrize("level", [TRACE, logging.DEBUG])
def test_levels_below_threshold_produce_no_output(
    isolated_logger: logging.Logger, column_config: FormatterConfig, level: int
) -> None:
    stream = io.StringIO()
    _attach(isolated_logger, stream, column_config)

    isolated_logger.log(level, "Message")

    assert stream.getvalue() == ""


def test_handler_colours_only_terminal_streams(isolated_logger: logging.Logger, column_config: FormatterConfig) -> None:
    terminal = _FakeTerminal()
    handler = _attach(isolated_logger, terminal, column_config)
    isolated_logger.warning("Foo")
    assert "\x1b[" in terminal.getvalue()

    plain = io.StringIO()
    handler.setStream(plain)
    isolated_logger.warning("Foo")
    assert plain.getvalue() == "Foo\n"


def test_handler_force_interactive_colours_any_stream(
    isolated_logger: logging.Logger, column_config: FormatterConfig
) -> None:
    stream = io.StringIO()
    _attach(isolated_logger, stream, column_config, force_interactive=True)
    isolated_logger.info("Foo")
    assert stream.getvalue() == "\x1b[96mFoo\x1b[0m\n"


def test_handler_reports_write_errors_through_handle_error(
    isolated_logger: logging.Logger, column_config: FormatterConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _Broken(io.StringIO):
        def write(self, text: str) -> int:
            raise OSError("disk full")

    handler = _attach(isolated_logger, _Broken(), column_config)
    seen: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", seen.append)

    isolated_logger.info("lost")

    assert [record.getMessage() for record in seen] == ["lost"]


def test_set_stream_returns_previous_stream(column_config: FormatterConfig) -> None:
    first, second = io.StringIO(), io.StringIO()
    handler = ColumnHandler(first, column_config)
    assert handler.setStream(second) is first
    assert handler.setStream(second) is None
    assert handler.stream is second


def test_handler_writes_lines_with_undecodable_values(
    isolated_logger: logging.Logger, column_config: FormatterConfig
) -> None:
    stream = io.StringIO()
    _attach(isolated_logger, stream, column_config)

    isolated_logger.info("opened", extra={"fields": {"path": b"report-\xff.txt".decode("utf-8", "surrogateescape")}})

    assert stream.getvalue() == "opened" + " " * 24 + '| path="report-\\udcff.txt"\n'
