"""Public package surface of the column-aligned log renderer.

Rendering is available as a pure function (:func:`render_event`) operating on
a :class:`LogEvent`, a :class:`FormatterConfig` and a :class:`HookRegistry`.
For everyday use :func:`init` wires the same renderer into the stdlib
:mod:`logging` package and :func:`get` hands out logger proxies::

    import lib_log_columns

    lib_log_columns.init()
    log = lib_log_columns.get(__name__)
    log.with_fields(COMMAND_START="ls -al /").info("")
    log.with_fields(COMMAND_RESULT=0).info("")
"""

from __future__ import annotations

from .adapters import (
    COMMAND_RESULT,
    COMMAND_START,
    ColumnFormatter,
    ColumnHandler,
    HookRegistry,
    RichColorizer,
    StreamConsoleAdapter,
    command_result,
    command_start,
    event_from_record,
    render_event,
)
from .application.ports import ColorizerPort, ConsolePort, FieldHook
from .domain import DEFAULT_PALETTE, FormatterConfig, LogEvent, LogLevel, format_field_value
from .runtime import (
    LoggerProxy,
    RuntimeSnapshot,
    add_hook,
    delete_hook,
    get,
    init,
    inspect_runtime,
    is_initialised,
    logdemo,
    shutdown,
    summary_info,
)

__all__ = [
    "COMMAND_RESULT",
    "COMMAND_START",
    "ColorizerPort",
    "ColumnFormatter",
    "ColumnHandler",
    "ConsolePort",
    "DEFAULT_PALETTE",
    "FieldHook",
    "FormatterConfig",
    "HookRegistry",
    "LogEvent",
    "LogLevel",
    "LoggerProxy",
    "RichColorizer",
    "RuntimeSnapshot",
    "StreamConsoleAdapter",
    "add_hook",
    "command_result",
    "command_start",
    "delete_hook",
    "event_from_record",
    "format_field_value",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "render_event",
    "shutdown",
    "summary_info",
]
