"""Column-aligned renderer turning a :class:`LogEvent` into one text line.

Purpose
-------
Produce the human-facing line: timestamp, level-coloured message, then the
fields, aligned on :attr:`FormatterConfig.fields_column` behind a ``|``
separator. Fields with a registered hook render themselves.

Contents
--------
* :func:`render_event` - the rendering algorithm.
* :func:`render_default_field` - ``key=value`` rendering for fields without a hook.

System Role
-----------
Pure function used by the emit use case, the logging bridge and the CLI.
The layout mirrors the examples in ``README.md``::

    2020-03-05 00:26:05 Some log                                            | f1="v1"
    Running ls -al /
     ==> OK
"""

from __future__ import annotations

import io
from typing import Any, TextIO

from lib_log_columns.application.ports.hooks import ColorizerPort
from lib_log_columns.domain import FormatterConfig, LogEvent, format_field_value

from .colorizer import RichColorizer
from .hook_registry import HookRegistry

FIELD_SEPARATOR = "|"


def render_default_field(
    config: FormatterConfig,
    sink: TextIO,
    name: str,
    value: Any,
    colorizer: ColorizerPort,
) -> None:
    """Write ``name=value`` with the key and value colours."""
    sink.write(colorizer.colorize(name, config.key_color))
    sink.write("=")
    sink.write(colorizer.colorize(format_field_value(value), config.value_color))


def render_event(
    event: LogEvent,
    config: FormatterConfig,
    registry: HookRegistry,
    interactive: bool,
) -> bytes:
    """Render ``event`` into a newline-terminated UTF-8 line.

    Parameters
    ----------
    event:
        The event to render; fields are used in their given order.
    config:
        Formatter options. Colour is written only when ``config.use_color``
        is set and ``interactive`` is true; the decision is taken here, per
        call.
    registry:
        Hooks consulted per field name.
    interactive:
        Whether the destination is an interactive terminal.

    Returns
    -------
    bytes
        The rendered line including the trailing ``\\n``.

    Notes
    -----
    The running column starts at ``len(config.time_format)``, the length of
    the layout rather than of the rendered timestamp. Widths are counted in
    characters, not UTF-8 bytes, so each non-ASCII character counts as one
    column. Escape sequences never count towards the column.
    Characters UTF-8 cannot encode (lone surrogates from
    :func:`os.fsdecode`) are written as backslash escapes. Exceptions raised
    by hooks propagate.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_columns.domain import LogLevel
    >>> config = FormatterConfig(time_format="", fields_column=12)
    >>> event = LogEvent(datetime(2025, 1, 1, tzinfo=timezone.utc), LogLevel.INFO, "Some log", {"f1": "v1"})
    >>> render_event(event, config, HookRegistry(), interactive=False)
    b'Some log    | f1="v1"\\n'
    """

    colorizer = RichColorizer(config.use_color and interactive, color_system=config.color_system)
    buffer = io.StringIO()

    buffer.write(colorizer.colorize(event.timestamp.strftime(config.time_format), config.time_color))
    column = len(config.time_format)
    if column > 0:
        buffer.write(" ")
        column += 1

    buffer.write(colorizer.colorize(event.message, config.level_color(event.level)))
    column += len(event.message)

    has_message = event.message != ""
    for index, (name, value) in enumerate(event.fields):
        if index == 0 and has_message and column < config.fields_column:
            buffer.write(" " * (config.fields_column - column))
            buffer.write(FIELD_SEPARATOR)
        if index > 0 or has_message:
            buffer.write(" ")

        hook = registry.lookup(name)
        if hook is not None:
            hook(config, buffer, value, colorizer)
        else:
            render_default_field(config, buffer, name, value, colorizer)

    buffer.write("\n")
    return buffer.getvalue().encode("utf-8", errors="backslashreplace")


__all__ = ["FIELD_SEPARATOR", "render_default_field", "render_event"]
