"""Formatter configuration and the default colour palette.

Purpose
-------
Hold every option the renderer consults: the timestamp layout, the fields
column, the colour switch and one Rich style string per colour slot.

Contents
--------
* :data:`DEFAULT_PALETTE` - default Rich styles keyed by attribute name.
* :data:`COLOR_SYSTEMS` - accepted ``color_system`` values.
* :class:`FormatterConfig` - mutable, caller-owned configuration.

System Role
-----------
Domain value shared by the renderer, the command hooks, the environment
loader in :mod:`lib_log_columns.config` and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping

from .levels import LogLevel

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_FIELDS_COLUMN = 70

DEFAULT_PALETTE: Mapping[str, str] = {
    "time_color": "color(247)",
    "panic_color": "bold red",
    "fatal_color": "bold red",
    "error_color": "red",
    "warn_color": "bold bright_yellow",
    "info_color": "bright_cyan",
    "debug_color": "magenta",
    "trace_color": "color(247)",
    "key_color": "color(247)",
    "value_color": "color(251)",
    "command_header_color": "color(242)",
    "command_color": "color(247)",
    "command_success_color": "bold green",
    "command_fail_color": "bold red",
}
#: Rich style strings used when a :class:`FormatterConfig` is built without overrides.

COLOR_SYSTEMS = ("standard", "256", "truecolor")

_LEVEL_ATTRIBUTES: Mapping[LogLevel, str] = {
    LogLevel.PANIC: "panic_color",
    LogLevel.FATAL: "fatal_color",
    LogLevel.ERROR: "error_color",
    LogLevel.WARN: "warn_color",
    LogLevel.INFO: "info_color",
    LogLevel.DEBUG: "debug_color",
    LogLevel.TRACE: "trace_color",
}


@dataclass(slots=True)
class FormatterConfig:
    """Options consulted by the renderer on every call.

    One instance is usually created per output destination. All attributes
    may be changed at any time; colours are only requested here, the renderer
    decides per call whether escape sequences are actually written.

    Attributes
    ----------
    time_format:
        :meth:`datetime.strftime` layout. An empty layout suppresses the
        timestamp but its length still feeds the column arithmetic.
    fields_column:
        Column the field separator is aligned to; ``0`` disables padding.
    use_color:
        Caller-level switch; colour additionally requires an interactive
        destination.
    color_system:
        Rich colour system used when colour is enabled.
    *_color:
        Rich style strings (``"bold red"``, ``"color(247)"`` ...). An empty
        string means no styling.
    """

    time_format: str = DEFAULT_TIME_FORMAT
    fields_column: int = DEFAULT_FIELDS_COLUMN
    use_color: bool = True
    color_system: str = "256"
    time_color: str = DEFAULT_PALETTE["time_color"]
    panic_color: str = DEFAULT_PALETTE["panic_color"]
    fatal_color: str = DEFAULT_PALETTE["fatal_color"]
    error_color: str = DEFAULT_PALETTE["error_color"]
    warn_color: str = DEFAULT_PALETTE["warn_color"]
    info_color: str = DEFAULT_PALETTE["info_color"]
    debug_color: str = DEFAULT_PALETTE["debug_color"]
    trace_color: str = DEFAULT_PALETTE["trace_color"]
    key_color: str = DEFAULT_PALETTE["key_color"]
    value_color: str = DEFAULT_PALETTE["value_color"]
    command_header_color: str = DEFAULT_PALETTE["command_header_color"]
    command_color: str = DEFAULT_PALETTE["command_color"]
    command_success_color: str = DEFAULT_PALETTE["command_success_color"]
    command_fail_color: str = DEFAULT_PALETTE["command_fail_color"]

    def __post_init__(self) -> None:
        if self.fields_column < 0:
            raise ValueError(f"fields_column must be >= 0, got {self.fields_column}")
        if self.color_system not in COLOR_SYSTEMS:
            raise ValueError(f"color_system must be one of {', '.join(COLOR_SYSTEMS)}, got {self.color_system!r}")

    def level_color(self, level: object) -> str:
        """Return the style for ``level``; unknown levels get no colour.

        Examples
        --------
        >>> FormatterConfig().level_color(LogLevel.ERROR)
        'red'
        >>> FormatterConfig().level_color("nonsense")
        ''
        """

        attribute = _LEVEL_ATTRIBUTES.get(level) if isinstance(level, LogLevel) else None
        if attribute is None:
            return ""
        return getattr(self, attribute)

    @classmethod
    def color_attributes(cls) -> tuple[str, ...]:
        """Return the names of every colour attribute."""

        return tuple(item.name for item in fields(cls) if item.name in DEFAULT_PALETTE)


__all__ = [
    "COLOR_SYSTEMS",
    "DEFAULT_FIELDS_COLUMN",
    "DEFAULT_PALETTE",
    "DEFAULT_TIME_FORMAT",
    "FormatterConfig",
]
