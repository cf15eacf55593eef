"""Built-in hooks for the command start/result logging convention.

Two log calls form a pair: the first carries ``COMMAND_START`` with the
command line, the second ``COMMAND_RESULT`` with the exit code::

    Running ls -al /inexistant
     ==> Failed (exit code 2)

No state links the two calls; the pairing only exists in the rendered text.
"""

from __future__ import annotations

from typing import Any, TextIO

from lib_log_columns.application.ports.hooks import ColorizerPort
from lib_log_columns.domain.settings import FormatterConfig

COMMAND_START = "COMMAND_START"
COMMAND_RESULT = "COMMAND_RESULT"


def _exit_code(value: Any) -> int | None:
    """Return ``value`` as an integer exit code, or ``None`` when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def command_start(config: FormatterConfig, sink: TextIO, value: Any, colorizer: ColorizerPort) -> None:
    """Render ``Running <command>``."""
    sink.write(colorizer.colorize("Running", config.command_header_color))
    sink.write(" ")
    sink.write(colorizer.colorize(str(value), config.command_color))


def command_result(config: FormatterConfig, sink: TextIO, value: Any, colorizer: ColorizerPort) -> None:
    """Render `` ==> OK`` for a zero exit code and `` ==> Failed (exit code N)`` otherwise."""
    sink.write(" ")
    sink.write(colorizer.colorize("==>", config.command_header_color))
    sink.write(" ")
    if _exit_code(value) == 0:
        sink.write(colorizer.colorize("OK", config.command_success_color))
        return
    sink.write(colorizer.colorize("Failed", config.command_fail_color))
    sink.write(" ")
    sink.write(colorizer.colorize(f"(exit code {value})", config.command_header_color))


BUILTIN_HOOKS = {
    COMMAND_START: command_start,
    COMMAND_RESULT: command_result,
}


__all__ = [
    "BUILTIN_HOOKS",
    "COMMAND_RESULT",
    "COMMAND_START",
    "command_result",
    "command_start",
]
