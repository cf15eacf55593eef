"""Runtime composition helpers wiring domain, adapters and stdlib logging.

Purpose
-------
Translate :func:`lib_log_columns.init` arguments into a live
:class:`LoggingRuntime` and provide :class:`LoggerProxy`, the logrus-style
facade handed out by :func:`lib_log_columns.get`.

Contents
--------
* :class:`LoggerProxy` - level helpers plus ``with_fields`` binding.
* :func:`coerce_level` - accept names or :class:`LogLevel` values.
* :func:`build_runtime` - assemble config, registry and handler.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import IO, Any

from lib_log_columns.adapters.hook_registry import HookRegistry
from lib_log_columns.adapters.logging_bridge import ColumnHandler
from lib_log_columns.domain import FormatterConfig, LogLevel

from ._state import LoggingRuntime


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Return ``level`` as :class:`LogLevel`, parsing names case-insensitively."""
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


class LoggerProxy:
    """Lightweight facade over a stdlib logger carrying bound fields.

    ``with_fields`` returns a new proxy; the original keeps its own fields,
    so a base logger can be shared while each call site adds its context.

    Examples
    --------
    >>> proxy = LoggerProxy(logging.getLogger("doctest")).with_fields(job="build")
    >>> proxy.fields
    {'job': 'build'}
    """

    def __init__(self, logger: logging.Logger, fields: Mapping[str, Any] | None = None) -> None:
        self._logger = logger
        self._fields: dict[str, Any] = dict(fields or {})

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def with_fields(self, fields: Mapping[str, Any] | None = None, /, **extra: Any) -> "LoggerProxy":
        """Return a proxy whose records carry these fields after the bound ones."""
        merged = dict(self._fields)
        merged.update(fields or {})
        merged.update(extra)
        return LoggerProxy(self._logger, merged)

    def with_field(self, key: str, value: Any) -> "LoggerProxy":
        """Return a proxy with a single additional field."""
        return self.with_fields({key: value})

    def trace(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.TRACE, message, args, kwargs)

    def debug(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, args, kwargs)

    def info(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, args, kwargs)

    def warning(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.WARN, message, args, kwargs)

    warn = warning

    def error(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, args, kwargs)

    def fatal(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        """Log at ``FATAL``; unlike logrus the process keeps running."""
        self._log(LogLevel.FATAL, message, args, kwargs)

    def panic(self, message: str = "", *args: Any, **kwargs: Any) -> None:
        """Log at ``PANIC``; raising is left to the caller."""
        self._log(LogLevel.PANIC, message, args, kwargs)

    def is_enabled_for(self, level: str | LogLevel) -> bool:
        return self._logger.isEnabledFor(coerce_level(level).to_python_level())

    def _log(self, level: LogLevel, message: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        numeric = level.to_python_level()
        if not self._logger.isEnabledFor(numeric):
            return
        extra = dict(kwargs.pop("extra", None) or {})
        call_fields = extra.pop("fields", None)
        fields = dict(self._fields)
        if call_fields:
            fields.update(call_fields)
        extra["fields"] = fields
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(numeric, message, *args, extra=extra, **kwargs)


def build_runtime(
    *,
    level: LogLevel,
    stream: IO[Any] | None,
    config: FormatterConfig,
    registry: HookRegistry,
    logger_name: str | None,
    force_interactive: bool,
) -> LoggingRuntime:
    """Create the handler and attach it to the target stdlib logger."""

    handler = ColumnHandler(stream, config, registry, force_interactive=force_interactive)
    target = logging.getLogger(logger_name)
    previous_level = target.level
    target.addHandler(handler)
    target.setLevel(level.to_python_level())
    return LoggingRuntime(
        config=config,
        registry=registry,
        handler=handler,
        logger=target,
        level=level,
        previous_level=previous_level,
    )


__all__ = ["LoggerProxy", "build_runtime", "coerce_level"]
