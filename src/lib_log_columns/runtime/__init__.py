"""Runtime façade wiring the column renderer into stdlib logging.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``add_hook``,
``delete_hook``, ``shutdown``) so host applications configure the renderer in
one place instead of assembling handlers, formatters and registries by hand.

Contents
--------
* ``init`` - composition root installing a :class:`ColumnHandler`.
* ``get`` - logger proxies with logrus-style ``with_fields``.
* ``add_hook`` / ``delete_hook`` - edit the active hook registry.
* ``inspect_runtime`` - read-only snapshot of the active configuration.
* ``logdemo`` - emit the example sequence used by the CLI ``demo`` command.
* ``summary_info`` - metadata banner shared with the CLI.

System Role
-----------
Outer shell of the package. The renderer itself keeps no process-wide state;
the singleton here only exists for callers who want the convenience.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO, Any

from lib_log_columns import config as _config
from lib_log_columns.adapters.command_hooks import COMMAND_RESULT, COMMAND_START
from lib_log_columns.adapters.hook_registry import HookRegistry
from lib_log_columns.application.ports.hooks import FieldHook
from lib_log_columns.domain import FormatterConfig, LogLevel

from ._composition import LoggerProxy, build_runtime, coerce_level
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    logger_name: str
    level: LogLevel
    time_format: str
    fields_column: int
    use_color: bool
    hooks: tuple[str, ...]


def init(
    *,
    level: str | LogLevel | None = None,
    stream: IO[Any] | None = None,
    config: FormatterConfig | None = None,
    registry: HookRegistry | None = None,
    logger_name: str | None = None,
    force_color: bool | None = None,
) -> None:
    """Compose the runtime and attach it to a stdlib logger.

    Parameters
    ----------
    level:
        Minimum severity. When omitted ``LOG_CONSOLE_LEVEL`` is consulted,
        falling back to INFO, so TRACE and DEBUG are dropped by default.
    stream:
        Destination stream, ``sys.stderr`` when omitted.
    config:
        Formatter options. When omitted they are read from the environment
        via :func:`lib_log_columns.config.formatter_config_from_env`.
    registry:
        Hook registry; a fresh one with the command hooks otherwise.
    logger_name:
        Stdlib logger receiving the handler; the root logger by default.
    force_color:
        Treat the stream as a terminal. ``LOG_FORCE_COLOR`` supplies the
        default.

    Raises
    ------
    RuntimeError
        When a runtime is already active.
    ValueError
        When level names or environment values are invalid.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_columns.init() cannot be called twice without shutdown(); call lib_log_columns.shutdown() first",
        )

    resolved_level = _config.level_from_env(LogLevel.INFO) if level is None else coerce_level(level)
    resolved_config = config if config is not None else _config.formatter_config_from_env()
    resolved_registry = registry if registry is not None else HookRegistry()
    force = _config.force_color_from_env() if force_color is None else force_color

    runtime = build_runtime(
        level=resolved_level,
        stream=stream,
        config=resolved_config,
        registry=resolved_registry,
        logger_name=logger_name,
        force_interactive=force,
    )
    set_runtime(runtime)
    logger.debug("column logging initialised", extra={"fields": {"level": resolved_level.severity}})


def get(name: str | None = None) -> LoggerProxy:
    """Return a logger proxy for ``name``.

    Raises :class:`RuntimeError` when ``init`` has not been called.
    """

    runtime = current_runtime()
    if name is None:
        return LoggerProxy(runtime.logger)
    return LoggerProxy(logging.getLogger(name))


def add_hook(name: str, hook: FieldHook) -> None:
    """Register ``hook`` for field ``name`` on the active runtime."""

    current_runtime().registry.add_hook(name, hook)


def delete_hook(name: str) -> None:
    """Remove the hook for field ``name`` from the active runtime."""

    current_runtime().registry.delete_hook(name)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        logger_name=runtime.logger.name,
        level=runtime.level,
        time_format=runtime.config.time_format,
        fields_column=runtime.config.fields_column,
        use_color=runtime.config.use_color,
        hooks=tuple(sorted(runtime.registry.names())),
    )


def shutdown() -> None:
    """Detach the handler and forget the runtime; a no-op when none is active."""

    runtime = clear_runtime()
    if runtime is None:
        return
    logger.debug("column logging shutting down")
    runtime.logger.removeHandler(runtime.handler)
    runtime.logger.setLevel(runtime.previous_level)
    runtime.handler.close()


def logdemo(
    *,
    stream: IO[Any] | None = None,
    config: FormatterConfig | None = None,
    force_color: bool | None = None,
) -> None:
    """Log the example sequence: every level, fields and two command pairs.

    Installs a temporary runtime at TRACE level on a private logger, so it
    raises :class:`RuntimeError` when a runtime is already active.
    """

    init(
        level=LogLevel.TRACE,
        stream=stream,
        config=config,
        logger_name="lib_log_columns.demo",
        force_color=force_color,
    )
    demo_logger = current_runtime().logger
    propagate = demo_logger.propagate
    demo_logger.propagate = False
    try:
        log = get()
        log.trace("Trace: Something very low level.")
        log.debug("Debug: Useful debugging information.")
        log.info("Info: Something noteworthy happened!")
        log.warning("Warn: You should probably take a look at this.")
        log.error("Error: Something failed but I'm not quitting.")
        log.with_fields(event="event", topic="topic").trace("Example with fields")
        log.warning("Commands have to be run by caller.")

        log.debug("Example of a bogus command with COMMAND_START/COMMAND_RESULT.")
        log.with_fields({COMMAND_START: "ls -al /bogus"}).info("")
        log.with_fields({COMMAND_RESULT: 2}).error("")

        log.debug("Example of a successful command.")
        log.with_fields({COMMAND_START: "ls -al /"}).info("")
        log.with_fields({COMMAND_RESULT: 0}).info("")
    finally:
        shutdown()
        demo_logger.propagate = propagate


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point."""

    from .. import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "LoggerProxy",
    "LoggingRuntime",
    "RuntimeSnapshot",
    "add_hook",
    "delete_hook",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "shutdown",
    "summary_info",
]
