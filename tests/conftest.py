from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable, Iterator

import pytest

from lib_log_columns import runtime
from lib_log_columns.adapters.hook_registry import HookRegistry
from lib_log_columns.domain import FormatterConfig, LogEvent, LogLevel

_TERMINAL_VARIABLES = {"NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"}


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop LOG_* and terminal variables so host settings never leak into tests."""

    for name in list(os.environ):
        if name.startswith("LOG_") or name in _TERMINAL_VARIABLES:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_runtime() -> Iterator[None]:
    runtime.shutdown()
    yield
    runtime.shutdown()


@pytest.fixture
def column_config() -> FormatterConfig:
    """Config matching the reference layout: no timestamp, fields at column 30."""

    return FormatterConfig(time_format="", fields_column=30)


@pytest.fixture
def registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2020, 3, 5, 0, 26, 5, tzinfo=timezone.utc)


@pytest.fixture
def make_event(fixed_time: datetime) -> Callable[..., LogEvent]:
    def factory(message: str = "", fields: Any = None, level: LogLevel = LogLevel.INFO) -> LogEvent:
        return LogEvent(timestamp=fixed_time, level=level, message=message, fields=fields or ())

    return factory


@pytest.fixture
def isolated_logger(request: pytest.FixtureRequest) -> Iterator[logging.Logger]:
    """Logger with a unique name that does not propagate to the root logger."""

    logger = logging.getLogger(f"tests.{request.node.name}")
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
