"""Configuration helpers: ``.env`` loading and environment overrides.

Purpose
-------
Resolve :class:`FormatterConfig` options from the process environment so
deployments can tweak alignment and colours without code changes, and
optionally seed that environment from the nearest ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle consulted by the CLI.
* :func:`enable_dotenv` - load the nearest ``.env`` once per process.
* :func:`formatter_config_from_env` - build a config from environment values.
* :func:`level_from_env` - resolve ``LOG_CONSOLE_LEVEL``.

System Role
-----------
Consumed by :func:`lib_log_columns.init` and the CLI. Explicit arguments
always win over environment values; environment values win over ``.env``
entries.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from threading import Lock
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_columns.adapters.colorizer import validate_style
from lib_log_columns.domain import FormatterConfig, LogLevel

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
TIME_FORMAT_ENV_VAR = "LOG_TIME_FORMAT"
FIELDS_COLUMN_ENV_VAR = "LOG_FIELDS_COLUMN"
USE_COLOR_ENV_VAR = "LOG_USE_COLOR"
COLOR_SYSTEM_ENV_VAR = "LOG_COLOR_SYSTEM"
FORCE_COLOR_ENV_VAR = "LOG_FORCE_COLOR"
NO_COLOR_ENV_VAR = "NO_COLOR"
CONSOLE_LEVEL_ENV_VAR = "LOG_CONSOLE_LEVEL"
STYLE_ENV_PREFIX = "LOG_STYLE_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def enable_dotenv(path: str | os.PathLike[str] | None = None) -> Path | None:
    """Load variables from the nearest ``.env`` without overriding the environment.

    Parameters
    ----------
    path:
        Explicit file to load. When omitted the search starts in the current
        working directory and walks up to the filesystem root.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
        Later calls return the first result without reloading.
    """

    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        candidate = Path(path) if path is not None else _find_dotenv()
        if candidate is not None and candidate.is_file():
            load_dotenv(candidate, override=False)
            _DOTENV_PATH = candidate.resolve()
            logger.debug("loaded dotenv file", extra={"fields": {"path": str(_DOTENV_PATH)}})
        _DOTENV_LOADED = True
        return _DOTENV_PATH


def _find_dotenv() -> Path | None:
    found = find_dotenv(usecwd=True)
    return Path(found) if found else None


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` file was loaded."""

    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


def parse_bool(name: str, raw: str) -> bool:
    """Interpret ``raw`` as a boolean flag read from variable ``name``."""

    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def dotenv_requested(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when :data:`DOTENV_ENV_VAR` asks for ``.env`` loading."""

    env = os.environ if environ is None else environ
    raw = env.get(DOTENV_ENV_VAR)
    return raw is not None and parse_bool(DOTENV_ENV_VAR, raw)


def style_env_var(attribute: str) -> str:
    """Return the environment variable overriding colour ``attribute``.

    Examples
    --------
    >>> style_env_var("command_header_color")
    'LOG_STYLE_COMMAND_HEADER'
    """

    return STYLE_ENV_PREFIX + attribute.removesuffix("_color").upper()


def formatter_config_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    base: FormatterConfig | None = None,
) -> FormatterConfig:
    """Return a :class:`FormatterConfig` with environment overrides applied.

    ``base`` supplies the starting values (defaults otherwise) and is never
    mutated. Malformed values raise :class:`ValueError` naming the variable.
    """

    env = os.environ if environ is None else environ
    changes: dict[str, object] = {}

    if TIME_FORMAT_ENV_VAR in env:
        changes["time_format"] = env[TIME_FORMAT_ENV_VAR]

    raw_column = env.get(FIELDS_COLUMN_ENV_VAR)
    if raw_column is not None:
        try:
            column = int(raw_column.strip())
        except ValueError as exc:
            raise ValueError(f"{FIELDS_COLUMN_ENV_VAR} must be an integer, got {raw_column!r}") from exc
        if column < 0:
            raise ValueError(f"{FIELDS_COLUMN_ENV_VAR} must be >= 0, got {column}")
        changes["fields_column"] = column

    raw_color = env.get(USE_COLOR_ENV_VAR)
    if raw_color is not None:
        changes["use_color"] = parse_bool(USE_COLOR_ENV_VAR, raw_color)
    if env.get(NO_COLOR_ENV_VAR):
        changes["use_color"] = False

    raw_system = env.get(COLOR_SYSTEM_ENV_VAR)
    if raw_system is not None:
        changes["color_system"] = raw_system.strip().lower()

    for attribute in FormatterConfig.color_attributes():
        variable = style_env_var(attribute)
        if variable in env:
            try:
                changes[attribute] = validate_style(env[variable].strip())
            except ValueError as exc:
                raise ValueError(f"{variable}: {exc}") from exc

    start = base if base is not None else FormatterConfig()
    return replace(start, **changes)


def force_color_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``LOG_FORCE_COLOR`` asks to treat output as a terminal."""

    env = os.environ if environ is None else environ
    raw = env.get(FORCE_COLOR_ENV_VAR)
    return raw is not None and parse_bool(FORCE_COLOR_ENV_VAR, raw)


def level_from_env(default: str | LogLevel, environ: Mapping[str, str] | None = None) -> LogLevel:
    """Return ``LOG_CONSOLE_LEVEL`` when set, else ``default``, as a :class:`LogLevel`."""

    env = os.environ if environ is None else environ
    raw = env.get(CONSOLE_LEVEL_ENV_VAR)
    if raw:
        return LogLevel.from_name(raw)
    return default if isinstance(default, LogLevel) else LogLevel.from_name(default)


__all__ = [
    "CONSOLE_LEVEL_ENV_VAR",
    "DOTENV_ENV_VAR",
    "FIELDS_COLUMN_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "TIME_FORMAT_ENV_VAR",
    "USE_COLOR_ENV_VAR",
    "dotenv_requested",
    "enable_dotenv",
    "force_color_from_env",
    "formatter_config_from_env",
    "level_from_env",
    "parse_bool",
    "style_env_var",
]
