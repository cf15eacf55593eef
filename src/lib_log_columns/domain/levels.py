"""Log level abstraction covering the full trace-to-panic severity range.

Purpose
-------
Offer a domain-specific representation of log severities that extends the
stdlib levels with ``TRACE`` and ``PANIC`` while keeping numeric values
compatible with :mod:`logging`.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* ``_ALIASES`` constant mapping stdlib spellings onto enum members.

System Role
-----------
Used by the renderer to pick the message colour and by the logging bridge to
translate :class:`logging.LogRecord` levels.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels ordered from least to most severe."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    PANIC = 60

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    def to_python_level(self) -> int:
        """Return the :mod:`logging` numeric level matching this level."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate any stdlib logging level integer into :class:`LogLevel`.

        Custom numeric levels fall back to the closest level below them so
        ``logging.log(25, ...)`` renders like ``INFO``.

        Examples
        --------
        >>> LogLevel.from_python_level(25)
        <LogLevel.INFO: 20>
        >>> LogLevel.from_python_level(0)
        <LogLevel.TRACE: 5>
        """
        selected = cls.TRACE
        for candidate in cls:
            if candidate.value <= level:
                selected = candidate
        return selected


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}
# Stdlib spellings accepted by :meth:`LogLevel.from_name`.


__all__ = ["LogLevel"]
