"""Domain event describing a structured log message.

Purpose
-------
Provide an immutable representation of one log occurrence as handed to the
renderer: timestamp, severity, message and ordered fields.

Contents
--------
* :class:`LogEvent` dataclass with a ``create`` convenience constructor.
* Helpers ``_ensure_aware`` and ``_normalise_fields`` used during validation.

System Role
-----------
Sits in the domain layer so the renderer, the logging bridge and the CLI all
exchange the same pure data object.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Union

from .levels import LogLevel

Field = tuple[str, Any]
FieldsInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts


def _normalise_fields(fields: FieldsInput) -> tuple[Field, ...]:
    """Return ``fields`` as a tuple of ``(name, value)`` pairs in caller order."""
    if fields is None:
        return ()
    items = fields.items() if isinstance(fields, Mapping) else fields
    normalised: list[Field] = []
    for item in items:
        name, value = item
        if not isinstance(name, str):
            raise TypeError(f"field names must be strings, got {type(name).__name__}")
        normalised.append((name, value))
    return tuple(normalised)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event consumed by the renderer.

    Attributes
    ----------
    timestamp:
        Time of the event; must be timezone-aware and is rendered in its own
        zone.
    level:
        :class:`LogLevel` severity associated with the event.
    message:
        Message text; may be empty (command hooks rely on that).
    fields:
        Ordered ``(name, value)`` pairs. Names are not deduplicated and the
        order is never changed.
    """

    timestamp: datetime
    level: LogLevel
    message: str = ""
    fields: tuple[Field, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _ensure_aware(self.timestamp)
        if not isinstance(self.level, LogLevel):
            raise TypeError(f"level must be a LogLevel, got {type(self.level).__name__}")
        object.__setattr__(self, "fields", _normalise_fields(self.fields))

    @classmethod
    def create(
        cls,
        level: LogLevel,
        message: str = "",
        fields: FieldsInput = None,
        *,
        timestamp: datetime | None = None,
    ) -> "LogEvent":
        """Build an event stamped with the current local time unless given.

        Examples
        --------
        >>> event = LogEvent.create(LogLevel.INFO, "hello", {"f1": "v1"})
        >>> event.fields
        (('f1', 'v1'),)
        """

        stamp = timestamp if timestamp is not None else datetime.now().astimezone()
        return cls(timestamp=stamp, level=level, message=message, fields=fields)  # type: ignore[arg-type]

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["Field", "FieldsInput", "LogEvent"]
