from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from lib_log_columns.domain.events import LogEvent
from lib_log_columns.domain.levels import LogLevel


def test_log_event_requires_timezone_aware_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        LogEvent(timestamp=datetime(2025, 9, 23, 12, 0, 0), level=LogLevel.INFO, message="hello")


def test_log_event_keeps_the_timestamp_zone() -> None:
    zone = timezone(timedelta(hours=2))
    event = LogEvent(timestamp=datetime(2025, 9, 23, 12, 0, tzinfo=zone), level=LogLevel.INFO)
    assert event.timestamp.tzinfo is zone


def test_log_event_accepts_empty_message() -> None:
    event = LogEvent(timestamp=datetime.now(timezone.utc), level=LogLevel.INFO, message="")
    assert event.message == ""
    assert event.fields == ()


def test_log_event_rejects_foreign_levels() -> None:
    with pytest.raises(TypeError, match="LogLevel"):
        LogEvent(timestamp=datetime.now(timezone.utc), level=20, message="x")  # type: ignore[arg-type]


def test_fields_from_mapping_keep_insertion_order() -> None:
    event = LogEvent(
        timestamp=datetime.now(timezone.utc),
        level=LogLevel.INFO,
        fields={"zeta": 1, "alpha": 2, "mid": 3},  # type: ignore[arg-type]
    )
    assert [name for name, _ in event.fields] == ["zeta", "alpha", "mid"]


def test_fields_from_pairs_keep_duplicates() -> None:
    event = LogEvent(
        timestamp=datetime.now(timezone.utc),
        level=LogLevel.INFO,
        fields=[("k", 1), ("k", 2)],  # type: ignore[arg-type]
    )
    assert event.fields == (("k", 1), ("k", 2))


def test_field_names_must_be_strings() -> None:
    with pytest.raises(TypeError, match="field names"):
        LogEvent(timestamp=datetime.now(timezone.utc), level=LogLevel.INFO, fields=[(1, "x")])  # type: ignore[arg-type]


def test_log_event_is_immutable() -> None:
    event = LogEvent(timestamp=datetime.now(timezone.utc), level=LogLevel.INFO, message="a")
    with pytest.raises(AttributeError):
        event.message = "b"  # type: ignore[misc]


def test_create_stamps_an_aware_local_time() -> None:
    event = LogEvent.create(LogLevel.WARN, "hello", {"f1": "v1"})
    assert event.timestamp.tzinfo is not None
    assert event.fields == (("f1", "v1"),)
    assert event.level is LogLevel.WARN


def test_replace_returns_modified_copy() -> None:
    event = LogEvent.create(LogLevel.INFO, "first")
    changed = event.replace(message="second")
    assert changed.message == "second"
    assert event.message == "first"
