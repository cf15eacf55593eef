from __future__ import annotations

import io

import pytest

from lib_log_columns.adapters.console.stream_console import StreamConsoleAdapter, is_interactive
from lib_log_columns.application.ports.console import ConsolePort


class _FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class _FailingStream(io.StringIO):
    def write(self, text: str) -> int:
        raise OSError(5, "Input/output error")


def test_adapter_satisfies_port() -> None:
    assert isinstance(StreamConsoleAdapter(io.StringIO()), ConsolePort)


def test_is_interactive_follows_isatty() -> None:
    assert is_interactive(_FakeTerminal()) is True
    assert is_interactive(io.StringIO()) is False
    assert StreamConsoleAdapter(_FakeTerminal()).is_interactive() is True
    assert StreamConsoleAdapter(io.StringIO()).is_interactive() is False


def test_force_terminal_marks_any_stream_interactive() -> None:
    assert StreamConsoleAdapter(io.StringIO(), force_terminal=True).is_interactive() is True


def test_force_color_environment_is_honoured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert StreamConsoleAdapter(io.StringIO()).is_interactive() is True


def test_swapped_stream_is_probed_again() -> None:
    adapter = StreamConsoleAdapter(io.StringIO())
    adapter.stream = _FakeTerminal()
    assert adapter.is_interactive() is True


def test_closed_streams_are_not_interactive() -> None:
    stream = io.StringIO()
    stream.close()
    assert is_interactive(stream) is False


def test_text_streams_receive_decoded_line() -> None:
    stream = io.StringIO()
    StreamConsoleAdapter(stream).write("héllo\n".encode("utf-8"))
    assert stream.getvalue() == "héllo\n"


def test_binary_streams_receive_bytes() -> None:
    stream = io.BytesIO()
    StreamConsoleAdapter(stream).write(b"line\n")
    assert stream.getvalue() == b"line\n"


def test_default_stream_is_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StreamConsoleAdapter().write(b"to stderr\n")
    captured = capsys.readouterr()
    assert captured.err == "to stderr\n"
    assert captured.out == ""


def test_write_errors_propagate() -> None:
    with pytest.raises(OSError, match="Input/output error"):
        StreamConsoleAdapter(_FailingStream()).write(b"x\n")


def test_stream_can_be_replaced() -> None:
    first, second = io.StringIO(), io.StringIO()
    adapter = StreamConsoleAdapter(first)
    adapter.stream = second
    adapter.write(b"moved\n")
    assert first.getvalue() == ""
    assert second.getvalue() == "moved\n"
