from __future__ import annotations

import pytest

from lib_log_columns.adapters.colorizer import RichColorizer, validate_style
from lib_log_columns.application.ports.hooks import ColorizerPort


def test_colorizer_satisfies_port() -> None:
    assert isinstance(RichColorizer(False), ColorizerPort)


def test_disabled_colorizer_returns_plain_text() -> None:
    assert RichColorizer(False).colorize("msg", "bold red") == "msg"


def test_enabled_colorizer_wraps_text_in_escape_sequences() -> None:
    assert RichColorizer(True).colorize("msg", "bold red") == "\x1b[1;31mmsg\x1b[0m"


def test_eight_bit_colours_use_extended_codes() -> None:
    assert RichColorizer(True).colorize("msg", "color(247)") == "\x1b[38;5;247mmsg\x1b[0m"


def test_standard_colour_system_downgrades_extended_colours() -> None:
    rendered = RichColorizer(True, color_system="standard").colorize("msg", "color(247)")
    assert rendered.startswith("\x1b[")
    assert "38;5" not in rendered
    assert rendered.endswith("msg\x1b[0m")


def test_empty_style_and_empty_text_stay_plain() -> None:
    colorizer = RichColorizer(True)
    assert colorizer.colorize("msg", "") == "msg"
    assert colorizer.colorize("", "red") == ""


def test_non_string_values_are_converted() -> None:
    assert RichColorizer(False).colorize(42, "red") == "42"


def test_validate_style_accepts_rich_styles() -> None:
    assert validate_style("bold bright_yellow") == "bold bright_yellow"
    assert validate_style("") == ""


def test_validate_style_rejects_garbage() -> None:
    with pytest.raises(ValueError, match="Invalid style"):
        validate_style("bold nonsense-colour")


def test_colour_system_is_honoured_after_another_system_rendered_the_style() -> None:
    extended = RichColorizer(True, color_system="256").colorize("msg", "color(242)")
    standard = RichColorizer(True, color_system="standard").colorize("msg", "color(242)")

    assert extended == "\x1b[38;5;242mmsg\x1b[0m"
    assert "38;5" not in standard
    assert standard.endswith("msg\x1b[0m")


def test_truecolor_and_256_render_the_same_style_differently() -> None:
    truecolor = RichColorizer(True, color_system="truecolor").colorize("msg", "bold #ff8700")
    eight_bit = RichColorizer(True, color_system="256").colorize("msg", "bold #ff8700")

    assert "38;2;255;135;0" in truecolor
    assert "38;5;208" in eight_bit
    assert "38;2" not in eight_bit
    assert eight_bit.startswith("\x1b[1;")
