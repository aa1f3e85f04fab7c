"""Tests for terminal rendering."""

import io

import pytest

from weatherart.kinds import Kind
from weatherart.renderer import terminal
from weatherart.renderer.terminal import (
    ANSI_RESET,
    AnsiBackend,
    PlainBackend,
    display,
    pick_backend,
    render,
)

BLUE = "\x1b[34m"
YELLOW = "\x1b[33m"
GREEN = "\x1b[32m"


class TestRenderWithArt:
    def test_layout_and_colours(self, art_table):
        out = render(Kind.SUNNY, 72.4, "F", "Sunny", art_table, backend=AnsiBackend())
        assert out == (
            f"{YELLOW}SUN{ANSI_RESET}\n"
            "\n"
            f"{GREEN}Sunny{ANSI_RESET}\n"
            f"Temperature: {GREEN}72 F{ANSI_RESET}\n"
        )

    def test_every_start_code_is_reset(self, art_table):
        out = render(Kind.LIGHT_RAIN, 10, "C", "Light Rain", art_table, backend=AnsiBackend())
        assert out.count("\x1b[") - out.count(ANSI_RESET) == out.count(ANSI_RESET)

    def test_unknown_unit_leaves_temperature_uncoloured(self, art_table):
        out = render(Kind.RAINY, 280, "K", "Rain", art_table, backend=AnsiBackend())
        assert f"{BLUE}RAIN{ANSI_RESET}" in out
        assert out.endswith("\nRain\nTemperature: 280 K\n")

    def test_plain_backend_has_no_escapes(self, art_table):
        out = render(Kind.SUNNY, 72, "F", "Sunny", art_table, backend=PlainBackend())
        assert "\x1b" not in out
        assert out.startswith("SUN\n")

    def test_idempotent(self, art_table):
        first = render(Kind.PARTLY_CLOUDY, 55, "F", "Partly Cloudy", art_table)
        second = render(Kind.PARTLY_CLOUDY, 55, "F", "Partly Cloudy", art_table)
        assert first == second


class TestRenderDegraded:
    @pytest.mark.parametrize("kind", list(Kind))
    def test_missing_store(self, kind):
        out = render(kind, 64.6, "F", "Something", None, backend=AnsiBackend())
        assert out == "Weather: Something\nTemperature: 65 F\n"
        assert "\x1b" not in out

    def test_missing_entry(self, art_table):
        out = render(Kind.HAIL, 30, "F", "Hail", art_table, backend=AnsiBackend())
        assert out == "Weather: Hail\nTemperature: 30 F\n"

    def test_entry_without_picture(self, art_table):
        out = render(Kind.LIGHTNING, 30, "F", "Thunder", art_table, backend=AnsiBackend())
        assert "\x1b" not in out

    def test_empty_reading(self):
        assert render(Kind.CLOUDY, 0, "", "", None) == "Weather: \nTemperature: 0 \n"

    def test_rounds_half_to_even(self):
        assert "Temperature: 72 F" in render(Kind.SUNNY, 72.5, "F", "x", None)
        assert "Temperature: 74 F" in render(Kind.SUNNY, 73.5, "F", "x", None)


class TestDisplay:
    def test_writes_to_stream(self, art_table):
        buf = io.StringIO()
        display(Kind.SUNNY, 70, "F", "Sunny", art_table, backend=PlainBackend(), out=buf)
        assert buf.getvalue() == "SUN\n\nSunny\nTemperature: 70 F\n"

    def test_defaults_to_stdout(self, capsys):
        display(Kind.CLOUDY, 50, "F", "Cloudy", None)
        assert capsys.readouterr().out == "Weather: Cloudy\nTemperature: 50 F\n"


class _Stream(io.StringIO):
    def __init__(self, tty):
        super().__init__()
        self._tty = tty

    def isatty(self):
        return self._tty


class TestPickBackend:
    def test_forced(self):
        assert isinstance(pick_backend("always", _Stream(False)), AnsiBackend)
        assert isinstance(pick_backend("never", _Stream(True)), PlainBackend)

    def test_auto_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert isinstance(pick_backend("auto", _Stream(True)), AnsiBackend)
        assert isinstance(pick_backend("auto", _Stream(False)), PlainBackend)

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert isinstance(pick_backend("auto", _Stream(True)), PlainBackend)

    def test_auto_uses_stdout(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr(terminal.sys, "stdout", _Stream(True))
        assert isinstance(pick_backend(), AnsiBackend)


class _BracketBackend:
    def wrap(self, text, color):
        return f"[{color.value}]{text}[/]" if color else text


class TestCustomBackend:
    def test_render_uses_given_backend(self, art_table):
        out = render(Kind.SUNNY, 95, "F", "Hot", art_table, backend=_BracketBackend())
        assert out == "[yellow]SUN[/]\n\n[red]Hot[/]\nTemperature: [red]95 F[/]\n"
