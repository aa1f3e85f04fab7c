from __future__ import annotations
import os
import sys
from typing import Optional, Protocol, TextIO

from weatherart.art import ArtTable, picture_for
from weatherart.colors import Color, kind_color, temperature_color
from weatherart.kinds import Kind

# ---------- colour back-ends ----------
_ANSI = {
    Color.RED: "\x1b[31m",
    Color.GREEN: "\x1b[32m",
    Color.YELLOW: "\x1b[33m",
    Color.BLUE: "\x1b[34m",
    Color.MAGENTA: "\x1b[35m",
    Color.CYAN: "\x1b[36m",
    Color.GRAY: "\x1b[90m",
}
ANSI_RESET = "\x1b[0m"


class Backend(Protocol):
    def wrap(self, text: str, color: Optional[Color]) -> str: ...


class AnsiBackend:
    """Wraps text in an escape pair; every start code gets its reset."""
    def wrap(self, text: str, color: Optional[Color]) -> str:
        if color is None:
            return text
        return f"{_ANSI[color]}{text}{ANSI_RESET}"


class PlainBackend:
    """For pipes, files and NO_COLOR terminals."""
    def wrap(self, text: str, color: Optional[Color]) -> str:
        return text


def pick_backend(mode: str = "auto", stream: TextIO | None = None) -> Backend:
    if mode == "always":
        return AnsiBackend()
    if mode == "never":
        return PlainBackend()
    stream = stream if stream is not None else sys.stdout
    if os.environ.get("NO_COLOR"):
        return PlainBackend()
    try:
        tty = stream.isatty()
    except (AttributeError, ValueError):
        tty = False
    return AnsiBackend() if tty else PlainBackend()


# ---------- text ----------
def format_temperature(value: float, unit: str) -> str:
    return f"{value:.0f} {unit}"


def render(kind: Kind, temperature: float, unit: str, description: str,
           art: Optional[ArtTable], backend: Backend | None = None) -> str:
    """
    Compose the forecast block. Without art for this kind the output is
    plain text with no escape sequences, whatever the back-end.
    """
    backend = backend or AnsiBackend()
    description = description or ""
    temp_text = format_temperature(temperature, unit or "")

    picture = picture_for(art, kind.label)
    if picture is None:
        return f"Weather: {description}\nTemperature: {temp_text}\n"

    temp_color = temperature_color(temperature, unit)
    lines = [
        backend.wrap(picture, kind_color(kind.label)),
        "",
        backend.wrap(description, temp_color),
        f"Temperature: {backend.wrap(temp_text, temp_color)}",
    ]
    return "\n".join(lines) + "\n"


def display(kind: Kind, temperature: float, unit: str, description: str,
            art: Optional[ArtTable], backend: Backend | None = None,
            out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(render(kind, temperature, unit, description, art, backend=backend))
    out.flush()
