from __future__ import annotations
from enum import Enum
from typing import Optional


class Color(Enum):
    """Abstract display colours; back-ends decide how to draw them."""
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"


class TemperatureUnit(Enum):
    FAHRENHEIT = "F"
    CELSIUS = "C"

    @classmethod
    def parse(cls, tag: str | None) -> Optional["TemperatureUnit"]:
        try:
            return cls(tag)
        except ValueError:
            return None


_KIND_COLORS: dict[str, Color] = {
    "sunny": Color.YELLOW,
    "cloudy": Color.GRAY,
    "mostly cloudy": Color.GRAY,
    "partly cloudy": Color.GRAY,
    "rainy": Color.BLUE,
    "light rain": Color.BLUE,
    "snowy": Color.CYAN,
    "foggy": Color.GRAY,
    "lightning": Color.MAGENTA,
    "hail": Color.MAGENTA,
}

# (upper bound inclusive, colour); anything above the last bound is hot
_BANDS: dict[TemperatureUnit, tuple[tuple[float, Color], ...]] = {
    TemperatureUnit.FAHRENHEIT: (
        (32, Color.BLUE),
        (60, Color.CYAN),
        (80, Color.GREEN),
        (90, Color.YELLOW),
    ),
    TemperatureUnit.CELSIUS: (
        (0, Color.BLUE),
        (15, Color.CYAN),
        (27, Color.GREEN),
        (32, Color.YELLOW),
    ),
}


def kind_color(label: str | None) -> Color:
    return _KIND_COLORS.get(label or "", Color.GRAY)


def temperature_color(value: float, unit: str | TemperatureUnit | None) -> Optional[Color]:
    """Colour band for a temperature, or None when the unit is not F or C."""
    if not isinstance(unit, TemperatureUnit):
        unit = TemperatureUnit.parse(unit)
    if unit is None:
        return None
    for upper, color in _BANDS[unit]:
        if value <= upper:
            return color
    return Color.RED
