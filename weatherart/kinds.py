from __future__ import annotations
from enum import Enum


class Kind(Enum):
    """Canonical weather categories. The value is the display label."""
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    MOSTLY_CLOUDY = "mostly cloudy"
    PARTLY_CLOUDY = "partly cloudy"
    RAINY = "rainy"
    LIGHT_RAIN = "light rain"
    SNOWY = "snowy"
    FOGGY = "foggy"
    LIGHTNING = "lightning"
    HAIL = "hail"

    @property
    def label(self) -> str:
        # Asset store keys depend on these strings; keep them stable.
        return self.value

    def __str__(self) -> str:
        return self.value
