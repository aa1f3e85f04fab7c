from __future__ import annotations
import re
from dataclasses import dataclass, fields
from re import Pattern
from typing import Iterable, Tuple

Patterns = Tuple[Pattern[str], ...]


def _compile(*alternations: str) -> Patterns:
    # Every matcher binds to whole words only: "rain" never hits "raincoat".
    return tuple(re.compile(rf"\b(?:{alt})\b", re.IGNORECASE) for alt in alternations)


def matches_any(text: str, patterns: Iterable[Pattern[str]]) -> bool:
    return any(p.search(text or "") for p in patterns)


@dataclass(frozen=True)
class RuleSet:
    """Phrase categories used by the classifier.

    Patterns inside a category are interchangeable; only whether one of them
    matched is significant. The order categories are consulted in lives in
    ``weatherart.classify``.

    ``wind`` and ``wintry`` are carried as data only. The cascade does not
    look at them.
    """
    lightning: Patterns
    hail: Patterns
    snow: Patterns
    rain: Patterns
    wintry: Patterns
    fog: Patterns
    wind: Patterns
    sunny: Patterns
    cloudy: Patterns

    # second-level markers
    light_rain: Patterns
    mostly: Patterns
    partly: Patterns

    def matches(self, category: str, text: str) -> bool:
        return matches_any(text, getattr(self, category))

    @classmethod
    def categories(cls) -> list[str]:
        return [f.name for f in fields(cls)]


def build_rules() -> RuleSet:
    return RuleSet(
        # Thunder / lightning
        lightning=_compile(
            r"thunderstorms?|thunder",
            r"t[\s-]?storms?",
            r"tsra|vcts",
            r"squall",
            r"lightning",
        ),
        hail=_compile(
            r"hail",
            r"small\s+hail",
            r"graupel",
        ),
        snow=_compile(
            r"snow|snows|snowfall",
            r"flurries|snow\s*flurries",
            r"snow\s*showers?",
            r"blizzard",
            r"blowing\s+snow|drifting\s+snow",
            r"snow\s*squalls?",
            r"lake[-\s]?effect\s+snow",
        ),
        # Rain-ish, drizzle and showers included
        rain=_compile(
            r"rain|rains|rainfall",
            r"showers?|rain\s*showers?",
            r"drizzle|sprinkles?",
            r"downpour|pouring",
            r"precip(?:itation)?",
            r"chance\s+rain|likely\s+rain|periods?\s+of\s+rain",
            r"scattered\s+showers?|isolated\s+showers?",
            r"slight\s+chance\s+showers?",
        ),
        # Wintry mix / ice types
        wintry=_compile(
            r"wintry\s+mix",
            r"rain\s*/\s*snow|snow\s*/\s*rain",
            r"mix(?:ed)?\s+precip(?:itation)?",
            r"sleet",
            r"ice\s+pellets?",
            r"freezing\s+rain",
            r"freezing\s+drizzle",
            r"glaze|icing",
        ),
        # Fog / low visibility
        fog=_compile(
            r"fog|foggy",
            r"patchy\s+fog",
            r"dense\s+fog",
            r"mist|misty",
            r"low\s+visibility|reduced\s+visibility",
        ),
        wind=_compile(
            r"windy",
            r"breezy",
            r"gusty|gusts?",
            r"blustery",
            r"strong\s+winds?",
            r"high\s+winds?",
        ),
        # Sunny / clear-ish
        sunny=_compile(
            r"sunny",
            r"clear",
            r"fair",
            r"mostly\s+sunny",
            r"sunshine",
            r"becoming\s+sunny",
            r"sunny\s+and\s+warm",
        ),
        # Cloudy, partly/mostly included
        cloudy=_compile(
            r"cloudy",
            r"mostly\s+cloudy",
            r"partly\s+cloudy",
            r"increasing\s+clouds?",
            r"decreasing\s+clouds?",
            r"overcast",
            r"broken\s+clouds?",
            r"scattered\s+clouds?",
        ),
        light_rain=_compile(r"light|slight|drizzle|sprinkle"),
        mostly=_compile(r"mostly"),
        partly=_compile(r"partly"),
    )


DEFAULT_RULES = build_rules()
