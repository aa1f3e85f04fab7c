from __future__ import annotations

from weatherart.kinds import Kind
from weatherart.rules import DEFAULT_RULES, RuleSet


# Map forecast text → canonical Kind
def classify(description: str | None, rules: RuleSet = DEFAULT_RULES) -> Kind:
    s = description or ""

    # Order matters (most severe first); first match wins
    if rules.matches("lightning", s):
        return Kind.LIGHTNING
    if rules.matches("hail", s):
        return Kind.HAIL
    if rules.matches("snow", s):
        return Kind.SNOWY
    if rules.matches("rain", s):
        if rules.matches("light_rain", s):
            return Kind.LIGHT_RAIN
        return Kind.RAINY
    if rules.matches("fog", s):
        return Kind.FOGGY
    if rules.matches("sunny", s):
        return Kind.SUNNY
    if rules.matches("cloudy", s):
        if rules.matches("mostly", s):
            return Kind.MOSTLY_CLOUDY
        if rules.matches("partly", s):
            return Kind.PARTLY_CLOUDY
        return Kind.CLOUDY
    # Fallback
    return Kind.CLOUDY
