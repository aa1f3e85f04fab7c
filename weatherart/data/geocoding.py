from __future__ import annotations

import sys
from functools import lru_cache
from typing import Optional

import requests

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


def _normalize_city(name: str | None) -> str | None:
    if name is None:
        return None
    cleaned = " ".join(str(name).split())
    return cleaned or None


@lru_cache(maxsize=256)
def _lookup_remote(city: str, timeout: float = 10) -> Optional[tuple[float, float]]:
    try:
        resp = requests.get(GEOCODING_URL, params={"name": city}, timeout=timeout)
        if resp.status_code != 200:
            print(f"[geocode] API returned status {resp.status_code}", file=sys.stderr, flush=True)
            return None
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        print(f"[geocode] request failed: {e!r}", file=sys.stderr, flush=True)
        return None

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results:
        print(f"[geocode] no results found for city: {city}", file=sys.stderr, flush=True)
        return None

    first = results[0]
    if not isinstance(first, dict):
        return None
    try:
        lat = float(first.get("latitude"))
        lon = float(first.get("longitude"))
    except (TypeError, ValueError):
        return None
    return lat, lon


def resolve_city(name: str | None, timeout: float = 10) -> Optional[tuple[float, float]]:
    city = _normalize_city(name)
    if not city:
        return None
    return _lookup_remote(city, timeout)
