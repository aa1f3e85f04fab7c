from __future__ import annotations
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


@dataclass(frozen=True)
class Forecast:
    temperature: float
    unit: str
    description: str

    @classmethod
    def empty(cls) -> "Forecast":
        return cls(0.0, "", "")


def _properties(doc: Any) -> Dict[str, Any]:
    props = doc.get("properties") if isinstance(doc, dict) else None
    return props if isinstance(props, dict) else {}


class NWSClient:
    def __init__(self, user_agent: str, timeout: float = 10, cache_ttl: int = 180):
        self.ua = user_agent
        self.timeout = timeout
        self.ttl = cache_ttl
        self._cache: Dict[str, tuple[float, Any]] = {}

    def _get(self, url: str) -> Any:
        now = time.time()
        cached = self._cache.get(url)
        if cached and now - cached[0] < self.ttl:
            return cached[1]
        r = requests.get(
            url,
            headers={
                "User-Agent": self.ua,
                "Accept": "application/geo+json",
            },
            timeout=self.timeout,
        )
        r.raise_for_status()
        data = r.json()
        self._cache[url] = (now, data)
        return data

    def forecast_url(self, lat: float, lon: float) -> Optional[str]:
        point = self._get(f"https://api.weather.gov/points/{lat:.4f},{lon:.4f}")
        url = _properties(point).get("forecast")
        return url if isinstance(url, str) else None

    def nearest_period(self, lat: float, lon: float) -> Optional[Dict[str, Any]]:
        try:
            forecast_url = self.forecast_url(lat, lon)
            if not forecast_url:
                print("[nws] no forecast URL for these coordinates", file=sys.stderr, flush=True)
                return None
            forecast = self._get(forecast_url)
        except (requests.RequestException, ValueError) as e:
            print(f"[nws] forecast request failed: {e!r}", file=sys.stderr, flush=True)
            return None
        periods = _properties(forecast).get("periods")
        if not isinstance(periods, list) or not periods:
            return None
        first = periods[0]
        return first if isinstance(first, dict) else None

    def current_forecast(self, lat: float, lon: float) -> Optional[Forecast]:
        """Temperature, unit and short description of the nearest period."""
        p = self.nearest_period(lat, lon)
        if not p:
            return None
        try:
            temperature = float(p.get("temperature"))
        except (TypeError, ValueError):
            return None
        unit = p.get("temperatureUnit")
        description = p.get("shortForecast")
        return Forecast(
            temperature=temperature,
            unit=unit if isinstance(unit, str) else "",
            description=description if isinstance(description, str) else "",
        )
