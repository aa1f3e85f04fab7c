"""Shared test fixtures."""

import json

import pytest

from weatherart import art
from weatherart.data import geocoding


@pytest.fixture(autouse=True)
def _reset_caches():
    """Clear memoised asset and geocoding lookups between tests."""
    art.load_art.cache_clear()
    geocoding._lookup_remote.cache_clear()
    yield
    art.load_art.cache_clear()
    geocoding._lookup_remote.cache_clear()


@pytest.fixture()
def art_table():
    return {
        "sunny": {"picture": "SUN"},
        "rainy": {"picture": "RAIN"},
        "light rain": {"picture": "DRIZZLE"},
        "partly cloudy": {"picture": "PARTLY"},
        "lightning": {"description": "no picture field"},
    }


@pytest.fixture()
def art_file(tmp_path, art_table):
    """Write the sample table to designs/weather.json under tmp_path."""
    path = tmp_path / "designs" / "weather.json"
    path.parent.mkdir()
    path.write_text(json.dumps(art_table), encoding="utf-8")
    return path


class FakeResponse:
    def __init__(self, payload=None, status_code=200, exc=None):
        self._payload = payload
        self.status_code = status_code
        self._exc = exc

    def json(self):
        if self._exc is not None:
            raise self._exc
        return self._payload

    def raise_for_status(self):
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")
