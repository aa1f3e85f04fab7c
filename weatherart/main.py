from __future__ import annotations
import sys

from weatherart.art import load_art
from weatherart.classify import classify
from weatherart.config import Config, parse_args
from weatherart.data.geocoding import resolve_city
from weatherart.nws import Forecast, NWSClient
from weatherart.renderer.terminal import display, pick_backend

SEPARATOR = "-" * 51


def fetch_forecast(cfg: Config) -> Forecast | None:
    coords = resolve_city(cfg.city, timeout=cfg.timeout)
    if coords is None:
        return None
    client = NWSClient(user_agent=cfg.user_agent, timeout=cfg.timeout)
    return client.current_forecast(*coords)


def show(forecast: Forecast, cfg: Config) -> None:
    kind = classify(forecast.description)
    display(
        kind,
        forecast.temperature,
        forecast.unit,
        forecast.description,
        load_art(cfg.assets),
        backend=pick_backend(cfg.color),
    )


def main(argv: list[str] | None = None) -> int:
    cfg = parse_args(argv)

    if cfg.command == "show":
        show(Forecast(cfg.temperature, cfg.unit, cfg.description), cfg)
        return 0

    print(f"Fetching your weather... {cfg.city}", flush=True)
    print(SEPARATOR, flush=True)
    forecast = fetch_forecast(cfg)
    status = 0
    if forecast is None:
        # Upstream failure still renders, as an empty reading
        forecast = Forecast.empty()
        status = 1
    show(forecast, cfg)
    print(SEPARATOR, flush=True)
    return status


if __name__ == "__main__":
    sys.exit(main())
