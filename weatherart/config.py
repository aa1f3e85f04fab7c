from __future__ import annotations
import argparse
from dataclasses import dataclass


@dataclass
class Config:
    command: str

    # city
    city: str | None = None

    # show
    description: str = ""
    temperature: float = 0.0
    unit: str = "F"

    # Output
    color: str = "auto"
    assets: str | None = None

    # Network
    user_agent: str = "weatherart/1.0 (+contact)"
    timeout: float = 10.0


def _add_common(p: argparse.ArgumentParser) -> None:
    out = p.add_argument_group("Output")
    out.add_argument("--color", choices=("auto", "always", "never"), default="auto",
                     help="ANSI colours: auto (TTY only, honours NO_COLOR), always or never")
    out.add_argument("--assets", type=str, default=None,
                     help="Path to a weather.json tried before the built-in locations")

    net = p.add_argument_group("Network")
    net.add_argument("--user-agent", type=str, default="weatherart/1.0 (+contact)")
    net.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")


def parse_args(argv: list[str] | None = None) -> Config:
    p = argparse.ArgumentParser("weatherart", description="Today's weather as terminal art.")
    sub = p.add_subparsers(dest="command", required=True)

    city = sub.add_parser("city", help="Type the city name to get the weather information for that day")
    city.add_argument("-n", "--name", dest="city", type=str, required=True,
                      help="Name of the city to get weather information")
    _add_common(city)

    show = sub.add_parser("show", help="Render a forecast description without fetching anything")
    show.add_argument("-d", "--description", type=str, required=True)
    show.add_argument("-t", "--temperature", type=float, required=True)
    show.add_argument("-u", "--unit", choices=("F", "C"), default="F")
    _add_common(show)

    args = p.parse_args(argv)

    return Config(
        command=args.command,
        city=getattr(args, "city", None),
        description=getattr(args, "description", ""),
        temperature=getattr(args, "temperature", 0.0),
        unit=getattr(args, "unit", "F"),
        color=args.color,
        assets=args.assets,
        user_agent=args.user_agent,
        timeout=args.timeout,
    )
