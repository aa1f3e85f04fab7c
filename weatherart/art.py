from __future__ import annotations
import json
import sys
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

ArtTable = dict[str, dict[str, str]]

STORE_NAME = Path("designs") / "weather.json"


def candidate_paths(extra: str | Path | None = None, argv0: str | None = None) -> list[Path]:
    """
    Places the asset store may live, in the order they are tried:
    an explicit path, the working directory, next to the executable,
    one level above it, then the copy shipped inside the package.
    """
    exe_dir = Path(argv0 if argv0 is not None else sys.argv[0]).parent
    candidates: list[Path] = []
    if extra:
        candidates.append(Path(extra))
    candidates += [
        STORE_NAME,
        Path(".") / STORE_NAME,
        exe_dir / STORE_NAME,
        exe_dir / ".." / STORE_NAME,
        Path(__file__).resolve().parent / STORE_NAME,
    ]
    return candidates


def _read_table(path: Path) -> Optional[ArtTable]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    table: ArtTable = {}
    for label, entry in data.items():
        if not isinstance(entry, dict):
            continue
        table[label] = {k: v for k, v in entry.items() if isinstance(v, str)}
    return table


def resolve_art(paths: Iterable[str | Path]) -> Optional[ArtTable]:
    """First candidate that reads and parses wins; None when all of them fail."""
    for p in paths:
        table = _read_table(Path(p))
        if table is not None:
            return table
    return None


@lru_cache(maxsize=8)
def load_art(extra: str | None = None) -> Optional[ArtTable]:
    table = resolve_art(candidate_paths(extra))
    if table is None:
        print("[art] no weather.json found; using plain output", file=sys.stderr, flush=True)
    return table


def picture_for(table: Optional[ArtTable], label: str) -> Optional[str]:
    if not table:
        return None
    return (table.get(label) or {}).get("picture")
