"""Curated gradient presets offered as one-click starting points."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..types.color_types import HexColor


@dataclass(frozen=True)
class Preset:
    name: str
    colors: Tuple[HexColor, ...]

    def __post_init__(self) -> None:
        # lists handed in by callers are frozen into a tuple
        object.__setattr__(self, "colors", tuple(self.colors))


_CATALOG_DATA: Tuple[Tuple[str, Tuple[HexColor, ...]], ...] = (
    ("Sunset Orange", ("#FF6B6B", "#FFA07A", "#FFD700")),
    ("Ocean Blue", ("#667EEA", "#764BA2", "#F093FB")),
    ("Forest Green", ("#56AB2F", "#A8E063")),
    ("Purple Dream", ("#C471F5", "#FA71CD")),
    ("Pink Bubble", ("#FBC2EB", "#A6C1EE")),
    ("Flame Red", ("#F83600", "#F9D423")),
    ("Mint Green", ("#00F260", "#0575E6")),
    ("Starry Night", ("#0F2027", "#203A43", "#2C5364")),
    ("Rainbow", ("#FF0080", "#FF8C00", "#FFD700", "#00FF00", "#0000FF", "#8B00FF")),
    ("Cherry Blossom", ("#FFECD2", "#FCB69F")),
)


def default_catalog() -> List[Preset]:
    """Build the preset catalog. Each call returns new objects."""
    return [Preset(name, colors) for name, colors in _CATALOG_DATA]


def find_preset(name: str, catalog: Optional[Iterable[Preset]] = None) -> Preset:
    """
    Look a preset up by name, ignoring case and surrounding whitespace.

    Raises:
        KeyError: if no preset has that name.
    """
    wanted = name.strip().lower()
    for preset in catalog if catalog is not None else default_catalog():
        if preset.name.lower() == wanted:
            return preset
    raise KeyError(f"Unknown preset: {name!r}")


__all__ = ["Preset", "default_catalog", "find_preset"]
