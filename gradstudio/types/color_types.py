from __future__ import annotations
from typing import List, Sequence, Tuple, Union

UnitRGB = Tuple[float, float, float]
IntRGB = Tuple[int, int, int]
HSLTuple = Tuple[float, float, float]

# "#RRGGBB"; callers may hand in anything, only generated values are canonical
HexColor = str
ColorSequence = List[HexColor]
ColorInput = Union[Sequence[HexColor], Tuple[HexColor, ...]]

HUE_360 = 360


def as_sequence(colors: ColorInput) -> ColorSequence:
    """Return an independent list copy of ``colors``."""
    return [str(c) for c in colors]
