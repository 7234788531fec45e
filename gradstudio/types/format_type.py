# No dependencies
from enum import Enum
import numpy as np
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float64,
    FormatType.PERCENTAGE: np.float64,
}


def to_format(unit: np.ndarray, fmt: FormatType) -> np.ndarray:
    """Scale unit-range channels ``[0, 1]`` into ``fmt``."""
    unit = np.clip(np.asarray(unit, dtype=float), 0.0, 1.0)
    scaled = unit * max_non_hue[fmt]
    if fmt == FormatType.INT:
        return np.round(scaled).astype(default_format_dtypes[fmt])
    return scaled.astype(default_format_dtypes[fmt])


def from_format(value: np.ndarray, fmt: FormatType) -> np.ndarray:
    """Inverse of :func:`to_format`."""
    return np.asarray(value, dtype=float) / max_non_hue[fmt]
