from __future__ import annotations
import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class GradientMode(str, Enum):
    LINEAR = "linear"
    RADIAL = "radial"
    CONIC = "conic"

    @classmethod
    def coerce(cls, value: Union["GradientMode", str, None]) -> "GradientMode":
        """
        Map ``value`` onto a mode, falling back to ``LINEAR``.

        Strings are matched case-insensitively against the mode values.
        Anything unrecognised is logged and replaced by the linear default,
        so rendering stays available.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning("Unknown gradient mode %r, using %s", value, cls.LINEAR.value)
        return cls.LINEAR


GradientModeLike = Union[GradientMode, str]
