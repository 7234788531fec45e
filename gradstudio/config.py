from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

ENV_STORE = "GRADSTUDIO_STORE"
ENV_LOG = "GRADSTUDIO_LOG"
ENV_COUNT = "GRADSTUDIO_COUNT"


def default_store_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(base) / "gradstudio" / "gradients.json"


@dataclass(frozen=True)
class GradientConfig:
    initial_count: int = 3
    min_count: int = 2
    max_count: int = 10
    saturation_range: Tuple[float, float] = (0.6, 0.9)
    lightness_range: Tuple[float, float] = (0.5, 0.7)
    store_path: Path = field(default_factory=default_store_path)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 < self.min_count <= self.max_count:
            raise ValueError("expected 0 < min_count <= max_count")
        for label, (lo, hi) in (("saturation_range", self.saturation_range),
                                ("lightness_range", self.lightness_range)):
            if not 0.0 <= lo <= hi <= 1.0:
                raise ValueError(f"{label} must satisfy 0 <= low <= high <= 1")

    def clamp_count(self, count: int) -> int:
        """Clamp a UI color count into ``[min_count, max_count]``."""
        return max(self.min_count, min(int(count), self.max_count))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GradientConfig":
        """Defaults overridden by ``GRADSTUDIO_*`` environment variables."""
        env = os.environ if environ is None else environ
        cfg = cls()
        if env.get(ENV_STORE):
            cfg = replace(cfg, store_path=Path(env[ENV_STORE]).expanduser())
        if env.get(ENV_LOG):
            cfg = replace(cfg, log_level=env[ENV_LOG].upper())
        if env.get(ENV_COUNT):
            try:
                cfg = replace(cfg, initial_count=cfg.clamp_count(int(env[ENV_COUNT])))
            except ValueError:
                logger.warning("invalid %s=%r, keeping %d", ENV_COUNT, env[ENV_COUNT], cfg.initial_count)
        return cfg
