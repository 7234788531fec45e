from .presets import Preset, default_catalog, find_preset

__all__ = ["Preset", "default_catalog", "find_preset"]
