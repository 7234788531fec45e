"""
Editing Session
===============

Drives one :class:`GradientEngine` on behalf of a host application.

The host and the gradient store are explicit collaborators. Both are
optional: without a host, messages go nowhere; without a store, only
:meth:`GradientSession.save` and :meth:`GradientSession.saved` are
unavailable.
"""
from __future__ import annotations
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, Union

from .config import GradientConfig
from .conversions.hex import normalize_hex
from .gradients.engine import GradientEngine
from .gradients.renderers import UnsupportedFormat, VectorMarkup, css_declaration
from .samples.presets import Preset, default_catalog, find_preset
from .types.color_types import ColorSequence, HexColor, as_sequence
from .types.gradient_mode import GradientModeLike

logger = logging.getLogger(__name__)

GradientRecord = Dict[str, Any]

APP_TITLE = "Gradient Studio"


# ------------------ Collaborators ------------------

class HostChannel(Protocol):
    def info(self, message: str, **fields: Any) -> None: ...
    def notify(self, message: str, title: str = APP_TITLE) -> None: ...


class NullHost:
    """Host stand-in that drops every message."""

    def info(self, message: str, **fields: Any) -> None:
        pass

    def notify(self, message: str, title: str = APP_TITLE) -> None:
        pass


class LoggingHost:
    """Routes host messages to a :mod:`logging` logger."""

    def __init__(self, name: str = "gradstudio.host") -> None:
        self._logger = logging.getLogger(name)

    def info(self, message: str, **fields: Any) -> None:
        if fields:
            self._logger.info("%s %s", message, fields)
        else:
            self._logger.info("%s", message)

    def notify(self, message: str, title: str = APP_TITLE) -> None:
        self._logger.info("[%s] %s", title, message)


class GradientStore(Protocol):
    def save(self, name: str, colors: Sequence[HexColor]) -> GradientRecord: ...
    def load(self) -> List[GradientRecord]: ...


def make_record(name: str, colors: Sequence[HexColor]) -> GradientRecord:
    return {"name": name, "colors": as_sequence(colors), "timestamp": int(time.time() * 1000)}


class MemoryGradientStore:
    def __init__(self) -> None:
        self._records: List[GradientRecord] = []

    def save(self, name: str, colors: Sequence[HexColor]) -> GradientRecord:
        record = make_record(name, colors)
        self._records.append(record)
        return dict(record)

    def load(self) -> List[GradientRecord]:
        return [dict(r) for r in self._records]


class JsonFileGradientStore:
    """
    Saved gradients as one JSON array in a file.

    Records are appended, never deduplicated. A file that is not a UTF-8
    JSON array is moved aside to ``<name>.bak`` and treated as empty; if it
    cannot be moved, :meth:`save` raises instead of overwriting it. Writes go
    through ``<name>.tmp`` and replace the file in one step.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read(self) -> Optional[List[GradientRecord]]:
        """Stored records; ``None`` when an unreadable file could not be moved aside."""
        if not self.path.exists():
            return []
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError
            logger.warning("invalid gradient store %s: %s", self.path, exc)
            return [] if self._quarantine() else None
        if not isinstance(data, list):
            logger.warning("gradient store %s is not a JSON array", self.path)
            return [] if self._quarantine() else None
        return data

    def _quarantine(self) -> bool:
        backup = self.path.with_name(self.path.name + ".bak")
        try:
            self.path.replace(backup)
        except OSError as exc:
            logger.warning("cannot move %s aside: %s", self.path, exc)
            return False
        return True

    def _write(self, records: List[GradientRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(records, fh, ensure_ascii=False, indent=2)
        tmp.replace(self.path)

    def save(self, name: str, colors: Sequence[HexColor]) -> GradientRecord:
        records = self._read()
        if records is None:
            raise OSError(f"refusing to overwrite unreadable gradient store {self.path}")
        record = make_record(name, colors)
        records.append(record)
        self._write(records)
        return record

    def load(self) -> List[GradientRecord]:
        records = self._read()
        return [] if records is None else records


# ------------------ Session ------------------

@dataclass(frozen=True)
class ExportBundle:
    css: str
    svg: VectorMarkup

    @property
    def svg_supported(self) -> bool:
        return not isinstance(self.svg, UnsupportedFormat)


class GradientSession:
    def __init__(
        self,
        engine: Optional[GradientEngine] = None,
        host: Optional[HostChannel] = None,
        store: Optional[GradientStore] = None,
        config: Optional[GradientConfig] = None,
        catalog: Optional[List[Preset]] = None,
    ) -> None:
        self.config = config or (engine.config if engine is not None else GradientConfig())
        self.engine = engine or GradientEngine(config=self.config)
        self.host: HostChannel = host or NullHost()
        self.store = store
        self.catalog = catalog if catalog is not None else default_catalog()

    def on_enter(self, params: Any = None) -> None:
        """Lifecycle hook run when the host activates the tool."""
        logger.info("gradient studio activated")
        self.host.info("gradient studio loaded", params=params)

    @property
    def colors(self) -> ColorSequence:
        return self.engine.get_colors()

    def set_count(self, count: int) -> int:
        """Regenerate a harmonious palette with ``count`` clamped to the config bounds."""
        count = self.config.clamp_count(count)
        self.engine.generate_harmonious(count)
        return count

    def shuffle(self) -> None:
        self.engine.generate_harmonious(self.config.clamp_count(len(self.engine)))
        self.host.info("generated random gradient")

    def edit_color(self, index: int, color: str) -> None:
        """
        Replace one color after checking it is a hex color.

        Raises:
            ValueError: if ``color`` is not a recognised hex color.
        """
        self.engine.update_color(index, normalize_hex(color))

    def select_mode(self, mode: GradientModeLike) -> None:
        self.engine.set_mode(mode)

    def apply_preset(self, preset: Union[Preset, str]) -> Preset:
        if isinstance(preset, str):
            preset = find_preset(preset, self.catalog)
        self.engine.apply_preset(preset)
        self.host.info(f"applied preset: {preset.name}")
        return preset

    def export(self) -> ExportBundle:
        bundle = ExportBundle(
            css=css_declaration(self.engine.render_style_expression()),
            svg=self.engine.render_vector_markup(),
        )
        if not bundle.svg_supported:
            logger.warning("%s", bundle.svg)
        return bundle

    def _require_store(self) -> GradientStore:
        if self.store is None:
            raise RuntimeError("no gradient store configured")
        return self.store

    def save(self, name: str) -> GradientRecord:
        record = self._require_store().save(name, self.engine.get_colors())
        self.host.notify(f"saved gradient {name!r}")
        return record

    def saved(self) -> List[GradientRecord]:
        return self._require_store().load()

    def gallery(self) -> List[Tuple[str, str]]:
        """``(name, css)`` preview per preset, each from its own engine."""
        previews = []
        for preset in self.catalog:
            preview = GradientEngine(0, config=self.config)
            preview.apply_preset(preset)
            previews.append((preset.name, preview.render_style_expression()))
        return previews
