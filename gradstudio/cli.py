"""Command line interface for gradstudio."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import GradientConfig
from .conversions.hex import normalize_hex
from .gradients.engine import GradientEngine
from .gradients.raster import save_png
from .gradients.renderers import UnsupportedFormat
from .log_setup import setup_logging
from .samples.presets import Preset, default_catalog, find_preset
from .session import GradientSession, JsonFileGradientStore
from .types.gradient_mode import GradientMode


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--count", type=int, default=None, help="number of colors to generate")
    parser.add_argument("--mode", choices=[m.value for m in GradientMode], default=GradientMode.LINEAR.value)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", help="start from a named preset")
    source.add_argument("--colors", nargs="+", metavar="HEX", help="explicit hex colors")
    source.add_argument("--random", action="store_true", help="unrelated random colors instead of a harmonious palette")


def _build_engine(args: argparse.Namespace, config: GradientConfig) -> GradientEngine:
    engine = GradientEngine(0, mode=args.mode, rng=args.seed, config=config)
    if args.preset:
        engine.apply_preset(find_preset(args.preset))
    elif args.colors:
        engine.apply_preset(Preset("custom", tuple(normalize_hex(c) for c in args.colors)))
    else:
        count = config.initial_count if args.count is None else args.count
        if args.random:
            engine.generate_random(count)
        else:
            engine.generate_harmonious(count)
    return engine


def _store(args: argparse.Namespace, config: GradientConfig) -> JsonFileGradientStore:
    return JsonFileGradientStore(args.store or config.store_path)


def cmd_css(args: argparse.Namespace, config: GradientConfig) -> int:
    print(_build_engine(args, config).render_style_expression())
    return 0


def cmd_svg(args: argparse.Namespace, config: GradientConfig) -> int:
    markup = _build_engine(args, config).render_vector_markup()
    if isinstance(markup, UnsupportedFormat):
        print(f"error: {markup}", file=sys.stderr)
        return 1
    print(markup)
    return 0


def cmd_png(args: argparse.Namespace, config: GradientConfig) -> int:
    engine = _build_engine(args, config)
    path = save_png(engine.render_raster(args.width, args.height), args.output)
    print(path)
    return 0


def cmd_presets(args: argparse.Namespace, config: GradientConfig) -> int:
    for name, css in GradientSession(catalog=default_catalog(), config=config).gallery():
        print(f"{name}\t{css}")
    return 0


def cmd_save(args: argparse.Namespace, config: GradientConfig) -> int:
    session = GradientSession(engine=_build_engine(args, config), store=_store(args, config), config=config)
    record = session.save(args.name)
    print(json.dumps(record, ensure_ascii=False))
    return 0


def cmd_list(args: argparse.Namespace, config: GradientConfig) -> int:
    print(json.dumps(_store(args, config).load(), ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gradstudio", description="Generate CSS / SVG color gradients")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible palettes")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING ...")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in (
        ("css", cmd_css, "print a CSS gradient expression"),
        ("svg", cmd_svg, "print an SVG gradient document"),
    ):
        p = sub.add_parser(name, help=help_text)
        _add_source_options(p)
        p.set_defaults(func=func)

    p = sub.add_parser("png", help="write a PNG preview")
    _add_source_options(p)
    p.add_argument("output", type=Path)
    p.add_argument("--width", type=int, default=512)
    p.add_argument("--height", type=int, default=128)
    p.set_defaults(func=cmd_png)

    p = sub.add_parser("presets", help="list the preset catalog")
    p.set_defaults(func=cmd_presets)

    p = sub.add_parser("save", help="append a gradient to the store")
    _add_source_options(p)
    p.add_argument("name")
    p.add_argument("--store", type=Path, default=None)
    p.set_defaults(func=cmd_save)

    p = sub.add_parser("list", help="print saved gradients")
    p.add_argument("--store", type=Path, default=None)
    p.set_defaults(func=cmd_list)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    config = GradientConfig.from_env()
    setup_logging(args.log_level or config.log_level)
    try:
        return args.func(args, config)
    except (ValueError, KeyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
