"""svg-schemes: inspect, normalize, create and preview SVG color schemes.

Usage:
  svg-schemes show scheme.svg
  svg-schemes format scheme.svg -o normalized.svg
  svg-schemes new --title "Night" '#161820' 'rgb(198,200,208)' ... (8 colors)
  svg-schemes preview scheme.svg -o night.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .color import Color, decode_literal
from .errors import MalformedLiteral, SchemeError
from .parser import read_scheme
from .render import render_scheme
from .scheme import Scheme
from .theme import CURRENT_VERSION, DEFAULT_TITLE, SLOT_COUNT

logger = logging.getLogger(__name__)


def _load(path: str) -> Scheme:
    logger.debug("Reading %s", path)
    return read_scheme(Path(path).read_bytes())


def _write(text: str, output: str | None) -> None:
    if not output:
        sys.stdout.write(text)
        return
    path = Path(output)
    path.write_text(text, encoding="utf-8")
    print(f"Wrote {path} ({path.stat().st_size} bytes)", file=sys.stderr)


def _parse_color(literal: str) -> Color:
    color = decode_literal(literal)
    if color is None:
        raise MalformedLiteral(literal, "expected #RRGGBB, rgb(R,G,B) or hsv(H,S,V)")
    return color


def cmd_show(args: argparse.Namespace) -> None:
    scheme = _load(args.file)
    print(f"title:   {scheme.title}")
    print(f"version: {scheme.version}")
    for slot, (role, color) in enumerate(scheme.roles()):
        print(f"  c{slot}  {role:<11} {color.hex()}")


def cmd_format(args: argparse.Namespace) -> None:
    _write(render_scheme(_load(args.file)), args.output)


def cmd_new(args: argparse.Namespace) -> None:
    if len(args.colors) != SLOT_COUNT:
        raise SchemeError(f"expected {SLOT_COUNT} colors, got {len(args.colors)}")
    scheme = Scheme.from_palette(
        [_parse_color(literal) for literal in args.colors],
        title=args.title,
        version=args.version,
    )
    _write(render_scheme(scheme), args.output)


def cmd_preview(args: argparse.Namespace) -> None:
    # matplotlib is only imported when a chart is requested
    from .preview import swatches

    scheme = _load(args.file)
    filename = args.output or f"{Path(args.file).stem}.png"
    output_dir = args.output_dir or config.OUTPUT_DIR
    swatches(scheme, filename=filename, output_dir=output_dir)
    path = Path(output_dir) / filename
    print(f"Wrote {path} ({path.stat().st_size} bytes)", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svg-schemes", description=__doc__.splitlines()[0])
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="print title, version and palette")
    show.add_argument("file")
    show.set_defaults(func=cmd_show)

    fmt = sub.add_parser("format", help="re-render a scheme with hex colors")
    fmt.add_argument("file")
    fmt.add_argument("-o", "--output")
    fmt.set_defaults(func=cmd_format)

    new = sub.add_parser("new", help="build a scheme document from eight colors")
    new.add_argument("colors", nargs="+", metavar="COLOR")
    new.add_argument("--title", default=DEFAULT_TITLE)
    new.add_argument("--version", type=int, default=CURRENT_VERSION)
    new.add_argument("-o", "--output")
    new.set_defaults(func=cmd_new)

    preview = sub.add_parser("preview", help="draw a palette swatch chart")
    preview.add_argument("file")
    preview.add_argument("-o", "--output", help="file name, default <stem>.png")
    preview.add_argument("--output-dir")
    preview.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (SchemeError, OSError) as e:
        print(f"svg-schemes error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
