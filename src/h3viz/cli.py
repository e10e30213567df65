"""h3viz command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import H3VizError, LaunchError
from .io import load_cell_groups
from .models import CircleOverlay, RenderOptions


def _parse_circle(value: str) -> CircleOverlay:
    parts = value.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected LAT,LNG,RADIUS, got {value!r}")
    try:
        return CircleOverlay(float(parts[0]), float(parts[1]), int(parts[2]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"bad circle {value!r}: {exc}") from exc


def _add_render_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--cell-index", action="store_true", help="Label cells with their index")
    parser.add_argument("--edge-length", action="store_true", help="Draw and label cell edges")
    parser.add_argument("--no-resolution", action="store_true", help="Omit the resolution label")
    parser.add_argument("--grouped", action="store_true", help="Merge each group into one outline")
    parser.add_argument(
        "--circle",
        dest="circles",
        action="append",
        type=_parse_circle,
        default=[],
        metavar="LAT,LNG,RADIUS",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="h3viz: render H3 cells on a map")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    html = sub.add_parser("html", help="Write the map page to a file")
    html.add_argument("--in", dest="input_path", required=True)
    html.add_argument("--out", dest="output_path", required=True)
    _add_render_flags(html)

    show = sub.add_parser("show", help="Write the map page and open it in a browser")
    show.add_argument("cells", nargs="*", help="Cells forming a single group")
    show.add_argument("--in", dest="input_path")
    show.add_argument("--name", dest="output_filename", help="Explicit output filename")
    _add_render_flags(show)

    png = sub.add_parser("png", help="Render a static PNG preview (requires matplotlib)")
    png.add_argument("--in", dest="input_path", required=True)
    png.add_argument("--out", dest="output_path", required=True)
    png.add_argument("--dpi", type=int, default=150)
    _add_render_flags(png)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "html":
            _cmd_html(args)
        elif args.command == "show":
            _cmd_show(args, parser)
        elif args.command == "png":
            _cmd_png(args)
    except LaunchError as exc:
        print(exc, file=sys.stderr)
        if exc.path is not None:
            print(f"Open {exc.path} manually.", file=sys.stderr)
        raise SystemExit(1)
    except (H3VizError, OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1)


def _options(args) -> RenderOptions:
    return RenderOptions(
        show_cell_index=args.cell_index,
        show_edge_length=args.edge_length,
        show_resolution=not args.no_resolution,
        render_cells_separately=not args.grouped,
        output_filename=getattr(args, "output_filename", None),
    )


def _cmd_html(args) -> None:
    from .viewer import generate_html

    groups = load_cell_groups(args.input_path)
    html = generate_html(groups, _options(args), args.circles)
    out = Path(args.output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    print(f"Saved {out}")


def _cmd_show(args, parser: argparse.ArgumentParser) -> None:
    from .viewer import show_in_browser

    groups: List[List[str]] = []
    if args.input_path:
        groups.extend(load_cell_groups(args.input_path))
    if args.cells:
        groups.append(list(args.cells))
    if not groups:
        parser.error("show: give cells on the command line or --in FILE")

    path = show_in_browser(groups, _options(args), args.circles)
    print(f"Opened {path}")


def _cmd_png(args) -> None:
    from .features import build_features
    from .preview import render_png

    groups = load_cell_groups(args.input_path)
    collection = build_features(groups, _options(args))
    render_png(collection, args.output_path, dpi=args.dpi)
    print(f"Saved {args.output_path}")


if __name__ == "__main__":
    main()
