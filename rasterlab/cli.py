"""Command line for clipping and transforming polygons."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rasterlab.clipping import Window, clip_bottom, clip_left, clip_right, clip_top
from rasterlab.transform import rotate, scale, translate

_EDGE_ORDER = ("left", "right", "top", "bottom")


def _vertex_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--vertex",
        dest="vertices",
        action="append",
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        required=True,
        help="a polygon vertex; repeat in order",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rasterlab", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    clip = commands.add_parser("clip", help="clip a polygon against a window")
    clip.add_argument(
        "--window",
        nargs=4,
        type=int,
        required=True,
        metavar=("XMIN", "YMIN", "XMAX", "YMAX"),
    )
    clip.add_argument(
        "--edge",
        dest="edges",
        action="append",
        choices=_EDGE_ORDER,
        help="an edge to clip against; repeat in order (default: all four)",
    )
    _vertex_option(clip)

    move = commands.add_parser("translate", help="move a polygon")
    move.add_argument("tx", type=int)
    move.add_argument("ty", type=int)
    _vertex_option(move)

    resize = commands.add_parser("scale", help="scale a polygon about the origin")
    resize.add_argument("sx", type=float)
    resize.add_argument("sy", type=float)
    _vertex_option(resize)

    turn = commands.add_parser("rotate", help="rotate a polygon about the origin")
    turn.add_argument("degrees", type=float)
    _vertex_option(turn)
    return parser


def _clip(points: list[tuple[int, int]], window: Window, edges: Sequence[str]):
    clippers = {
        "left": lambda pts: clip_left(pts, window.xmin),
        "right": lambda pts: clip_right(pts, window.xmax),
        "top": lambda pts: clip_top(pts, window.ymax),
        "bottom": lambda pts: clip_bottom(pts, window.ymin),
    }
    for edge in edges:
        points = clippers[edge](points)
    return points


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and print the resulting vertices, one per line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    points = [(x, y) for x, y in args.vertices]

    if args.command == "clip":
        try:
            window = Window(*args.window)
        except ValueError as error:
            parser.error(str(error))
        result = _clip(points, window, args.edges or _EDGE_ORDER)
    elif args.command == "translate":
        result = translate(points, args.tx, args.ty)
    elif args.command == "scale":
        result = scale(points, args.sx, args.sy)
    else:
        result = rotate(points, args.degrees)

    for x, y in result:
        print(f"{x} {y}")
    return 0