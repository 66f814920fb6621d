"""Module entry point for `python -m floorpath`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from floorpath.app import COST_POLICIES, plan_route, resolve_config
from floorpath.nav.coordinate import Coordinate
from floorpath.nav.floor_loader import find_destination, load_floor_data
from floorpath.render.floor_view import render_route


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(verbose=args.verbose)

    try:
        config = resolve_config(
            floors_file=args.floors,
            resolution=args.resolution,
            cost_policy=args.policy,
            shortest_path_factor=args.factor,
            diagonal=args.diagonal,
        )
        floor = load_floor_data(config.floors_file, args.floor)
        if args.to is not None:
            goal = find_destination(floor, args.to)
        else:
            goal = args.goal
        result = plan_route(floor, args.start, goal, config=config)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        raise SystemExit(str(exc)) from exc

    console = Console()
    console.print(
        render_route(
            result.grid_map,
            result.path,
            destinations=floor.end_locations,
            show_map=not args.no_map,
        )
    )
    return 0 if result.found else 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plan a walkable route on a floor.")
    parser.add_argument("--floor", required=True, help="Floor id in the floors file.")
    parser.add_argument(
        "--start",
        type=_parse_point,
        required=True,
        help="Start position as X,Y.",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--goal", type=_parse_point, help="Goal position as X,Y.")
    target.add_argument("--to", default=None, help="Named destination on the floor.")
    parser.add_argument(
        "--floors",
        type=Path,
        default=None,
        help="Floors JSON document (env FLOORPATH_FLOORS_FILE).",
    )
    parser.add_argument(
        "--policy",
        choices=COST_POLICIES,
        default=None,
        help="Edge cost policy (env FLOORPATH_COST_POLICY).",
    )
    parser.add_argument(
        "--factor",
        type=float,
        default=None,
        help="Shortest-path factor for the proximity policy, 0..1.",
    )
    parser.add_argument(
        "--resolution",
        type=float,
        default=None,
        help="Grid spacing (env FLOORPATH_RESOLUTION).",
    )
    parser.add_argument(
        "--diagonal",
        action="store_true",
        help="Allow diagonal moves between grid cells.",
    )
    parser.add_argument(
        "--no-map",
        action="store_true",
        help="Only print the route summary.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser


def _parse_point(raw: str) -> Coordinate:
    parts = raw.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {raw!r}")
    try:
        return Coordinate(x=float(parts[0]), y=float(parts[1]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {raw!r}") from exc


def _configure_logging(*, verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


if __name__ == "__main__":
    sys.exit(main())
