"""rehex command-line interface."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import numpy as np

from .adjacency import build_adjacency
from .io import load_indices

_LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")
    _LOGGER.debug("Logging configured (level=%s)", logging.getLevelName(level))


def _add_mesh_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--in", dest="input_path", required=True)
    parser.add_argument("--vertex-count", type=int)
    parser.add_argument("--min-neighbours", type=int, default=5)
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Drop a trailing partial triangle instead of failing",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="rehex CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Build adjacency and print a diagnostics report")
    _add_mesh_arguments(check)

    ring = sub.add_parser("ring", help="Print tiles by ring distance from one tile")
    _add_mesh_arguments(ring)
    ring.add_argument("--tile", type=int, required=True)
    ring.add_argument("--depth", type=int, default=1)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        adjacency = _load_adjacency(args)
    except ValueError as exc:  # RehexError and bad option values
        print(exc)
        raise SystemExit(1)

    if args.command == "check":
        _cmd_check(adjacency)

    elif args.command == "ring":
        _cmd_ring(adjacency, args)


def _load_adjacency(args) -> np.ndarray:
    indices, vertex_count = load_indices(args.input_path)
    if args.vertex_count is not None:
        vertex_count = args.vertex_count
    if vertex_count is None:
        vertex_count = int(indices.max()) + 1 if indices.size else 0
        _LOGGER.debug("Inferred vertex count %d from indices", vertex_count)
    return build_adjacency(
        indices,
        vertex_count,
        min_neighbours=args.min_neighbours,
        strict=not args.lenient,
    )


def _cmd_check(adjacency: np.ndarray) -> None:
    from .diagnostics import diagnostics_report
    from .tiles import build_tile_grid

    report = diagnostics_report(adjacency)
    for key in ("vertices", "pentagons", "hexagons", "asymmetric_pairs", "components", "euler_characteristic"):
        print(f"{key}: {report[key]}")

    errors = build_tile_grid(adjacency).validate()
    if errors:
        for error in errors:
            print(error)
        raise SystemExit(1)
    print("OK")


def _cmd_ring(adjacency: np.ndarray, args) -> None:
    from .algorithms import ring_tiles

    if not 0 <= args.tile < len(adjacency):
        print(f"Tile {args.tile} is outside [0, {len(adjacency)})")
        raise SystemExit(1)
    try:
        rings = ring_tiles(adjacency, args.tile, max_depth=args.depth)
    except ValueError as exc:
        print(exc)
        raise SystemExit(1)
    for depth, tile_ids in sorted(rings.items()):
        print(f"ring {depth}: {' '.join(str(t) for t in tile_ids)}")


if __name__ == "__main__":
    main()
