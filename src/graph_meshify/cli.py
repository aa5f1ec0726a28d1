"""
Command-line interface for graph meshification.

Usage:
    graph-meshify [NODES] [--prob P] [--seed S] [--rounds R] [--no-render]

Examples:
    graph-meshify
    graph-meshify 200 --seed 7
    graph-meshify 500 --rounds 3 --output-dir build --no-render
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .export import DEFAULT_ENGINE, render_image, write_dot
from .generators import generate_topology
from .pipeline import Timings, run_meshification
from .report import format_report
from .types import (
    DEFAULT_CONNECTION_PROB,
    DEFAULT_NODE_COUNT,
    MAX_NEIGHBORS,
    MAX_NODES,
    MIN_NODE_COUNT,
)
from .validation import ValidationError, validate_node_count

logger = logging.getLogger(__name__)

OLD_STEM = "dodag_old"
FINAL_STEM = "dodag_final"


@dataclass(frozen=True)
class MeshifyOptions:
    """Options for a command-line meshification run."""

    num_nodes: int = DEFAULT_NODE_COUNT
    connection_prob: float = DEFAULT_CONNECTION_PROB
    seed: Optional[int] = None
    rounds: int = 1
    max_degree: int = MAX_NEIGHBORS
    output_dir: Path = Path(".")
    render: bool = True
    engine: str = DEFAULT_ENGINE


def resolve_node_count(raw: Optional[str], default: int = DEFAULT_NODE_COUNT) -> int:
    """
    Turn the NODES argument into a node count.

    Missing, non-integer or out-of-range values fall back to ``default``;
    invalid values also emit a warning.
    """
    if raw is None:
        return default
    try:
        return validate_node_count(int(raw), minimum=MIN_NODE_COUNT, maximum=MAX_NODES)
    except (ValueError, ValidationError):
        warnings.warn(
            f"Invalid node count {raw!r}. Must be {MIN_NODE_COUNT}-{MAX_NODES}. "
            f"Using: {default}",
            stacklevel=2,
        )
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-meshify",
        description="Detect cut vertices in a random tree-like topology and add "
        "redundant edges until it is biconnected.",
    )
    parser.add_argument(
        "nodes",
        nargs="?",
        help=f"Number of nodes ({MIN_NODE_COUNT}-{MAX_NODES}, default {DEFAULT_NODE_COUNT})",
    )
    parser.add_argument(
        "--prob",
        type=float,
        default=DEFAULT_CONNECTION_PROB,
        help="Cross-edge connection probability",
    )
    parser.add_argument("--seed", type=int, help="Random seed for the topology")
    parser.add_argument("--rounds", type=int, default=1, help="Maximum meshification passes")
    parser.add_argument(
        "--max-degree",
        type=int,
        default=MAX_NEIGHBORS,
        help="Adjacency capacity per node",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for .dot and image files",
    )
    parser.add_argument("--no-render", action="store_true", help="Skip image rendering")
    parser.add_argument("--engine", default=DEFAULT_ENGINE, help="Graphviz engine for rendering")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> tuple[MeshifyOptions, bool]:
    """Parse command-line arguments into options and the verbose flag."""
    args = build_parser().parse_args(argv)
    options = MeshifyOptions(
        num_nodes=resolve_node_count(args.nodes),
        connection_prob=args.prob,
        seed=args.seed,
        rounds=args.rounds,
        max_degree=args.max_degree,
        output_dir=args.output_dir,
        render=not args.no_render,
        engine=args.engine,
    )
    return options, args.verbose


def run(options: MeshifyOptions) -> str:
    """
    Generate, meshify, export and report.

    Returns:
        The formatted report
    """
    start_total = time.perf_counter()
    timings = Timings()

    start = time.perf_counter()
    graph = generate_topology(
        options.num_nodes,
        options.connection_prob,
        seed=options.seed,
        max_degree=options.max_degree,
    )
    timings.topology_gen = _elapsed_ms(start)

    original = graph.copy()
    report = run_meshification(graph, rounds=options.rounds, timings=timings)

    out = options.output_dir
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Cannot create output directory %s: %s", out, exc)
        logger.warning("Skipping DOT export and rendering")
        timings.total = _elapsed_ms(start_total)
        return format_report(report, connection_prob=options.connection_prob)

    old_dot = out / f"{OLD_STEM}.dot"
    final_dot = out / f"{FINAL_STEM}.dot"

    start = time.perf_counter()
    written: list[Path] = []
    if write_dot(old_dot, original, cut_vertices=report.initial.cut_vertices, show_redundant=False):
        written.append(old_dot)
    if write_dot(final_dot, graph, cut_vertices=report.final.cut_vertices, show_redundant=True):
        written.append(final_dot)
    timings.dot_export = _elapsed_ms(start)

    output_files = [path.name for path in written]
    if options.render and written:
        logger.info("Generating images...")
        for dot_path in written:
            image_path = dot_path.with_suffix(".png")
            if render_image(dot_path, image_path, engine=options.engine):
                output_files.append(image_path.name)

    timings.total = _elapsed_ms(start_total)

    return format_report(
        report,
        connection_prob=options.connection_prob,
        output_files=output_files,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    options, verbose = parse_options(argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Using node count: %d", options.num_nodes)

    try:
        text = run(options)
    except ValidationError as exc:
        logger.error("%s", exc)
        return 2

    print(text)
    return 0


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


if __name__ == "__main__":
    sys.exit(main())
