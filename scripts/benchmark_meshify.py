#!/usr/bin/env python3
"""
Benchmark meshification across network sizes.

Usage:
    uv run python scripts/benchmark_meshify.py [--sizes N,...] [--seeds K]

Examples:
    uv run python scripts/benchmark_meshify.py
    uv run python scripts/benchmark_meshify.py --sizes 100,500,1000 --seeds 10
    uv run python scripts/benchmark_meshify.py --rounds 4 --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

from graph_meshify import generate_topology, run_meshification


def benchmark_size(num_nodes: int, seeds: int, prob: float, rounds: int) -> dict[str, Any]:
    """
    Benchmark meshification of ``seeds`` random topologies of one size.

    Returns:
        Dict with mean timings and mean cut vertex counts
    """
    totals = {
        "analysis_ms": 0.0,
        "meshify_ms": 0.0,
        "edges_added": 0,
        "initial_cuts": 0,
        "final_cuts": 0,
    }

    for seed in range(seeds):
        graph = generate_topology(num_nodes, prob, seed=seed)

        start = time.perf_counter()
        report = run_meshification(graph, rounds=rounds)
        elapsed = (time.perf_counter() - start) * 1000.0

        totals["analysis_ms"] += report.timings.initial_analysis
        totals["meshify_ms"] += elapsed
        totals["edges_added"] += report.edges_added
        totals["initial_cuts"] += report.metrics.initial_cut_vertices
        totals["final_cuts"] += report.metrics.final_cut_vertices

    return {
        "num_nodes": num_nodes,
        **{key: value / seeds for key, value in totals.items()},
    }


def run_benchmarks(
    sizes: list[int],
    seeds: int = 5,
    prob: float = 0.15,
    rounds: int = 1,
) -> list[dict]:
    """Run benchmarks for each size and print a summary table."""
    print(f"\nBenchmarking {len(sizes)} sizes, {seeds} seeds each (p={prob}, rounds={rounds})")
    print("=" * 80)

    results = []
    for n in sizes:
        result = benchmark_size(n, seeds, prob, rounds)
        results.append(result)

    # Summary
    print(
        f"{'Nodes':>8s}{'Analysis ms':>14s}{'Total ms':>12s}"
        f"{'Edges+':>10s}{'Cuts before':>14s}{'Cuts after':>12s}"
    )
    print("-" * 70)
    for r in results:
        print(
            f"{r['num_nodes']:>8d}{r['analysis_ms']:>14.3f}{r['meshify_ms']:>12.3f}"
            f"{r['edges_added']:>10.1f}{r['initial_cuts']:>14.1f}{r['final_cuts']:>12.1f}"
        )

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark meshification")
    parser.add_argument("--sizes", default="10,50,100,250,500,1000", help="Comma-separated node counts")
    parser.add_argument("--seeds", type=int, default=5, help="Topologies per size")
    parser.add_argument("--prob", type=float, default=0.15, help="Cross-edge probability")
    parser.add_argument("--rounds", type=int, default=1, help="Meshification passes")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",")]
    results = run_benchmarks(sizes, seeds=args.seeds, prob=args.prob, rounds=args.rounds)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
