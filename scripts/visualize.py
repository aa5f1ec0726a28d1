#!/usr/bin/env python3
"""
Before/after visualization of meshification.

Generates a random topology, meshifies it and draws both versions side by
side into ./build/. Nodes are placed with a spectral embedding of the final
graph so that the two panels share positions.

Usage:
    uv run python scripts/visualize.py [NODES] [--seed S] [--rounds R]
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from graph_meshify import GraphStore, generate_topology, run_meshification

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def spectral_positions(graph: GraphStore) -> np.ndarray:
    """Place nodes on the two smallest non-trivial Laplacian eigenvectors."""
    n = graph.num_nodes
    A = np.zeros((n, n))
    for u, v in graph.edges():
        A[u, v] = 1.0
        A[v, u] = 1.0

    L = np.diag(A.sum(axis=1)) - A
    _, eigenvectors = np.linalg.eigh(L)

    # Skip the constant eigenvector
    coords = eigenvectors[:, 1:3] if n >= 3 else np.zeros((n, 2))
    span = np.ptp(coords, axis=0)
    span[span == 0] = 1.0
    return (coords - coords.min(axis=0)) / span


def draw(graph, pos, cut_vertices, title, ax, show_redundant=True):
    """Draw a topology with the root, cut vertices and redundant edges highlighted."""
    for u, v in graph.edges():
        redundant = show_redundant and graph.is_redundant(u, v)
        ax.plot(
            [pos[u, 0], pos[v, 0]],
            [pos[u, 1], pos[v, 1]],
            color="#00AA00" if redundant else "gray",
            alpha=0.9 if redundant else 0.5,
            linewidth=2 if redundant else 1,
            zorder=2 if redundant else 1,
        )

    colors = []
    for i in range(graph.num_nodes):
        if i == 0:
            colors.append("lightblue")
        elif i in cut_vertices:
            colors.append("pink")
        else:
            colors.append("steelblue")

    ax.scatter(pos[:, 0], pos[:, 1], s=60, c=colors, zorder=5, edgecolors="white", linewidth=1)

    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.axis("off")


def main():
    parser = argparse.ArgumentParser(description="Draw a topology before and after meshification")
    parser.add_argument("nodes", type=int, nargs="?", default=50, help="Number of nodes")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--rounds", type=int, default=1, help="Meshification passes")
    args = parser.parse_args()

    BUILD_DIR.mkdir(exist_ok=True)

    graph = generate_topology(args.nodes, seed=args.seed)
    original = graph.copy()
    report = run_meshification(graph, rounds=args.rounds)

    pos = spectral_positions(graph)

    fig, axes = plt.subplots(1, 2, figsize=(14, 7))
    draw(
        original,
        pos,
        report.initial.cut_vertices,
        f"Before: {report.metrics.initial_cut_vertices} cut vertices",
        axes[0],
        show_redundant=False,
    )
    draw(
        graph,
        pos,
        report.final.cut_vertices,
        f"After: {report.metrics.final_cut_vertices} cut vertices, "
        f"+{report.edges_added} edges",
        axes[1],
    )

    fig.suptitle(f"Meshification ({args.nodes} nodes, seed {args.seed})", fontsize=14, fontweight="bold")
    plt.tight_layout()

    filepath = BUILD_DIR / "meshification.png"
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"Saved: {filepath}")


if __name__ == "__main__":
    main()
