"""
Command-line demo.

Run with: python -m forcelayout --vertices 60 --edges 80
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from forcelayout.logging_config import setup_logging, shutdown_logging
from forcelayout.model.graph import EdgePolicy, Graph

logger = logging.getLogger("forcelayout")


def build_random_graph(
    graph: Graph,
    n_vertices: int,
    n_edges: int,
    rng: np.random.Generator,
) -> Graph:
    """Populate ``graph`` with random vertices and edges."""
    vertices = [graph.add_vertex() for _ in range(n_vertices)]
    if n_vertices < 2:
        return graph
    for _ in range(n_edges):
        source, target = rng.choice(n_vertices, size=2, replace=False)
        graph.add_edge(vertices[source], vertices[target])
    return graph


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="forcelayout",
        description="Lay out a random graph with the force-directed engine.",
    )
    parser.add_argument("--vertices", type=int, default=40, help="number of vertices")
    parser.add_argument("--edges", type=int, default=60, help="number of edges")
    parser.add_argument("--steps", type=int, default=500, help="maximum number of layout steps")
    parser.add_argument("--tolerance", type=float, default=1e-3, help="settling speed for headless runs")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in EdgePolicy],
        default=EdgePolicy.COLLAPSE.value,
        help="handling of repeated edges",
    )
    parser.add_argument("--headless", action="store_true", help="relax without opening a window")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="logging level",
    )
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    try:
        return run(args)
    finally:
        shutdown_logging()


def run(args: argparse.Namespace) -> int:
    """Build the random graph and lay it out, headless or in a window."""
    rng = np.random.default_rng(args.seed)

    if args.headless:
        graph = Graph(policy=EdgePolicy(args.policy), seed=args.seed)
        build_random_graph(graph, args.vertices, args.edges, rng)
        logger.info(f"Relaxing {graph}")
        result = graph.relax(max_steps=args.steps, tolerance=args.tolerance)
        logger.info(
            f"Done after {result.steps} steps, max speed {result.max_speed:.6f}, "
            f"center {graph.center}"
        )
        return 0 if result.converged else 1

    # Imported lazily, headless runs do not need a render window
    from forcelayout.view.viewer import create_plotter, run_viewer

    plotter, hook = create_plotter()
    graph = Graph(hook=hook, policy=EdgePolicy(args.policy), seed=args.seed)
    build_random_graph(graph, args.vertices, args.edges, rng)
    run_viewer(graph, plotter, frames=args.steps)
    plotter.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
