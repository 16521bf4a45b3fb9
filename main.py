"""
Enumerate the maximal cliques of a graph file and report statistics.

Usage:
    python main.py GRAPH [--recursive] [--node NODE ...] [--int-nodes] [--limit N] [--debug]
"""

import logging
from collections.abc import Hashable
from itertools import islice
from typing import Any

from constants import DEBUG, LOG_FORMAT
from utils.algorithms.clique_statistics import (
    graph_clique_number,
    graph_number_of_cliques,
    number_of_cliques,
)
from utils.algorithms.cliques import find_cliques, find_cliques_recursive
from utils.loader import load_graph

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def _resolve_nodes(
    graph: dict[Hashable, set[Hashable]], labels: list[str]
) -> list[Hashable]:
    """Match command line labels against the graph's nodes."""
    by_label = {str(node): node for node in graph}
    missing = [label for label in labels if label not in by_label]
    if missing:
        raise ValueError(f"Unknown node(s): {', '.join(missing)}")
    return [by_label[label] for label in labels]


def report(
    path: str,
    recursive: bool = False,
    nodes: list[str] | None = None,
    limit: int | None = None,
    nodetype: Any = str,
) -> dict[str, Any]:
    """
    Enumerate the cliques of the graph stored at path and log a summary.

    Args:
        path: Graph file, see utils.loader for the formats.
        recursive: Use the recursive enumerator instead of the iterative one.
        nodes: Labels of the nodes to count cliques for, all nodes if None.
        limit: Maximum number of cliques to log, all if None.

    Returns:
        dict with keys "cliques", "clique_number", "number_of_cliques" and
        "cliques_per_node".
    """
    graph = load_graph(path, nodetype)
    logger.info(f"Graph {path}: {len(graph)} nodes")

    if recursive:
        cliques = find_cliques_recursive(graph)
    else:
        cliques = list(find_cliques(graph))

    shown = cliques if limit is None else list(islice(cliques, limit))
    for i, clique in enumerate(shown):
        logger.info(f"Clique {i}: {clique}")
    if len(shown) < len(cliques):
        logger.info(f"... {len(cliques) - len(shown)} more")

    selected = None if nodes is None else _resolve_nodes(graph, nodes)
    result = {
        "cliques": cliques,
        "clique_number": graph_clique_number(graph, cliques),
        "number_of_cliques": graph_number_of_cliques(graph, cliques),
        "cliques_per_node": number_of_cliques(graph, selected, cliques),
    }

    logger.info(f"Clique number: {result['clique_number']}")
    logger.info(f"Number of maximal cliques: {result['number_of_cliques']}")
    for node, count in result["cliques_per_node"].items():
        logger.debug(f"  {node}: {count}")
    return result


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Enumerate maximal cliques")
    parser.add_argument("graph", help="Graph file (.json, .npy, .npz or edge list)")
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Use the recursive enumerator",
    )
    parser.add_argument(
        "--node",
        action="append",
        dest="nodes",
        help="Node to count cliques for, can be repeated",
    )
    parser.add_argument("--limit", type=int, default=None, help="Cliques to show")
    parser.add_argument(
        "--int-nodes",
        action="store_true",
        help="Read edge list nodes as integers",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    report(
        path=args.graph,
        recursive=args.recursive,
        nodes=args.nodes,
        limit=args.limit,
        nodetype=int if args.int_nodes else str,
    )
