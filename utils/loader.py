"""
Module used to import graphs from files

Supported formats, chosen by extension:
    .json - {"nodes": [...], "edges": [[u, v], ...]}, "nodes" optional
    .npy  - dense adjacency matrix saved with numpy.save
    .npz  - sparse adjacency matrix saved with scipy.sparse.save_npz
    other - edge list, one "u v" pair per line
"""

import json
import logging
import os
from collections.abc import Callable, Hashable
from typing import Any

import numpy as np
from scipy import sparse

from constants import DATA
from localtypes import GraphData
from utils.graph import edges_to_adjacency, matrix_to_adjacency

logger = logging.getLogger(__name__)


def path_to_file(path: str) -> str:
    """Resolve a relative path against the data directory."""
    return os.path.join(DATA, path)


def _hashable(value: Any) -> Hashable:
    # JSON arrays come back as lists
    if isinstance(value, list):
        return tuple(_hashable(v) for v in value)
    return value


def path_to_graph_data(path: str) -> GraphData:
    with open(path_to_file(path), "r") as file:
        data = json.load(file)

    if not isinstance(data, dict):
        raise ValueError(f"Error: graph document is not an object in {path}")
    if not isinstance(data.get("edges"), list):
        raise ValueError(f"Error: 'edges' data not a list in {path}")
    if not isinstance(data.get("nodes", []), list):
        raise ValueError(f"Error: 'nodes' data not a list in {path}")
    return data


def json_to_graph(path: str) -> dict[Hashable, set[Hashable]]:
    data = path_to_graph_data(path)
    edges = []
    for edge in data["edges"]:
        if not isinstance(edge, list) or len(edge) != 2:
            raise ValueError(f"Error: edge {edge!r} is not a pair in {path}")
        edges.append((_hashable(edge[0]), _hashable(edge[1])))
    nodes = [_hashable(node) for node in data.get("nodes", [])]
    return edges_to_adjacency(edges, nodes)


def edgelist_to_graph(
    path: str, nodetype: Callable[[str], Hashable] = str
) -> dict[Hashable, set[Hashable]]:
    """
    Read an edge list.

    Each line holds two whitespace separated nodes, or a single node when it
    has no edges. Blank lines and text after '#' are ignored.

    Args:
        path: File path, relative ones resolve against the data directory.
        nodetype: Conversion applied to every node token.
    """
    nodes: list[Hashable] = []
    edges: list[tuple[Hashable, Hashable]] = []
    with open(path_to_file(path), "r") as file:
        for lineno, line in enumerate(file, start=1):
            tokens = line.split("#", 1)[0].split()
            if not tokens:
                continue
            if len(tokens) > 2:
                raise ValueError(
                    f"Error: line {lineno} of {path} has {len(tokens)} fields"
                )
            converted = [nodetype(token) for token in tokens]
            if len(converted) == 1:
                nodes.append(converted[0])
            else:
                edges.append((converted[0], converted[1]))
    return edges_to_adjacency(edges, nodes)


def load_graph(
    path: str, nodetype: Callable[[str], Hashable] = str
) -> dict[Hashable, set[Hashable]]:
    """
    Load a graph as a symmetric adjacency mapping.

    Raises:
        ValueError: If the file content does not describe a graph.
    """
    extension = os.path.splitext(path)[1].lower()
    if extension == ".json":
        graph = json_to_graph(path)
    elif extension == ".npy":
        graph = matrix_to_adjacency(np.load(path_to_file(path)))
    elif extension == ".npz":
        graph = matrix_to_adjacency(sparse.load_npz(path_to_file(path)))
    else:
        graph = edgelist_to_graph(path, nodetype)

    logger.debug(
        f"Loaded {path}: {len(graph)} nodes, "
        f"{sum(len(nbrs) for nbrs in graph.values()) // 2} edges"
    )
    return graph
