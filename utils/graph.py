"""
Functions related to graphs

Adapters turning the supported graph shapes into a single adjacency
iteration of (node, neighbors) pairs:
    - adjacency mappings (node -> iterable of neighbors)
    - objects with nodes() and neighbors(node), networkx graphs included
    - edge lists
    - dense numpy or sparse scipy adjacency matrices
"""

from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

import numpy as np
from scipy import sparse

from localtypes import Graph, GraphLike

T = TypeVar("T", bound=Hashable)


def adjacency_items(graph: GraphLike[T]) -> Iterator[tuple[T, Iterable[T]]]:
    """
    Iterate over every node of a graph along with its neighbors.

    Isolated nodes are yielded with an empty neighbor collection.

    Raises:
        TypeError: If the object is neither a mapping nor a Graph.
    """
    if isinstance(graph, Mapping):
        yield from graph.items()
    elif isinstance(graph, Graph):
        for node in graph.nodes():
            yield node, graph.neighbors(node)
    else:
        raise TypeError(
            f"Expected an adjacency mapping or an object with nodes() and "
            f"neighbors(), got {type(graph).__name__}"
        )


def graph_nodes(graph: GraphLike[T]) -> list[T]:
    """Returns the nodes of a graph in iteration order."""
    return [node for node, _ in adjacency_items(graph)]


def edges_to_adjacency(
    edges: Iterable[tuple[T, T] | Sequence[T]], nodes: Iterable[T] = ()
) -> dict[T, set[T]]:
    """
    Build a symmetric adjacency mapping from an edge list.

    Args:
        edges: Pairs of endpoints. Duplicates collapse, self-loops are kept.
        nodes: Extra nodes to include, e.g. isolated ones.

    Returns:
        dict[T, set[T]]: node -> neighbors, containing every endpoint and node.
    """
    adjacency: dict[T, set[T]] = {node: set() for node in nodes}
    for edge in edges:
        if len(edge) != 2:
            raise ValueError(f"Edge {edge!r} does not have exactly two endpoints")
        u, v = edge
        adjacency.setdefault(u, set()).add(v)
        adjacency.setdefault(v, set()).add(u)
    return adjacency


def matrix_to_adjacency(
    matrix: Any, labels: Sequence[T] | None = None
) -> dict[Any, set[Any]]:
    """
    Build a symmetric adjacency mapping from an adjacency matrix.

    Any non-zero entry is an edge, and an edge exists as soon as one of
    matrix[i, j] or matrix[j, i] is non-zero. Diagonal entries become
    self-loops, which the clique search ignores.

    Args:
        matrix: Square 2-D array-like, or a scipy sparse matrix or array.
        labels: Node for each row. Defaults to the row indices.

    Raises:
        ValueError: If the matrix is not square or the labels do not match.
    """
    if sparse.issparse(matrix):
        shape = matrix.shape
        coo = sparse.coo_matrix(matrix)
        mask = coo.data != 0
        rows, cols = coo.row[mask], coo.col[mask]
    else:
        dense = np.asarray(matrix)
        shape = dense.shape
        if dense.ndim != 2:
            raise ValueError(f"Adjacency matrix must be 2-D, got shape {shape}")
        rows, cols = np.nonzero(dense)

    if len(shape) != 2 or shape[0] != shape[1]:
        raise ValueError(f"Adjacency matrix must be square, got shape {shape}")

    size = shape[0]
    if labels is None:
        nodes: list[Any] = list(range(size))
    else:
        nodes = list(labels)
        if len(nodes) != size:
            raise ValueError(
                f"Got {len(nodes)} labels for a {size}x{size} adjacency matrix"
            )

    return edges_to_adjacency(
        ((nodes[i], nodes[j]) for i, j in zip(rows.tolist(), cols.tolist())),
        nodes,
    )
