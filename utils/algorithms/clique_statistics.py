"""
Statistics over the maximal cliques of a graph.

Every function accepts the cliques when they are already computed, as any
iterable of node collections (a list, or the lazy find_cliques iterator).
Otherwise they are enumerated from the graph.

Per-node functions follow one convention: a single node gives a single
value, a list or set of nodes gives a dict keyed by node, and no nodes means
every node of the graph.
"""

from collections.abc import Callable, Collection, Hashable, Iterable
from typing import TypeVar

from localtypes import Clique, GraphLike
from utils.algorithms.cliques import find_cliques
from utils.graph import graph_nodes

T = TypeVar("T", bound=Hashable)
U = TypeVar("U")


def _check_clique(clique: object) -> Collection:
    if isinstance(clique, (str, bytes)) or not isinstance(clique, Collection):
        raise TypeError(
            f"Expected each clique to be a collection of nodes, got {clique!r}"
        )
    return clique


def _iter_cliques(
    graph: GraphLike[T], cliques: Iterable[Collection[T]] | None
) -> Iterable[Collection[T]]:
    """Validated cliques, enumerated from the graph when not supplied."""
    if cliques is None:
        return find_cliques(graph)
    if isinstance(cliques, (str, bytes)) or not isinstance(cliques, Iterable):
        raise TypeError(
            f"Expected cliques to be an iterable of cliques, got "
            f"{type(cliques).__name__}"
        )
    return (_check_clique(clique) for clique in cliques)


def _per_node(
    graph: GraphLike[T],
    nodes: T | list[T] | set[T] | None,
    cliques: Iterable[Collection[T]] | None,
    statistic: Callable[[T, list[frozenset[T]], list[Collection[T]]], U],
) -> U | dict[T, U]:
    """Apply a statistic to one node or to each node of a collection."""
    materialized = list(_iter_cliques(graph, cliques))
    members = [frozenset(clique) for clique in materialized]

    if nodes is None:
        nodes = graph_nodes(graph)
    if isinstance(nodes, (list, set)):
        return {v: statistic(v, members, materialized) for v in nodes}
    return statistic(nodes, members, materialized)


def graph_clique_number(
    graph: GraphLike[T], cliques: Iterable[Collection[T]] | None = None
) -> int:
    """
    Returns the clique number (size of the largest clique) of a graph.

    Returns 0 for a graph without nodes.
    """
    return max((len(clique) for clique in _iter_cliques(graph, cliques)), default=0)


def graph_number_of_cliques(
    graph: GraphLike[T], cliques: Iterable[Collection[T]] | None = None
) -> int:
    """Returns the number of maximal cliques of a graph."""
    return sum(1 for _ in _iter_cliques(graph, cliques))


def number_of_cliques(
    graph: GraphLike[T],
    nodes: T | list[T] | set[T] | None = None,
    cliques: Iterable[Collection[T]] | None = None,
) -> int | dict[T, int]:
    """
    Returns the number of maximal cliques each node belongs to.

    Args:
        graph: Adjacency mapping or object with nodes() and neighbors().
        nodes: A node, a list or set of nodes, or None for all of them.
        cliques: Precomputed cliques, enumerated from the graph if None.

    Returns:
        int for a single node, dict[T, int] otherwise.

    Example:
        >>> path = {1: {2}, 2: {1, 3}, 3: {2}}
        >>> number_of_cliques(path, 2)
        2
        >>> number_of_cliques(path)
        {1: 1, 2: 2, 3: 1}
    """

    def count(v: T, members: list[frozenset[T]], _: list[Collection[T]]) -> int:
        return sum(1 for clique in members if v in clique)

    return _per_node(graph, nodes, cliques, count)


def node_clique_number(
    graph: GraphLike[T],
    nodes: T | list[T] | set[T] | None = None,
    cliques: Iterable[Collection[T]] | None = None,
) -> int | dict[T, int]:
    """
    Returns the size of the largest maximal clique containing each node.

    A node that belongs to none of the given cliques gets 0.
    """

    def largest(v: T, members: list[frozenset[T]], _: list[Collection[T]]) -> int:
        return max((len(clique) for clique in members if v in clique), default=0)

    return _per_node(graph, nodes, cliques, largest)


def cliques_containing_node(
    graph: GraphLike[T],
    nodes: T | list[T] | set[T] | None = None,
    cliques: Iterable[Collection[T]] | None = None,
) -> list[Clique[T]] | dict[T, list[Clique[T]]]:
    """Returns the maximal cliques each node belongs to, as lists."""

    def containing(
        v: T, members: list[frozenset[T]], materialized: list[Collection[T]]
    ) -> list[Clique[T]]:
        return [
            list(clique)
            for clique, member_set in zip(materialized, members)
            if v in member_set
        ]

    return _per_node(graph, nodes, cliques, containing)
