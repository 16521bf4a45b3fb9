"""
Maximal clique enumeration for undirected graphs.

Bron-Kerbosch search with the pivoting rule of Tomita, Tanaka and Takahashi:
at every level, the search only branches on candidates that are not
neighbors of a pivot, the pivot being the node sharing the most neighbors
with the candidate set. Self-loops and parallel edges are ignored.

Two enumerators produce the same cliques:
    find_cliques           - lazy, keeps its search state on an explicit stack
    find_cliques_recursive - eager, recursive reference implementation

Complexity: O(3^(n/3)) in the worst case, which is the number of maximal
cliques a graph on n nodes can have.

References:
    Bron, C. and Kerbosch, J. 1973. Algorithm 457: finding all cliques of an
    undirected graph. Commun. ACM 16, 9, 575-577.
    Tomita, E., Tanaka, A. and Takahashi, H. 2006. The worst-case time
    complexity for generating all maximal cliques and computational
    experiments. Theoretical Computer Science 363, 1, 28-42.
    Cazals, F. and Karande, C. 2008. A note on the problem of reporting
    maximal cliques. Theoretical Computer Science 407, 1-3, 564-568.
"""

import logging
from collections.abc import Hashable
from typing import Generic, TypeVar

from localtypes import Clique, Frame, GraphLike, NeighborMap
from utils.graph import adjacency_items

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _neighbor_map(graph: GraphLike[T]) -> NeighborMap[T]:
    """Cache the neighbors of every node, dropping self-loops."""
    nnbrs: NeighborMap[T] = {}
    for node, neighbors in adjacency_items(graph):
        nbrs = set(neighbors)
        nbrs.discard(node)
        nnbrs[node] = nbrs
    logger.debug(f"Neighbor cache: {len(nnbrs)} nodes")
    return nnbrs


def _max_degree_neighbors(nnbrs: NeighborMap[T]) -> set[T]:
    """
    Neighbors of the node with the most neighbors, first seen on ties.

    Used as the first pivot, when nothing has been explored yet.
    """
    pivotnbrs: set[T] = set()
    maxconn = -1
    for nbrs in nnbrs.values():
        if len(nbrs) > maxconn:
            pivotnbrs = nbrs
            maxconn = len(nbrs)
    return pivotnbrs


def _select_pivot(
    nnbrs: NeighborMap[T], cand: set[T], done: set[T]
) -> set[T] | None:
    """
    Pick the pivot maximizing shared neighbors with the candidate set.

    Explored nodes are looked at first: if one of them is adjacent to every
    candidate, any clique found below would extend with it, so nothing
    maximal is left to find.

    Returns:
        The pivot's neighbors within cand, or None when the branch is pruned.
    """
    numb_cand = len(cand)

    maxconndone = -1
    pivotdonenbrs: set[T] = set()
    for n in done:
        cn = cand & nnbrs[n]
        if len(cn) > maxconndone:
            pivotdonenbrs = cn
            maxconndone = len(cn)
            if maxconndone == numb_cand:
                return None

    maxconn = -1
    pivotnbrs: set[T] = set()
    for n in cand:
        cn = cand & nnbrs[n]
        if len(cn) > maxconn:
            pivotnbrs = cn
            maxconn = len(cn)
            # A candidate is never its own neighbor, nothing can beat this
            if maxconn == numb_cand - 1:
                break

    if maxconndone > maxconn:
        return pivotdonenbrs
    return pivotnbrs


class CliqueIterator(Generic[T]):
    """
    Lazy enumeration of the maximal cliques of a graph.

    The recursion of Bron-Kerbosch is unrolled onto a stack of
    (cand, done, smallcand) frames, so the search depth is only bounded by
    memory. Each call to __next__ runs the search until the next clique is
    found. Cliques are new lists, in the order their nodes were added.

    Example:
        >>> cliques = CliqueIterator({1: {2}, 2: {1, 3}, 3: {2}})
        >>> sorted(sorted(c) for c in cliques)
        [[1, 2], [2, 3]]
    """

    def __init__(self, graph: GraphLike[T]) -> None:
        self._nnbrs = _neighbor_map(graph)
        self._cand: set[T] = set(self._nnbrs)
        self._done: set[T] = set()
        self._smallcand: set[T] = self._cand - _max_degree_neighbors(self._nnbrs)
        self._stack: list[Frame[T]] = []
        self._clique_so_far: Clique[T] = []
        self._emitted = 0
        self._exhausted = False

    def __iter__(self) -> "CliqueIterator[T]":
        return self

    def __next__(self) -> Clique[T]:
        if self._exhausted:
            raise StopIteration

        nnbrs = self._nnbrs
        clique_so_far = self._clique_so_far

        while self._smallcand or self._stack:
            if self._smallcand:
                n = self._smallcand.pop()
            else:
                # Back out of the current level
                self._cand, self._done, self._smallcand = self._stack.pop()
                clique_so_far.pop()
                continue

            clique_so_far.append(n)
            self._cand.remove(n)
            self._done.add(n)
            nn = nnbrs[n]
            new_cand = self._cand & nn
            new_done = self._done & nn

            if not new_cand:
                clique_so_far.pop()
                if not new_done:
                    return self._emit(clique_so_far + [n])
                continue

            # Shortcut, a single node left to add
            if not new_done and len(new_cand) == 1:
                clique = clique_so_far + list(new_cand)
                clique_so_far.pop()
                return self._emit(clique)

            pivotnbrs = _select_pivot(nnbrs, new_cand, new_done)
            if pivotnbrs is None:
                # This part of the tree is already searched
                clique_so_far.pop()
                continue

            self._stack.append((self._cand, self._done, self._smallcand))
            self._cand = new_cand
            self._done = new_done
            self._smallcand = new_cand - pivotnbrs

        self._exhausted = True
        logger.debug(f"Enumeration finished: {self._emitted} maximal cliques")
        raise StopIteration

    def _emit(self, clique: Clique[T]) -> Clique[T]:
        self._emitted += 1
        return clique


def find_cliques(graph: GraphLike[T]) -> CliqueIterator[T]:
    """
    Search for all maximal cliques in a graph.

    Nothing is computed until the first clique is requested, and a consumer
    may stop at any point. Every call starts an independent search.

    Args:
        graph: Adjacency mapping or object with nodes() and neighbors().

    Returns:
        CliqueIterator[T]: Each maximal clique exactly once, in no particular
            order.

    Example:
        >>> graph = {"a": {"b", "c"}, "b": {"a", "c"}, "c": {"a", "b"}, "d": set()}
        >>> sorted(sorted(c) for c in find_cliques(graph))
        [['a', 'b', 'c'], ['d']]
    """
    return CliqueIterator(graph)


def _extend(
    nnbrs: NeighborMap[T],
    cand: set[T],
    done: set[T],
    so_far: Clique[T],
    cliques: list[Clique[T]],
) -> None:
    pivotnbrs = _select_pivot(nnbrs, cand, done)
    if pivotnbrs is None:
        return

    for n in cand - pivotnbrs:
        cand.remove(n)
        so_far.append(n)
        nn = nnbrs[n]
        new_cand = cand & nn
        new_done = done & nn

        if not new_cand and not new_done:
            cliques.append(so_far[:])
        elif not new_done and len(new_cand) == 1:
            cliques.append(so_far + list(new_cand))
        else:
            _extend(nnbrs, new_cand, new_done, so_far, cliques)

        # Later siblings must treat n as explored
        done.add(so_far.pop())


def find_cliques_recursive(graph: GraphLike[T]) -> list[Clique[T]]:
    """
    Recursive search for all maximal cliques in a graph.

    Same cliques as find_cliques, computed eagerly. Recursion depth grows
    with the size of the cliques, so dense graphs may hit the interpreter's
    recursion limit; prefer find_cliques for those.

    Raises:
        RecursionError: If the search is deeper than the recursion limit.
    """
    nnbrs = _neighbor_map(graph)
    if not nnbrs:
        return []

    cliques: list[Clique[T]] = []
    _extend(nnbrs, set(nnbrs), set(), [], cliques)
    logger.debug(f"Recursive enumeration finished: {len(cliques)} maximal cliques")
    return cliques
