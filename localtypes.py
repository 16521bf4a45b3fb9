"""
Type definitions for clique enumeration.

This module contains the custom types used throughout the library, organized
by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import NotRequired, Protocol, TypedDict, TypeVar, runtime_checkable

# Basic type variable for graph nodes
T = TypeVar("T", bound=Hashable)


# Graph collaborator
@runtime_checkable
class Graph(Protocol[T]):
    """
    Anything that can list its nodes and the neighbors of a node.

    networkx graphs satisfy this protocol as they are.
    """

    def nodes(self) -> Iterable[T]: ...

    def neighbors(self, node: T) -> Iterable[T]: ...


type Adjacency[T] = Mapping[T, Iterable[T]]  # node -> neighbors
type GraphLike[T] = Adjacency[T] | Graph[T]


# Search state
type NeighborMap[T] = dict[T, set[T]]  # node -> neighbors, never itself
type Clique[T] = list[T]  # discovery order, not canonical
type Frame[T] = tuple[set[T], set[T], set[T]]  # (cand, done, smallcand)


# Data Type
class GraphData(TypedDict):
    nodes: NotRequired[list[Hashable]]
    edges: list[list[Hashable]]
