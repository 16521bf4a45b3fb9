"""Tests for utils/graph.py"""

import numpy as np
import pytest
from scipy import sparse

from utils.algorithms.cliques import find_cliques
from utils.graph import (
    adjacency_items,
    edges_to_adjacency,
    graph_nodes,
    matrix_to_adjacency,
)


class AdjacencyGraph:
    """Minimal object exposing nodes() and neighbors()."""

    def __init__(self, adjacency):
        self._adjacency = adjacency

    def nodes(self):
        return iter(self._adjacency)

    def neighbors(self, node):
        return iter(self._adjacency[node])


class TestAdjacencyItems:
    def test_mapping(self):
        graph = {"a": {"b"}, "b": {"a"}, "c": set()}
        assert dict(adjacency_items(graph)) == graph

    def test_protocol_object(self):
        graph = AdjacencyGraph({1: [2], 2: [1], 3: []})
        assert {n: list(nbrs) for n, nbrs in adjacency_items(graph)} == {
            1: [2],
            2: [1],
            3: [],
        }

    @pytest.mark.parametrize("graph", [None, 3, [(1, 2)], "ab"])
    def test_unsupported(self, graph):
        with pytest.raises(TypeError, match="nodes"):
            list(adjacency_items(graph))

    def test_graph_nodes(self):
        assert graph_nodes({3: set(), 1: set(), 2: set()}) == [3, 1, 2]
        assert graph_nodes(AdjacencyGraph({"x": [], "y": []})) == ["x", "y"]


class TestEdgesToAdjacency:
    def test_symmetric(self):
        assert edges_to_adjacency([(1, 2), (2, 3)]) == {1: {2}, 2: {1, 3}, 3: {2}}

    def test_isolated_nodes(self):
        assert edges_to_adjacency([], nodes=["a"]) == {"a": set()}

    def test_duplicates_collapse(self):
        assert edges_to_adjacency([(1, 2), (2, 1), (1, 2)]) == {1: {2}, 2: {1}}

    def test_self_loop_kept(self):
        assert edges_to_adjacency([(1, 1)]) == {1: {1}}

    def test_bad_edge(self):
        with pytest.raises(ValueError, match="two endpoints"):
            edges_to_adjacency([(1, 2, 3)])


class TestMatrixToAdjacency:
    def test_dense(self):
        matrix = np.array(
            [
                [0, 1, 1, 0],
                [1, 0, 1, 0],
                [1, 1, 0, 0],
                [0, 0, 0, 0],
            ]
        )
        assert matrix_to_adjacency(matrix) == {0: {1, 2}, 1: {0, 2}, 2: {0, 1}, 3: set()}

    def test_nested_lists(self):
        assert matrix_to_adjacency([[0, 1], [1, 0]]) == {0: {1}, 1: {0}}

    def test_labels(self):
        assert matrix_to_adjacency([[0, 1], [1, 0]], labels=["a", "b"]) == {
            "a": {"b"},
            "b": {"a"},
        }

    def test_node_labels_are_python_ints(self):
        graph = matrix_to_adjacency(np.eye(2, dtype=bool)[::-1])
        assert all(type(node) is int for node in graph)

    def test_asymmetric_is_symmetrised(self):
        matrix = np.array([[0, 1, 0], [0, 0, 0], [0, 1, 0]])
        assert matrix_to_adjacency(matrix) == {0: {1}, 1: {0, 2}, 2: {1}}

    def test_diagonal_ignored_by_search(self):
        matrix = np.ones((3, 3))
        graph = matrix_to_adjacency(matrix)
        assert graph[0] == {0, 1, 2}
        cliques = list(find_cliques(graph))
        assert len(cliques) == 1
        assert sorted(cliques[0]) == [0, 1, 2]

    @pytest.mark.parametrize(
        "to_sparse", [sparse.csr_matrix, sparse.coo_matrix, sparse.csr_array]
    )
    def test_sparse(self, to_sparse):
        dense = np.array([[0, 2, 0], [2, 0, 0], [0, 0, 0]])
        assert matrix_to_adjacency(to_sparse(dense)) == matrix_to_adjacency(dense)

    def test_sparse_explicit_zeros(self):
        matrix = sparse.csr_matrix(
            (np.array([0, 1]), (np.array([0, 1]), np.array([1, 0]))), shape=(2, 2)
        )
        assert matrix_to_adjacency(matrix) == {0: {1}, 1: {0}}

    @pytest.mark.parametrize(
        "matrix",
        [np.zeros((2, 3)), np.zeros(3), np.zeros((2, 2, 2)), sparse.csr_matrix((2, 3))],
    )
    def test_not_square(self, matrix):
        with pytest.raises(ValueError):
            matrix_to_adjacency(matrix)

    def test_label_count_mismatch(self):
        with pytest.raises(ValueError, match="labels"):
            matrix_to_adjacency(np.zeros((2, 2)), labels=["a"])
