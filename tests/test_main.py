"""Tests for main.py"""

import logging

import pytest

from main import report


@pytest.fixture
def edge_list(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("a b\nb c\na c\nc d\ne\n")
    return str(path)


class TestReport:
    @pytest.mark.parametrize("recursive", [False, True])
    def test_statistics(self, edge_list, recursive):
        result = report(edge_list, recursive=recursive)
        assert {frozenset(c) for c in result["cliques"]} == {
            frozenset("abc"),
            frozenset("cd"),
            frozenset("e"),
        }
        assert result["clique_number"] == 3
        assert result["number_of_cliques"] == 3
        assert result["cliques_per_node"] == {"a": 1, "b": 1, "c": 2, "d": 1, "e": 1}

    def test_selected_nodes(self, edge_list):
        result = report(edge_list, nodes=["c", "e"])
        assert result["cliques_per_node"] == {"c": 2, "e": 1}

    def test_int_nodes(self, tmp_path):
        path = tmp_path / "graph.txt"
        path.write_text("1 2\n2 3\n")
        result = report(str(path), nodes=["2"], nodetype=int)
        assert result["cliques_per_node"] == {2: 2}

    def test_unknown_node(self, edge_list):
        with pytest.raises(ValueError, match="Unknown node"):
            report(edge_list, nodes=["z"])

    def test_limit(self, edge_list, caplog):
        with caplog.at_level(logging.INFO):
            result = report(edge_list, limit=1)
        assert len(result["cliques"]) == 3
        assert "... 2 more" in caplog.text
        assert "Clique number: 3" in caplog.text
