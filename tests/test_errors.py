"""Tests for the graph error taxonomy."""

import pytest

from adjgraph import (
    EdgeAlreadyExists,
    EdgeNotExists,
    GraphError,
    GraphType,
    IncorrectGraphType,
    InvalidEdge,
    NodeAlreadyExists,
    NodeNotExists,
    PathNotExists,
)


@pytest.mark.parametrize(
    "error",
    [
        NodeAlreadyExists(1),
        NodeNotExists(1),
        EdgeAlreadyExists(1, 2),
        EdgeNotExists(1, 2),
        PathNotExists(1, 2),
        IncorrectGraphType("degree", GraphType.DIRECTED),
        InvalidEdge(1, 1),
    ],
)
def test_all_errors_are_graph_value_errors(error):
    assert isinstance(error, GraphError)
    assert isinstance(error, ValueError)


def test_node_error_attributes():
    error = NodeNotExists("x")
    assert error.node == "x"
    assert "'x'" in str(error)


def test_edge_error_attributes():
    error = EdgeNotExists("a", "b")
    assert (error.node_a, error.node_b) == ("a", "b")
    assert str(error) == "Edge 'a' -> 'b' not found in graph"


def test_path_not_exists_message():
    assert "No path" in str(PathNotExists(1, 6))


def test_incorrect_graph_type_message():
    error = IncorrectGraphType("in_degree", GraphType.UNDIRECTED)
    assert error.operation == "in_degree"
    assert error.kind is GraphType.UNDIRECTED
    assert str(error) == "in_degree() cannot be used on undirected graphs"
