"""Exceptions raised by graph operations.

Every error is a ``ValueError`` so callers that only care about "the request
was rejected" can catch that, while callers that need to tell failures apart
catch the specific subclass.
"""

from __future__ import annotations

from typing import Any


class GraphError(ValueError):
    """Base class for all graph errors."""


class NodeAlreadyExists(GraphError):
    def __init__(self, node: Any) -> None:
        super().__init__(f"Node {node!r} already exists in graph")
        self.node = node


class NodeNotExists(GraphError):
    def __init__(self, node: Any) -> None:
        super().__init__(f"Node {node!r} not found in graph")
        self.node = node


class EdgeAlreadyExists(GraphError):
    def __init__(self, node_a: Any, node_b: Any) -> None:
        super().__init__(f"Edge {node_a!r} -> {node_b!r} already exists in graph")
        self.node_a = node_a
        self.node_b = node_b


class EdgeNotExists(GraphError):
    def __init__(self, node_a: Any, node_b: Any) -> None:
        super().__init__(f"Edge {node_a!r} -> {node_b!r} not found in graph")
        self.node_a = node_a
        self.node_b = node_b


class PathNotExists(GraphError):
    """No path connects two nodes.

    Reserved for path-finding code built on top of ``Graph``; the container
    itself never raises it.
    """

    def __init__(self, node_a: Any, node_b: Any) -> None:
        super().__init__(f"No path from {node_a!r} to {node_b!r}")
        self.node_a = node_a
        self.node_b = node_b


class IncorrectGraphType(GraphError):
    def __init__(self, operation: str, kind: Any) -> None:
        super().__init__(
            f"{operation}() cannot be used on {getattr(kind, 'value', kind)} graphs"
        )
        self.operation = operation
        self.kind = kind


class InvalidEdge(GraphError):
    """Self-loop requested on an undirected graph."""

    def __init__(self, node_a: Any, node_b: Any) -> None:
        super().__init__(
            f"Edge {node_a!r} -> {node_b!r} is a self-loop, "
            "which undirected graphs do not allow"
        )
        self.node_a = node_a
        self.node_b = node_b
