"""adjgraph: an in-memory directed/undirected graph container."""

__version__ = "0.1.0"

from adjgraph.core.errors import (
    EdgeAlreadyExists,
    EdgeNotExists,
    GraphError,
    IncorrectGraphType,
    InvalidEdge,
    NodeAlreadyExists,
    NodeNotExists,
    PathNotExists,
)
from adjgraph.core.graph import Graph
from adjgraph.core.models import Edge, GraphConfig, GraphType

__all__ = [
    "Edge",
    "EdgeAlreadyExists",
    "EdgeNotExists",
    "Graph",
    "GraphConfig",
    "GraphError",
    "GraphType",
    "IncorrectGraphType",
    "InvalidEdge",
    "NodeAlreadyExists",
    "NodeNotExists",
    "PathNotExists",
    "__version__",
]
