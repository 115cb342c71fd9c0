from adjgraph.core.graph import Graph
from adjgraph.core.models import Edge, GraphConfig, GraphType

__all__ = ["Edge", "Graph", "GraphConfig", "GraphType"]
