"""Core data models for adjgraph."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, Optional, Union


class GraphType(str, Enum):
    """Orientation of a graph, fixed when the graph is created."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def coerce(cls, value: Union["GraphType", str]) -> "GraphType":
        """Accept a ``GraphType`` or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(
            f"kind must be 'directed' or 'undirected', got {value!r}"
        )


def normalize_weight(weight: Any) -> Optional[float]:
    """Return ``weight`` as a float, or None when it is absent.

    NaN is treated as absent so callers using it as an "unweighted" marker
    get the same result as passing None.
    """
    if weight is None:
        return None
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise TypeError(f"weight must be a real number or None, got {weight!r}")
    value = float(weight)
    if math.isnan(value):
        return None
    return value


@dataclass(frozen=True)
class Edge:
    """A single adjacency entry seen from outside the graph.

    Attributes:
        node_a: Node the entry belongs to.
        node_b: Neighbour recorded in ``node_a``'s adjacency list.
        weight: Edge weight, or None for an unweighted edge.
    """

    node_a: Any
    node_b: Any
    weight: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", normalize_weight(self.weight))


@dataclass
class GraphConfig:
    """Tuneable behaviour of a ``Graph``.

    Attributes:
        strict_bulk: When True, ``add_edges`` raises the first per-item
            failure instead of recording it and carrying on.
    """

    strict_bulk: bool = False
