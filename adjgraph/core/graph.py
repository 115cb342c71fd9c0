"""Core Graph class: the primary public API for adjgraph."""

from __future__ import annotations

import logging
from typing import (
    Any,
    Generic,
    Hashable,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from adjgraph.core.errors import (
    EdgeAlreadyExists,
    EdgeNotExists,
    GraphError,
    IncorrectGraphType,
    InvalidEdge,
    NodeAlreadyExists,
    NodeNotExists,
)
from adjgraph.core.models import Edge, GraphConfig, GraphType, normalize_weight
from adjgraph.storage.base import BaseStorage
from adjgraph.storage.memory import MemoryStorage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

EdgeSpec = Union[Edge, Tuple[Any, Any], Tuple[Any, Any, Optional[float]]]


class Graph(Generic[T]):
    """A directed or undirected graph over arbitrary hashable node labels.

    Nodes are kept in insertion order. Each node owns an ordered adjacency
    list of ``(neighbour, weight)`` entries; an undirected edge is stored as
    two mirrored entries. Adding an edge creates any endpoint that does not
    exist yet.

    Example::

        from adjgraph import Graph, GraphType

        graph = Graph(GraphType.UNDIRECTED)
        graph.add_weighted_edge("a", "b", 2.5)
        graph.neighbors("a")   # ["b"]
    """

    def __init__(
        self,
        kind: Union[GraphType, str],
        storage: Optional[BaseStorage] = None,
        config: Optional[GraphConfig] = None,
    ) -> None:
        """
        Args:
            kind: Orientation of the graph. Cannot be changed later.
            storage: Empty backend that will hold nodes and adjacency lists.
                It belongs to this graph from then on. A fresh
                ``MemoryStorage`` is used if None.
            config: Tuneable behaviour. Uses defaults if None.

        Raises:
            ValueError: If ``storage`` already holds nodes.
        """
        self._kind = GraphType.coerce(kind)
        self._storage = storage if storage is not None else MemoryStorage()
        if self._storage.node_count() != 0:
            raise ValueError(
                f"storage must be empty, it already holds {self._storage.node_count()} nodes"
            )
        self._config = config or GraphConfig()

    @property
    def kind(self) -> GraphType:
        return self._kind

    @property
    def directed(self) -> bool:
        return self._kind is GraphType.DIRECTED

    def release(self) -> None:
        """Drop all nodes and edges held by the graph."""
        self._storage.clear()
        logger.debug("Released %s graph storage", self._kind.value)

    def __enter__(self) -> "Graph[T]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()

    def __len__(self) -> int:
        return self._storage.node_count()

    def __contains__(self, node: Any) -> bool:
        return self.has_node(node)

    def __repr__(self) -> str:
        return (
            f"Graph(kind={self._kind.value!r}, nodes={self.number_of_nodes()}, "
            f"edges={self.number_of_edges()})"
        )

    # ── Node operations ──────────────────────────────────────────────

    def has_node(self, node: T) -> bool:
        """Return True if ``node`` is in the graph."""
        return self._storage.slot_of(node) is not None

    def add_node(self, node: T) -> None:
        """Add a node with no edges.

        Raises:
            NodeAlreadyExists: If the node is already in the graph.
        """
        if self.has_node(node):
            raise NodeAlreadyExists(node)
        self._storage.add_node(node)
        logger.debug("Added node %r", node)

    def _require_slot(self, node: T) -> int:
        slot = self._storage.slot_of(node)
        if slot is None:
            raise NodeNotExists(node)
        return slot

    def _ensure_slot(self, node: T) -> int:
        slot = self._storage.slot_of(node)
        if slot is None:
            slot = self._storage.add_node(node)
            logger.debug("Added node %r while inserting an edge", node)
        return slot

    # ── Edge operations ──────────────────────────────────────────────

    def add_weighted_edge(self, node_a: T, node_b: T, weight: Optional[float]) -> None:
        """Add an edge from ``node_a`` to ``node_b`` carrying ``weight``.

        Missing endpoints are added first. On an undirected graph the mirror
        entry ``node_b -> node_a`` is added with the same weight; either both
        entries are written or neither is.

        Raises:
            InvalidEdge: If the graph is undirected and ``node_a == node_b``.
            EdgeAlreadyExists: If the edge is already present.
        """
        value = normalize_weight(weight)
        if self._kind is GraphType.UNDIRECTED and node_a == node_b:
            raise InvalidEdge(node_a, node_b)

        slot_b = self._ensure_slot(node_b)
        slot_a = self._ensure_slot(node_a)
        if self._storage.find_entry(slot_a, node_b) is not None:
            raise EdgeAlreadyExists(node_a, node_b)

        self._storage.append_entry(slot_a, node_b, value)
        if self._kind is GraphType.UNDIRECTED:
            self._storage.append_entry(slot_b, node_a, value)
        logger.debug("Added edge %r -> %r (weight=%r)", node_a, node_b, value)

    def add_edge(self, node_a: T, node_b: T) -> None:
        """Add an unweighted edge. See ``add_weighted_edge``."""
        self.add_weighted_edge(node_a, node_b, None)

    def add_edges(self, edges: Iterable[EdgeSpec]) -> List[Optional[GraphError]]:
        """Add many edges at once.

        Each item is an ``Edge``, an ``(a, b)`` pair or an ``(a, b, weight)``
        triple; lists work as well as tuples. Every item is checked for shape
        and weight before anything is inserted, so a ``TypeError`` leaves the
        graph unchanged. Items are then inserted in order. A rejected item
        does not stop the rest; its error is logged and recorded instead.
        With ``GraphConfig(strict_bulk=True)`` the first error is raised and
        the remaining items are skipped.

        Returns:
            One entry per input item: None if it was inserted, otherwise the
            ``GraphError`` that rejected it.

        Raises:
            TypeError: If an item is not an ``Edge``, a pair or a triple, or
                if its weight is not a real number or None.
        """
        batch = [self._unpack_edge(item) for item in edges]
        results: List[Optional[GraphError]] = []
        for node_a, node_b, weight in batch:
            try:
                self.add_weighted_edge(node_a, node_b, weight)
            except GraphError as exc:
                if self._config.strict_bulk:
                    raise
                logger.warning("Skipped edge %r -> %r: %s", node_a, node_b, exc)
                results.append(exc)
            else:
                results.append(None)
        return results

    @staticmethod
    def _unpack_edge(item: EdgeSpec) -> Tuple[Any, Any, Optional[float]]:
        if isinstance(item, Edge):
            return item.node_a, item.node_b, item.weight
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            if len(item) == 2:
                return item[0], item[1], None
            if len(item) == 3:
                return item[0], item[1], normalize_weight(item[2])
        raise TypeError(
            f"edge must be an Edge, (a, b) or (a, b, weight), got {item!r}"
        )

    def has_edge(self, node_a: T, node_b: T) -> bool:
        """Return True if ``node_b`` is in the adjacency list of ``node_a``."""
        slot = self._storage.slot_of(node_a)
        if slot is None:
            return False
        return self._storage.find_entry(slot, node_b) is not None

    def weight(self, node_a: T, node_b: T) -> Optional[float]:
        """Return the weight of the edge ``node_a -> node_b`` (None if unweighted).

        Raises:
            EdgeNotExists: If ``node_a`` is unknown or has no such neighbour.
        """
        slot = self._storage.slot_of(node_a)
        if slot is not None:
            position = self._storage.find_entry(slot, node_b)
            if position is not None:
                return self._storage.entries(slot)[position][1]
        raise EdgeNotExists(node_a, node_b)

    # ── Counting ─────────────────────────────────────────────────────

    def number_of_nodes(self) -> int:
        return self._storage.node_count()

    def number_of_edges(self) -> int:
        """Number of edges; each undirected edge is counted once."""
        count = self._storage.entry_count()
        if self._kind is GraphType.UNDIRECTED:
            return count // 2
        return count

    # ── Orientation-specific queries ─────────────────────────────────

    def _require_kind(self, kind: GraphType, operation: str) -> None:
        if self._kind is not kind:
            raise IncorrectGraphType(operation, self._kind)

    def _adjacent(self, node: T) -> List[T]:
        slot = self._require_slot(node)
        return [neighbor for neighbor, _ in self._storage.entries(slot)]

    def _incoming(self, node: T) -> List[T]:
        self._require_slot(node)
        found: List[T] = []
        for slot in range(self._storage.node_count()):
            for neighbor, _ in self._storage.entries(slot):
                if neighbor == node:
                    found.append(self._storage.label_at(slot))
        return found

    def neighbors(self, node: T) -> List[T]:
        """Return the nodes connected to ``node`` in an undirected graph.

        Raises:
            IncorrectGraphType: If the graph is directed.
            NodeNotExists: If the node is unknown.
        """
        self._require_kind(GraphType.UNDIRECTED, "neighbors")
        return self._adjacent(node)

    def successors(self, node: T) -> List[T]:
        """Return the targets of the edges leaving ``node``.

        Raises:
            IncorrectGraphType: If the graph is undirected.
            NodeNotExists: If the node is unknown.
        """
        self._require_kind(GraphType.DIRECTED, "successors")
        return self._adjacent(node)

    def predecessors(self, node: T) -> List[T]:
        """Return the sources of the edges entering ``node``, in node order.

        Scans every adjacency list.

        Raises:
            IncorrectGraphType: If the graph is undirected.
            NodeNotExists: If the node is unknown.
        """
        self._require_kind(GraphType.DIRECTED, "predecessors")
        return self._incoming(node)

    def degree(self, node: T) -> int:
        """Number of edges touching ``node`` in an undirected graph."""
        self._require_kind(GraphType.UNDIRECTED, "degree")
        return len(self._adjacent(node))

    def out_degree(self, node: T) -> int:
        """Number of edges leaving ``node`` in a directed graph."""
        self._require_kind(GraphType.DIRECTED, "out_degree")
        return len(self._adjacent(node))

    def in_degree(self, node: T) -> int:
        """Number of edges entering ``node`` in a directed graph."""
        self._require_kind(GraphType.DIRECTED, "in_degree")
        return len(self._incoming(node))

    # ── Snapshots ────────────────────────────────────────────────────

    def nodes(self) -> List[T]:
        """Return all nodes in insertion order."""
        return self._storage.labels()

    def edges(self) -> List[Edge]:
        """Return every adjacency entry as an ``Edge``.

        Entries are ordered by node insertion, then by adjacency order. An
        undirected edge shows up twice, once from each endpoint.
        """
        result: List[Edge] = []
        for slot in range(self._storage.node_count()):
            node_a = self._storage.label_at(slot)
            for node_b, weight in self._storage.entries(slot):
                result.append(Edge(node_a=node_a, node_b=node_b, weight=weight))
        return result
