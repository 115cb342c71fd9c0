"""In-memory storage backend using adjacency lists."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from adjgraph.storage.base import AdjacencyEntry, BaseStorage


class MemoryStorage(BaseStorage):
    """In-memory graph storage backed by lists and a label index.

    Labels are kept in a list (their position is the slot) with a dict from
    label to slot alongside, so labels must be hashable. Adjacency lists are
    scanned linearly.
    """

    def __init__(self) -> None:
        self._nodes: List[Any] = []
        self._index: Dict[Any, int] = {}
        # adjacency list: slot -> list of (neighbour, weight)
        self._adj: List[List[AdjacencyEntry]] = []

    def add_node(self, label: Any) -> int:
        slot = len(self._nodes)
        self._index[label] = slot
        self._nodes.append(label)
        self._adj.append([])
        return slot

    def slot_of(self, label: Any) -> Optional[int]:
        return self._index.get(label)

    def label_at(self, slot: int) -> Any:
        return self._nodes[slot]

    def labels(self) -> List[Any]:
        return list(self._nodes)

    def node_count(self) -> int:
        return len(self._nodes)

    def append_entry(self, slot: int, neighbor: Any, weight: Optional[float]) -> None:
        self._adj[slot].append((neighbor, weight))

    def find_entry(self, slot: int, neighbor: Any) -> Optional[int]:
        for position, (existing, _) in enumerate(self._adj[slot]):
            if existing == neighbor:
                return position
        return None

    def entries(self, slot: int) -> List[AdjacencyEntry]:
        return list(self._adj[slot])

    def entry_count(self) -> int:
        return sum(len(entries) for entries in self._adj)

    def clear(self) -> None:
        self._nodes.clear()
        self._index.clear()
        self._adj.clear()
