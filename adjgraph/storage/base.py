"""Abstract base class for adjgraph storage backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

AdjacencyEntry = Tuple[Any, Optional[float]]


class BaseStorage(ABC):
    """Layout that all storage backends must implement.

    A backend keeps an insertion-ordered sequence of node labels, where the
    position of a label is its slot, and one insertion-ordered adjacency list
    of ``(neighbour, weight)`` entries per slot. It enforces no graph rules;
    ``Graph`` does that.
    """

    @abstractmethod
    def add_node(self, label: Any) -> int:
        """Append a label with an empty adjacency list. Return its slot."""

    @abstractmethod
    def slot_of(self, label: Any) -> Optional[int]:
        """Return the slot of a label, or None if it is unknown."""

    @abstractmethod
    def label_at(self, slot: int) -> Any:
        """Return the label stored at ``slot``."""

    @abstractmethod
    def labels(self) -> List[Any]:
        """Return a copy of all labels in insertion order."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of stored labels."""

    @abstractmethod
    def append_entry(self, slot: int, neighbor: Any, weight: Optional[float]) -> None:
        """Append ``(neighbor, weight)`` to the adjacency list of ``slot``."""

    @abstractmethod
    def find_entry(self, slot: int, neighbor: Any) -> Optional[int]:
        """Return the position of ``neighbor`` in the adjacency list of
        ``slot``, or None if absent."""

    @abstractmethod
    def entries(self, slot: int) -> List[AdjacencyEntry]:
        """Return a copy of the adjacency list of ``slot``."""

    @abstractmethod
    def entry_count(self) -> int:
        """Return the total number of adjacency entries over all slots."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every label and adjacency list."""
