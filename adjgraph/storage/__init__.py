from adjgraph.storage.base import BaseStorage
from adjgraph.storage.memory import MemoryStorage

__all__ = ["BaseStorage", "MemoryStorage"]
