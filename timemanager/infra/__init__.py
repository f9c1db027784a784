"""Infrastructure layer - Configuration and persistence"""

from .db import KeyValueStore, MemoryKeyValueStore, SqlKeyValueStore, open_store
from .repository import StateRepository

__all__ = ["KeyValueStore", "MemoryKeyValueStore", "SqlKeyValueStore", "open_store", "StateRepository"]
