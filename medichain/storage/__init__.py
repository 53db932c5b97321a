"""
World state backends for MediChain.
"""

from typing import Any

from medichain.storage.base import WorldStateBackend
from medichain.storage.memory_storage import MemoryStorage
from medichain.storage.sqlite_storage import SQLiteStorage


def create_world_state(config: dict[str, Any]) -> WorldStateBackend:
    """
    Create the world state backend named in a storage configuration.

    Args:
        config: Mapping with "backend" ("memory" or "sqlite") and, for sqlite, "database_path"
    """
    backend = config.get("backend", "memory")
    if backend == "memory":
        return MemoryStorage()
    if backend == "sqlite":
        return SQLiteStorage(config.get("database_path", "medichain.db"))
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = ['WorldStateBackend', 'MemoryStorage', 'SQLiteStorage', 'create_world_state']
