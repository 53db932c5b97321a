"""
Memory Storage Module for MediChain

This module provides an in-memory world state for local development and tests.
Keys are kept in a plain dict and sorted on demand when a range scan starts.
"""

from typing import Iterator

from medichain.ledger.stub import StateIterator
from medichain.storage.base import WorldStateBackend


class MemoryStorage(WorldStateBackend):
    """Simple in-memory world state backend"""

    def __init__(self):
        self.data: dict[str, bytes] = {}
        self.open_iterators = 0

    def get(self, key: str) -> bytes | None:
        """Get value by key"""
        return self.data.get(key)

    def put(self, key: str, value: bytes) -> None:
        """Set value by key"""
        self.data[key] = bytes(value)

    def range(self, start_key: str, end_key: str) -> StateIterator:
        """Scan a snapshot of the keys in range, in sorted order"""
        snapshot = [
            (key, self.data[key])
            for key in sorted(self.data)
            if self.in_range(key, start_key, end_key)
        ]
        self.open_iterators += 1
        return StateIterator(self._entries(snapshot), on_close=self._release)

    @staticmethod
    def _entries(snapshot: list[tuple[str, bytes]]) -> Iterator[tuple[str, bytes]]:
        for key, value in snapshot:
            yield key, value

    def _release(self) -> None:
        self.open_iterators -= 1

    def get_all_keys(self) -> list[str]:
        """Get all keys in storage"""
        return sorted(self.data)

    def size(self) -> int:
        """Get number of items in storage"""
        return len(self.data)
