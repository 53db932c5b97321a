"""
World state backend interface for MediChain.
"""

from abc import ABC, abstractmethod

from medichain.ledger.stub import StateIterator


class WorldStateBackend(ABC):
    """Ordered key-value store holding the current value of every ledger key"""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the value under key, or None if absent"""
        pass

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any existing value"""
        pass

    @abstractmethod
    def range(self, start_key: str, end_key: str) -> StateIterator:
        """Iterate over [start_key, end_key) in key order; empty bounds are open"""
        pass

    def close(self) -> None:
        """Release backend resources"""
        pass

    @staticmethod
    def in_range(key: str, start_key: str, end_key: str) -> bool:
        if start_key and key < start_key:
            return False
        if end_key and key >= end_key:
            return False
        return True
