"""
Chaincode Stub Module

This module defines the narrow view of the ledger that a contract is allowed to
use during a transaction: point reads, point writes and ordered range scans
over the world state. Consensus, ordering, endorsement and commit validation
belong to the hosting platform and are not modelled here.

A TransactionContext is created by the invoking runtime for every transaction
and handed to the contract, which reaches the world state only through
ctx.get_stub().
"""

import uuid
from dataclasses import dataclass
from typing import Callable, Iterator


class LedgerError(Exception):
    """Raised when the world state cannot be read, written or scanned"""
    pass


@dataclass(frozen=True)
class KV:
    """Single world-state entry returned by a range scan"""
    key: str
    value: bytes


class StateIterator:
    """
    Range-scan iterator over world-state entries.

    Entries are pulled lazily from the backend. The iterator must be closed
    once the caller is done with it; it supports the context-manager protocol
    so a `with` block releases it on every exit path.
    """

    def __init__(self, entries: Iterator[tuple[str, bytes]],
                 on_close: Callable[[], None] | None = None):
        """
        Args:
            entries: Backend iterator yielding (key, value) pairs in key order
            on_close: Callback releasing backend resources held by the scan
        """
        self._entries = entries
        self._on_close = on_close
        self._pending: KV | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def has_next(self) -> bool:
        """Return True if another entry is available"""
        if self._closed:
            raise LedgerError("Iterator is closed")
        if self._pending is None:
            try:
                key, value = next(self._entries)
            except StopIteration:
                return False
            self._pending = KV(key, value)
        return True

    def next(self) -> KV:
        """Return the next entry"""
        if not self.has_next():
            raise LedgerError("No more entries in range scan")
        kv, self._pending = self._pending, None
        return kv

    def close(self) -> None:
        """Release the scan. Closing twice is a no-op."""
        if self._closed:
            return
        self._closed = True
        self._pending = None
        if self._on_close is not None:
            self._on_close()

    def __iter__(self) -> Iterator[KV]:
        while self.has_next():
            yield self.next()

    def __enter__(self) -> "StateIterator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ChaincodeStub:
    """World-state access for a single transaction"""

    def __init__(self, world_state, tx_id: str):
        """
        Args:
            world_state: Backend exposing get(key), put(key, value) and range(start, end)
            tx_id: Identifier of the transaction this stub serves
        """
        self.world_state = world_state
        self.tx_id = tx_id

    def get_tx_id(self) -> str:
        return self.tx_id

    def get_state(self, key: str) -> bytes | None:
        """
        Read the value stored under key.

        Returns:
            Stored bytes, or None if the key is absent

        Raises:
            LedgerError: On storage failure
        """
        return self.world_state.get(key)

    def put_state(self, key: str, value: bytes) -> None:
        """
        Write value under key, replacing any existing value.

        Raises:
            LedgerError: On an empty key, a non-bytes value or a storage failure
        """
        if not key:
            raise LedgerError("key must not be an empty string")
        if not isinstance(value, (bytes, bytearray)):
            raise LedgerError(f"value for key {key} must be bytes, got {type(value).__name__}")
        self.world_state.put(key, bytes(value))

    def get_state_by_range(self, start_key: str, end_key: str) -> StateIterator:
        """
        Scan keys in [start_key, end_key) in key order.

        An empty start_key or end_key leaves that side of the range open.
        The returned iterator must be closed by the caller.
        """
        return self.world_state.range(start_key, end_key)


class TransactionContext:
    """Per-transaction context handed to contract operations"""

    def __init__(self, world_state, tx_id: str | None = None):
        self.tx_id = tx_id or uuid.uuid4().hex
        self._stub = ChaincodeStub(world_state, self.tx_id)

    def get_stub(self) -> ChaincodeStub:
        return self._stub
