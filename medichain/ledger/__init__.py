"""
Ledger capability interface used by MediChain contracts.
"""

from medichain.ledger.stub import (
    LedgerError,
    KV,
    StateIterator,
    ChaincodeStub,
    TransactionContext,
)

__all__ = ['LedgerError', 'KV', 'StateIterator', 'ChaincodeStub', 'TransactionContext']
