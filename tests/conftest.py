"""
Pytest configuration for MediChain.

Ensures the project root is on sys.path so `import medichain` resolves during
test collection without an installed distribution, and provides shared
world-state fixtures.
"""

import os
import sys
import pytest

# Compute project root (parent of this tests directory)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from medichain.contracts.medicine_contract import MedicineLedgerContract  # noqa: E402
from medichain.ledger.stub import TransactionContext  # noqa: E402
from medichain.storage.memory_storage import MemoryStorage  # noqa: E402


@pytest.fixture
def storage():
    """Empty in-memory world state"""
    return MemoryStorage()


@pytest.fixture
def ctx(storage):
    """Transaction context over the in-memory world state"""
    return TransactionContext(storage, tx_id="tx-test")


@pytest.fixture
def contract():
    """Contract with built-in seed records and default options"""
    return MedicineLedgerContract()


@pytest.fixture
def paracetamol():
    """Field values for a medicine that is not part of the seed data"""
    return {
        "name": "Paracetamol",
        "concentration": "500mg",
        "form": "Tableta",
        "expiration": "31/01/2026",
        "quantity": "40",
        "code": "7654321"
    }
