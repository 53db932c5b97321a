"""
Contracts for MediChain.
"""

from medichain.contracts.base import Contract, ContractError, transaction
from medichain.contracts.medicine_contract import (
    MedicineLedgerContract,
    MedicineNotFoundError,
    MedicineDecodeError,
    MedicineExistsError,
)

__all__ = [
    'Contract',
    'ContractError',
    'transaction',
    'MedicineLedgerContract',
    'MedicineNotFoundError',
    'MedicineDecodeError',
    'MedicineExistsError',
]
