"""
Medicine Ledger Contract

This module implements the record-management contract for medicines kept in
the world state. The contract is a stateless façade: every operation receives
a transaction context, works through its stub and keeps nothing between
invocations besides its configuration.

Storage failures surface as LedgerError. Missing and malformed records have
their own ContractError subclasses so callers can tell them apart from
storage failures.
"""

import logging
from typing import Any, Iterator

from pydantic import ValidationError

from medichain.config.seed import load_seed_medicines
from medichain.contracts.base import Contract, ContractError, transaction
from medichain.core.medicine import Medicine, QueryResult
from medichain.ledger.stub import LedgerError, TransactionContext

logger = logging.getLogger(__name__)


class MedicineNotFoundError(ContractError):
    """Raised when no record exists under the requested key"""
    pass


class MedicineDecodeError(ContractError):
    """Raised when a stored value is not a valid medicine record"""
    pass


class MedicineExistsError(ContractError):
    """Raised when creating over an existing key with overwrite disabled"""
    pass


class MedicineLedgerContract(Contract):
    """Contract providing functions for managing medicines"""

    def __init__(self, seed_medicines: list[Medicine] | None = None,
                 seed_key_prefix: str = "MEDICINE",
                 allow_overwrite: bool = True,
                 strict_decode: bool = True):
        """
        Initialize the contract.

        Args:
            seed_medicines: Records written by InitLedger (built-in records if None)
            seed_key_prefix: Seed keys are the prefix followed by the record index
            allow_overwrite: Whether CreateMedicine may replace an existing record
            strict_decode: Raise on malformed stored values instead of returning an empty record
        """
        super().__init__()
        self.seed_medicines = list(seed_medicines) if seed_medicines is not None else load_seed_medicines()
        self.seed_key_prefix = seed_key_prefix
        self.allow_overwrite = allow_overwrite
        self.strict_decode = strict_decode

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "MedicineLedgerContract":
        """Build a contract from Settings.get_contract_config() output"""
        return cls(
            seed_medicines=load_seed_medicines(config.get("seed_file")),
            seed_key_prefix=config.get("seed_key_prefix", "MEDICINE"),
            allow_overwrite=config.get("allow_overwrite", True),
            strict_decode=config.get("strict_decode", True),
        )

    @transaction
    def init_ledger(self, ctx: TransactionContext) -> None:
        """Add the seed medicines to the world state"""
        stub = ctx.get_stub()
        for index, medicine in enumerate(self.seed_medicines):
            key = f"{self.seed_key_prefix}{index}"
            try:
                stub.put_state(key, medicine.to_bytes())
            except LedgerError as e:
                raise LedgerError(f"Failed to put to world state. {e}") from e
            logger.debug(f"Seeded {key} ({medicine.name})")

    @transaction
    def create_medicine(self, ctx: TransactionContext, medicine_number: str, name: str,
                        concentration: str, form: str, expiration: str,
                        quantity: str, code: str) -> None:
        """Add a new medicine to the world state under medicine_number"""
        stub = ctx.get_stub()
        if not self.allow_overwrite and stub.get_state(medicine_number) is not None:
            raise MedicineExistsError(f"{medicine_number} already exists")

        medicine = Medicine(
            name=name,
            concentration=concentration,
            form=form,
            expiration=expiration,
            quantity=quantity,
            code=code
        )
        stub.put_state(medicine_number, medicine.to_bytes())
        logger.debug(f"Stored {medicine_number} in transaction {ctx.tx_id}")

    @transaction
    def query_medicine(self, ctx: TransactionContext, medicine_number: str) -> Medicine:
        """
        Return the medicine stored under medicine_number.

        Raises:
            LedgerError: If the world state cannot be read
            MedicineNotFoundError: If the key is absent
            MedicineDecodeError: If the stored value is malformed (strict mode)
        """
        try:
            data = ctx.get_stub().get_state(medicine_number)
        except LedgerError as e:
            raise LedgerError(f"Failed to read from world state. {e}") from e

        if data is None:
            raise MedicineNotFoundError(f"{medicine_number} does not exist")

        return self._decode(medicine_number, data)

    @transaction
    def query_all_medicines(self, ctx: TransactionContext) -> list[QueryResult]:
        """Return all medicines found in the world state, in key order"""
        return list(self.iter_medicines(ctx))

    @transaction
    def change_medicine_quantity(self, ctx: TransactionContext, medicine_number: str,
                                 new_quantity: str) -> None:
        """Update the quantity of the medicine stored under medicine_number"""
        medicine = self.query_medicine(ctx, medicine_number)
        ctx.get_stub().put_state(medicine_number, medicine.with_quantity(new_quantity).to_bytes())
        logger.debug(f"Quantity of {medicine_number} set to {new_quantity}")

    def iter_medicines(self, ctx: TransactionContext,
                       start_key: str = "", end_key: str = "") -> Iterator[QueryResult]:
        """
        Lazily yield the records in [start_key, end_key).

        The range iterator is released when the scan finishes, when an error
        escapes and when the generator is closed before exhaustion.
        """
        with ctx.get_stub().get_state_by_range(start_key, end_key) as iterator:
            while iterator.has_next():
                kv = iterator.next()
                yield QueryResult(key=kv.key, record=self._decode(kv.key, kv.value))

    def _decode(self, key: str, data: bytes) -> Medicine:
        try:
            return Medicine.from_bytes(data)
        except ValidationError as e:
            if self.strict_decode:
                raise MedicineDecodeError(f"Failed to decode {key}: {e.errors()[0]['msg']}") from e
            logger.warning(f"Ignoring malformed record under {key}; returning an empty medicine")
            return Medicine()
