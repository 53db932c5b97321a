"""
Chaincode Runtime for MediChain.

This module dispatches a named transaction with string arguments to a contract
and wraps the outcome in a response envelope: status 200 with a JSON payload on
success, status 500 with the error message otherwise. Function names may be
given bare ("QueryMedicine") or qualified with the contract name
("MedicineLedgerContract:QueryMedicine").
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from medichain.contracts.base import Contract, ContractError
from medichain.ledger.stub import LedgerError, TransactionContext

logger = logging.getLogger(__name__)

OK = 200
ERROR = 500


@dataclass
class ChaincodeResponse:
    """Outcome of a single invocation"""
    status: int
    message: str = ""
    payload: bytes | None = None

    @property
    def ok(self) -> bool:
        return self.status == OK

    def json(self) -> Any:
        """Decode the payload, or None when the transaction returned nothing"""
        if not self.payload:
            return None
        return json.loads(self.payload)


def _to_payload(result: Any) -> bytes | None:
    if result is None:
        return None
    if isinstance(result, BaseModel):
        return result.model_dump_json(by_alias=True).encode("utf-8")
    if isinstance(result, list):
        items = [item.model_dump(by_alias=True) if isinstance(item, BaseModel) else item for item in result]
        return json.dumps(items, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return json.dumps(result, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class Chaincode:
    """Invocation runtime wrapping a single contract"""

    def __init__(self, contract: Contract):
        self.contract = contract
        self._transactions = contract.get_transactions()
        self._parameters = {
            tx_name: contract.get_parameters(method)
            for tx_name, method in self._transactions.items()
        }

    def get_metadata(self) -> dict[str, Any]:
        """Describe the contract and its transactions"""
        return {
            "contract": self.contract.name,
            "transactions": [
                {"name": tx_name, "parameters": params}
                for tx_name, params in self._parameters.items()
            ]
        }

    def _resolve(self, function: str) -> str | None:
        if ":" in function:
            contract_name, _, function = function.partition(":")
            if contract_name != self.contract.name:
                return None
        return function if function in self._transactions else None

    def invoke(self, ctx: TransactionContext, function: str, args: list[str]) -> ChaincodeResponse:
        """
        Run one transaction.

        Args:
            ctx: Transaction context giving access to the world state
            function: Exposed transaction name, optionally prefixed with "<contract>:"
            args: String arguments after the context

        Returns:
            ChaincodeResponse with status OK and the JSON payload, or status ERROR and a message
        """
        tx_name = self._resolve(function)
        if tx_name is None:
            message = f"Function {function} not found in contract {self.contract.name}"
            logger.warning(message)
            return ChaincodeResponse(status=ERROR, message=message)

        expected = len(self._parameters[tx_name])
        if len(args) != expected:
            message = f"Incorrect number of params. Expected {expected}, received {len(args)}"
            logger.warning(f"{tx_name}: {message}")
            return ChaincodeResponse(status=ERROR, message=message)

        for position, arg in enumerate(args):
            if not isinstance(arg, str):
                message = f"Arg {position} must be a string, got {type(arg).__name__}"
                logger.warning(f"{tx_name}: {message}")
                return ChaincodeResponse(status=ERROR, message=message)
            try:
                arg.encode("utf-8")
            except UnicodeEncodeError:
                message = f"Arg {position} is not valid UTF-8 text"
                logger.warning(f"{tx_name}: {message}")
                return ChaincodeResponse(status=ERROR, message=message)

        try:
            result = self._transactions[tx_name](ctx, *args)
        except (ContractError, LedgerError) as e:
            logger.warning(f"Transaction {ctx.tx_id} {tx_name} failed: {e}")
            return ChaincodeResponse(status=ERROR, message=str(e))

        logger.info(f"Transaction {ctx.tx_id} {tx_name} completed")
        return ChaincodeResponse(status=OK, payload=_to_payload(result))
