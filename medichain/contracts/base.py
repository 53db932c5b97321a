"""
Contract base class and transaction registry.

A contract is a plain object whose methods marked with @transaction become
invocable transaction entry points. Every such method takes the transaction
context first, followed by string arguments.
"""

import inspect
from typing import Callable


class ContractError(Exception):
    """Base class for conditions raised by contract logic"""
    pass


def _pascal_case(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_") if part)


def transaction(func: Callable | None = None, *, name: str | None = None):
    """
    Mark a contract method as a transaction.

    Usable bare (@transaction) or with an explicit exposed name
    (@transaction(name="InitLedger")). The default name is the method name
    in PascalCase.
    """
    def decorator(f: Callable) -> Callable:
        f.__transaction_name__ = name or _pascal_case(f.__name__)
        return f

    if func is not None:
        return decorator(func)
    return decorator


class Contract:
    """Base class for contracts exposing transactions"""

    def __init__(self, name: str | None = None):
        self.name = name or type(self).__name__

    def get_transactions(self) -> dict[str, Callable]:
        """Return exposed name -> bound method, in definition order"""
        transactions: dict[str, Callable] = {}
        for klass in reversed(type(self).__mro__):
            for attr, value in vars(klass).items():
                tx_name = getattr(value, "__transaction_name__", None)
                if tx_name is not None:
                    transactions[tx_name] = getattr(self, attr)
        return transactions

    @staticmethod
    def get_parameters(method: Callable) -> list[str]:
        """Parameter names of a bound transaction method, excluding the context"""
        params = list(inspect.signature(method).parameters)
        return params[1:]
