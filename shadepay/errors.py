"""Error codes and exceptions raised by the payment contract."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric error codes reported by the contract."""

    NOT_AUTHORIZED = 1
    ALREADY_INITIALIZED = 2
    NOT_INITIALIZED = 3
    REENTRANCY = 4
    MERCHANT_ALREADY_REGISTERED = 5
    MERCHANT_NOT_FOUND = 6
    INVALID_AMOUNT = 7
    INVOICE_NOT_FOUND = 8
    CONTRACT_PAUSED = 9
    CONTRACT_NOT_PAUSED = 10
    MERCHANT_KEY_NOT_FOUND = 11


class ContractError(Exception):
    """A contract call failed with one of the codes in :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode | int) -> None:
        self.code = ErrorCode(code)
        super().__init__(f"Error(Contract, #{self.code.value}) {self.code.name}")


class AuthError(Exception):
    """An address did not authorize the call that required it."""

    def __init__(self, address: object = None) -> None:
        self.address = address
        message = "Error(Auth, InvalidAction)"
        if address is not None:
            message = f"{message}: {address} did not authorize"
        super().__init__(message)