"""Records, enumerations and storage keys used by the payment contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class Role(Enum):
    """Roles that the admin can grant to users."""

    ADMIN = "Admin"
    MANAGER = "Manager"
    OPERATOR = "Operator"


class InvoiceStatus(IntEnum):
    """Lifecycle states of an invoice."""

    PENDING = 0
    PAID = 1
    CANCELLED = 2
    REFUNDED = 3


class KeyKind(Enum):
    """The kinds of entry kept in contract storage."""

    ADMIN = "Admin"
    PAUSED = "Paused"
    FEE_IN_BASIS_POINTS = "FeeInBasisPoints"
    FEE_AMOUNT = "FeeAmount"
    CONTRACT_INFO = "ContractInfo"
    ACCEPTED_TOKENS = "AcceptedTokens"
    MERCHANT = "Merchant"
    MERCHANT_KEY = "MerchantKey"
    MERCHANT_COUNT = "MerchantCount"
    MERCHANT_ID = "MerchantId"
    MERCHANT_TOKENS = "MerchantTokens"
    MERCHANT_BALANCE = "MerchantBalance"
    INVOICE = "Invoice"
    INVOICE_COUNT = "InvoiceCount"
    REENTRANCY_STATUS = "ReentrancyStatus"
    ROLE = "Role"


_ARITY = {
    KeyKind.FEE_IN_BASIS_POINTS: 1,
    KeyKind.FEE_AMOUNT: 1,
    KeyKind.MERCHANT: 1,
    KeyKind.MERCHANT_KEY: 1,
    KeyKind.MERCHANT_ID: 1,
    KeyKind.MERCHANT_BALANCE: 1,
    KeyKind.INVOICE: 1,
    KeyKind.ROLE: 2,
}


@dataclass(frozen=True)
class DataKey:
    """A storage key: a kind plus the values it is parameterised by."""

    kind: KeyKind
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        args = tuple(self.args)
        expected = _ARITY.get(self.kind, 0)
        if len(args) != expected:
            raise ValueError(
                f"{self.kind.value} key takes {expected} argument(s), got {len(args)}"
            )
        object.__setattr__(self, "args", args)


@dataclass(frozen=True)
class ContractInfo:
    """Who initialised the contract and when."""

    admin: Any
    timestamp: int


@dataclass(frozen=True)
class Merchant:
    """A registered merchant."""

    id: int
    address: Any
    active: bool = True
    verified: bool = False
    date_registered: int = 0


@dataclass(frozen=True)
class Invoice:
    """An invoice issued by a merchant."""

    id: int
    description: str
    amount: int
    token: Any
    status: InvoiceStatus
    merchant_id: int
    payer: Any = None
    date_created: int = 0
    date_paid: int | None = None


@dataclass(frozen=True)
class MerchantFilter:
    """Selects merchants by activity and verification; None matches anything."""

    is_active: bool | None = None
    is_verified: bool | None = None

    def matches(self, merchant: Merchant) -> bool:
        """Return whether the merchant passes every set condition."""
        if self.is_active is not None and merchant.active != self.is_active:
            return False
        if self.is_verified is not None and merchant.verified != self.is_verified:
            return False
        return True


@dataclass(frozen=True)
class InvoiceFilter:
    """Selects invoices by status, merchant and amount range."""

    status: int | None = None
    merchant: Any = None
    min_amount: int | None = None
    max_amount: int | None = None
    _extra: dict = field(default_factory=dict, repr=False, compare=False)