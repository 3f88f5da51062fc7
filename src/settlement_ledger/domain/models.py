from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

from ulid import ULID

from settlement_ledger.domain.exceptions import AlreadyClosedError


if TYPE_CHECKING:
    from settlement_ledger.domain.handlers import TransactionHandler


MAX_ID = 255


class PaymentMethod(Enum):
    CREDIT = "C"
    DEBIT = "D"
    CASH = "S"


class TransactionState(Enum):
    OPEN = "O"
    EXPIRED = "E"
    CLOSED = "C"


def _validate_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")


def _validate_id(kind: str, value: int) -> None:
    _validate_int(f"{kind} id", value)
    if not 0 <= value <= MAX_ID:
        raise ValueError(f"{kind} id must be between 0 and {MAX_ID}")


@dataclass(eq=False)
class Account:
    id: int
    name: str
    balance: int = 0
    transactions: list["Transaction"] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        _validate_id("Account", self.id)
        _validate_int("Balance", self.balance)
        if self.balance < 0:
            raise ValueError("Balance cannot be negative")


@dataclass(eq=False)
class Transaction:
    id: int
    amount: int
    sender: Account
    recipient: Account
    payment_method: PaymentMethod
    state: TransactionState = TransactionState.OPEN
    handler: "TransactionHandler | None" = field(default=None, repr=False)
    # Effective amount actually moved; `amount` keeps what was requested.
    settled_amount: int | None = None

    def __post_init__(self) -> None:
        _validate_id("Transaction", self.id)
        _validate_int("Amount", self.amount)
        if self.amount <= 0:
            raise ValueError("Amount must be positive")

    def expire(self) -> None:
        if self.state is TransactionState.CLOSED:
            raise AlreadyClosedError(self.id)
        self.state = TransactionState.EXPIRED


@dataclass(frozen=True)
class SettlementReceipt:
    id: str
    transaction_id: int
    payment_method: PaymentMethod
    requested_amount: int
    effective_amount: int
    sender_balance_after: int
    recipient_balance_after: int
    settled_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, transaction: Transaction, effective_amount: int) -> "SettlementReceipt":
        return cls(
            id=str(ULID()),
            transaction_id=transaction.id,
            payment_method=transaction.payment_method,
            requested_amount=transaction.amount,
            effective_amount=effective_amount,
            sender_balance_after=transaction.sender.balance,
            recipient_balance_after=transaction.recipient.balance,
        )
