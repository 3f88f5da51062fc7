"""Settlement strategies and the dispatch that binds them to transactions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from settlement_ledger.domain.exceptions import (
    AlreadyClosedError,
    ExpiredTransactionError,
    HandlerNotFoundError,
    InsufficientBalanceError,
    SelfTransactionError,
    StrategyNotBoundError,
)
from settlement_ledger.domain.models import (
    PaymentMethod,
    SettlementReceipt,
    Transaction,
    TransactionState,
)


BPS_SCALE = 10_000


@dataclass(frozen=True)
class FeeSchedule:
    """Per-method adjustments in basis points (1000 bps = 10%)."""

    credit_surcharge_bps: int = 1000
    cash_discount_bps: int = 1000

    def __post_init__(self) -> None:
        if self.credit_surcharge_bps < 0:
            raise ValueError("Credit surcharge cannot be negative")
        if not 0 <= self.cash_discount_bps <= BPS_SCALE:
            raise ValueError(f"Cash discount must be between 0 and {BPS_SCALE} bps")


class TransactionHandler(ABC):
    """Validates and settles a transaction for one payment method.

    Subclasses only decide the effective amount; validation order and the
    balance transfer are shared.
    """

    payment_method: PaymentMethod

    @abstractmethod
    def effective_amount(self, amount: int) -> int:
        """Return the amount actually moved when `amount` was requested."""

    def pay(self, transaction: Transaction) -> SettlementReceipt:
        sender = transaction.sender
        recipient = transaction.recipient

        if sender.id == recipient.id:
            raise SelfTransactionError(transaction.id, sender.id)
        if transaction.state is TransactionState.CLOSED:
            raise AlreadyClosedError(transaction.id)
        if transaction.state is TransactionState.EXPIRED:
            raise ExpiredTransactionError(transaction.id)

        effective = self.effective_amount(transaction.amount)
        if sender.balance < effective:
            raise InsufficientBalanceError(
                transaction.id,
                account_id=sender.id,
                required=effective,
                available=sender.balance,
            )

        # Nothing below can fail, so either all of it happens or none of it does.
        sender.balance -= effective
        recipient.balance += effective
        transaction.state = TransactionState.CLOSED
        transaction.settled_amount = effective
        sender.transactions.append(transaction)
        recipient.transactions.append(transaction)

        return SettlementReceipt.create(transaction, effective)


class CreditTransactionHandler(TransactionHandler):
    payment_method = PaymentMethod.CREDIT

    def __init__(self, surcharge_bps: int = 1000) -> None:
        self.surcharge_bps = surcharge_bps

    def effective_amount(self, amount: int) -> int:
        return amount * (BPS_SCALE + self.surcharge_bps) // BPS_SCALE


class CashTransactionHandler(TransactionHandler):
    payment_method = PaymentMethod.CASH

    def __init__(self, discount_bps: int = 1000) -> None:
        self.discount_bps = discount_bps

    def effective_amount(self, amount: int) -> int:
        return amount * (BPS_SCALE - self.discount_bps) // BPS_SCALE


class DebitTransactionHandler(TransactionHandler):
    payment_method = PaymentMethod.DEBIT

    def effective_amount(self, amount: int) -> int:
        return amount


def select_handler(transaction: Transaction, fees: FeeSchedule | None = None) -> TransactionHandler:
    """Bind the handler matching the transaction's payment method.

    Raises HandlerNotFoundError for anything outside the known payment methods,
    leaving the currently bound handler untouched.
    """
    fees = fees or FeeSchedule()

    handler: TransactionHandler
    match transaction.payment_method:
        case PaymentMethod.CREDIT:
            handler = CreditTransactionHandler(fees.credit_surcharge_bps)
        case PaymentMethod.CASH:
            handler = CashTransactionHandler(fees.cash_discount_bps)
        case PaymentMethod.DEBIT:
            handler = DebitTransactionHandler()
        case _:
            raise HandlerNotFoundError(transaction.id, transaction.payment_method)

    transaction.handler = handler
    return handler


def make_payment(transaction: Transaction) -> SettlementReceipt:
    if transaction.handler is None:
        raise StrategyNotBoundError(transaction.id)
    return transaction.handler.pay(transaction)
