"""Domain layer - accounts, transactions and settlement rules."""

from settlement_ledger.domain.exceptions import (
    AccountNotFoundError,
    AlreadyClosedError,
    DomainError,
    DuplicateAccountError,
    DuplicateTransactionError,
    ExpiredTransactionError,
    HandlerNotFoundError,
    InsufficientBalanceError,
    SelfTransactionError,
    SettlementError,
    StrategyNotBoundError,
    TransactionNotFoundError,
)
from settlement_ledger.domain.handlers import (
    CashTransactionHandler,
    CreditTransactionHandler,
    DebitTransactionHandler,
    FeeSchedule,
    TransactionHandler,
    make_payment,
    select_handler,
)
from settlement_ledger.domain.models import (
    Account,
    PaymentMethod,
    SettlementReceipt,
    Transaction,
    TransactionState,
)


__all__ = [
    "Account",
    "AccountNotFoundError",
    "AlreadyClosedError",
    "CashTransactionHandler",
    "CreditTransactionHandler",
    "DebitTransactionHandler",
    "DomainError",
    "DuplicateAccountError",
    "DuplicateTransactionError",
    "ExpiredTransactionError",
    "FeeSchedule",
    "HandlerNotFoundError",
    "InsufficientBalanceError",
    "PaymentMethod",
    "SelfTransactionError",
    "SettlementError",
    "SettlementReceipt",
    "StrategyNotBoundError",
    "Transaction",
    "TransactionHandler",
    "TransactionNotFoundError",
    "TransactionState",
    "make_payment",
    "select_handler",
]
