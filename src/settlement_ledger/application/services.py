import threading
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

import structlog

from settlement_ledger.domain.exceptions import DomainError, TransactionNotFoundError
from settlement_ledger.domain.handlers import FeeSchedule, make_payment, select_handler
from settlement_ledger.domain.models import (
    Account,
    PaymentMethod,
    SettlementReceipt,
    Transaction,
)
from settlement_ledger.infrastructure.metrics import (
    SETTLED_AMOUNT_TOTAL,
    SETTLEMENTS_TOTAL,
    track_settlement_duration,
)
from settlement_ledger.infrastructure.repositories import (
    AccountRepository,
    TransactionRepository,
)


logger = structlog.get_logger()


class SettlementStatus(Enum):
    SETTLED = "SETTLED"
    DECLINED = "DECLINED"


@dataclass
class OpenAccountCommand:
    account_id: int
    name: str
    initial_balance: int = 0


@dataclass
class OpenTransactionCommand:
    transaction_id: int
    amount: int
    sender_account_id: int
    recipient_account_id: int
    payment_method: PaymentMethod


@dataclass
class SettlementResult:
    transaction_id: int
    status: SettlementStatus
    receipt: SettlementReceipt | None = None
    error_code: str | None = None
    error_message: str | None = None
    processed_at: datetime | None = None


class SettlementService:
    def __init__(
        self,
        accounts: AccountRepository | None = None,
        transactions: TransactionRepository | None = None,
        fees: FeeSchedule | None = None,
    ) -> None:
        self.accounts = accounts if accounts is not None else AccountRepository()
        self.transactions = transactions if transactions is not None else TransactionRepository()
        self.fees = fees or FeeSchedule()
        # Guards the balance check and the transfer that follows it.
        self._lock = threading.Lock()

    def open_account(self, cmd: OpenAccountCommand) -> Account:
        account = Account(id=cmd.account_id, name=cmd.name, balance=cmd.initial_balance)
        self.accounts.add(account)
        logger.info("account_opened", account_id=account.id, balance=account.balance)
        return account

    def open_transaction(self, cmd: OpenTransactionCommand) -> Transaction:
        """Create an OPEN transaction between two registered accounts and bind its handler.

        Raises HandlerNotFoundError before the transaction is registered when the
        payment method has no handler.
        """
        transaction = Transaction(
            id=cmd.transaction_id,
            amount=cmd.amount,
            sender=self.accounts.get(cmd.sender_account_id),
            recipient=self.accounts.get(cmd.recipient_account_id),
            payment_method=cmd.payment_method,
        )
        select_handler(transaction, self.fees)
        self.transactions.add(transaction)

        logger.info(
            "transaction_opened",
            transaction_id=transaction.id,
            sender=cmd.sender_account_id,
            recipient=cmd.recipient_account_id,
            amount=transaction.amount,
            payment_method=transaction.payment_method.name,
        )
        return transaction

    @track_settlement_duration
    def settle(self, transaction_id: int) -> SettlementResult:
        try:
            transaction = self.transactions.get(transaction_id)
        except TransactionNotFoundError as exc:
            return self._declined(transaction_id, "UNKNOWN", exc, logger.bind(transaction_id=transaction_id))

        method = transaction.payment_method.name
        log = logger.bind(
            transaction_id=transaction.id,
            sender=transaction.sender.id,
            recipient=transaction.recipient.id,
            amount=transaction.amount,
            payment_method=method,
        )

        with self._lock:
            try:
                receipt = make_payment(transaction)
            except DomainError as exc:
                return self._declined(transaction.id, method, exc, log)

        SETTLEMENTS_TOTAL.labels(payment_method=method, status="SETTLED", error_code="").inc()
        SETTLED_AMOUNT_TOTAL.labels(payment_method=method).inc(receipt.effective_amount)
        log.info(
            "settlement_completed",
            receipt_id=receipt.id,
            effective_amount=receipt.effective_amount,
            sender_balance_after=receipt.sender_balance_after,
            recipient_balance_after=receipt.recipient_balance_after,
        )

        return SettlementResult(
            transaction_id=transaction.id,
            status=SettlementStatus.SETTLED,
            receipt=receipt,
            processed_at=receipt.settled_at,
        )

    def _declined(
        self,
        transaction_id: int,
        method: str,
        exc: DomainError,
        log: structlog.stdlib.BoundLogger,
    ) -> SettlementResult:
        log.info("settlement_declined", error_code=exc.code, reason=str(exc))
        SETTLEMENTS_TOTAL.labels(payment_method=method, status="DECLINED", error_code=exc.code).inc()
        return SettlementResult(
            transaction_id=transaction_id,
            status=SettlementStatus.DECLINED,
            error_code=exc.code,
            error_message=str(exc),
            processed_at=datetime.now(UTC),
        )

    def expire(self, transaction_id: int) -> Transaction:
        transaction = self.transactions.get(transaction_id)
        with self._lock:
            transaction.expire()
        logger.info("transaction_expired", transaction_id=transaction.id)
        return transaction

    def get_balance(self, account_id: int) -> int:
        return self.accounts.get(account_id).balance
