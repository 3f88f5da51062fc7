from settlement_ledger.domain.exceptions import DuplicateTransactionError, TransactionNotFoundError
from settlement_ledger.domain.models import Transaction, TransactionState


class TransactionRepository:
    """In-process transaction table keyed by transaction id."""

    def __init__(self) -> None:
        self._transactions: dict[int, Transaction] = {}

    def get(self, transaction_id: int) -> Transaction:
        transaction = self._transactions.get(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction

    def add(self, transaction: Transaction) -> None:
        if transaction.id in self._transactions:
            raise DuplicateTransactionError(transaction.id)
        self._transactions[transaction.id] = transaction

    def list(self, state: TransactionState | None = None) -> list[Transaction]:
        if state is None:
            return list(self._transactions.values())
        return [t for t in self._transactions.values() if t.state is state]

    def __contains__(self, transaction_id: int) -> bool:
        return transaction_id in self._transactions

    def __len__(self) -> int:
        return len(self._transactions)
