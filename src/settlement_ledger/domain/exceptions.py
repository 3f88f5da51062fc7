class DomainError(Exception):
    """Base exception for domain errors."""

    code = "DOMAIN_ERROR"


class HandlerNotFoundError(DomainError):
    """Raised when no settlement handler matches a transaction's payment method."""

    code = "HANDLER_NOT_FOUND"

    def __init__(self, transaction_id: int, payment_method: object) -> None:
        self.transaction_id = transaction_id
        self.payment_method = payment_method
        super().__init__(f"No matching handler for transaction {transaction_id}: payment method {payment_method!r}")


class StrategyNotBoundError(DomainError):
    """Raised when a payment is attempted before a handler was selected."""

    code = "STRATEGY_NOT_BOUND"

    def __init__(self, transaction_id: int) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"No strategy bound to transaction {transaction_id}")


class SettlementError(DomainError):
    """Base exception for validation failures raised while settling a transaction."""

    code = "SETTLEMENT_ERROR"

    def __init__(self, transaction_id: int, message: str) -> None:
        self.transaction_id = transaction_id
        super().__init__(message)


class SelfTransactionError(SettlementError):
    """Raised when sender and recipient are the same account."""

    code = "SELF_TRANSACTION"

    def __init__(self, transaction_id: int, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(transaction_id, f"Account {account_id} can't make a transaction to itself")


class AlreadyClosedError(SettlementError):
    """Raised when settling a transaction that is already closed."""

    code = "ALREADY_CLOSED"

    def __init__(self, transaction_id: int) -> None:
        super().__init__(transaction_id, f"Transaction {transaction_id} is already closed")


class ExpiredTransactionError(SettlementError):
    """Raised when settling a transaction that has expired."""

    code = "EXPIRED"

    def __init__(self, transaction_id: int) -> None:
        super().__init__(transaction_id, f"Transaction {transaction_id} expired")


class InsufficientBalanceError(SettlementError):
    """Raised when the sender cannot cover the effective settlement amount."""

    code = "INSUFFICIENT_BALANCE"

    def __init__(self, transaction_id: int, account_id: int, required: int, available: int) -> None:
        self.account_id = account_id
        self.required = required
        self.available = available
        super().__init__(
            transaction_id,
            f"Account {account_id} has insufficient balance: required {required}, available {available}",
        )


class AccountNotFoundError(DomainError):
    """Raised when an account cannot be found."""

    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class TransactionNotFoundError(DomainError):
    """Raised when a transaction cannot be found."""

    code = "TRANSACTION_NOT_FOUND"

    def __init__(self, transaction_id: int) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


class DuplicateAccountError(DomainError):
    """Raised when an account id is already registered."""

    code = "DUPLICATE_ACCOUNT"

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account {account_id} already exists")


class DuplicateTransactionError(DomainError):
    """Raised when a transaction id is already registered."""

    code = "DUPLICATE_TRANSACTION"

    def __init__(self, transaction_id: int) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} already exists")
