"""Repository implementations."""

from settlement_ledger.infrastructure.repositories.account import AccountRepository
from settlement_ledger.infrastructure.repositories.transaction import TransactionRepository


__all__ = [
    "AccountRepository",
    "TransactionRepository",
]
