"""Shared pytest fixtures for settlement ledger tests."""

import pytest

from settlement_ledger.application.services import (
    OpenAccountCommand,
    SettlementService,
)
from settlement_ledger.domain.handlers import select_handler
from settlement_ledger.domain.models import Account, PaymentMethod, Transaction


@pytest.fixture
def sender_account() -> Account:
    """Create sample sender account with enough balance for the demo payments."""
    return Account(id=1, name="My first account", balance=150)


@pytest.fixture
def recipient_account() -> Account:
    """Create sample recipient account."""
    return Account(id=2, name="Online store", balance=5)


@pytest.fixture
def service() -> SettlementService:
    """Create SettlementService with sender (150) and recipient (5) registered."""
    svc = SettlementService()
    svc.open_account(OpenAccountCommand(account_id=1, name="My first account", initial_balance=150))
    svc.open_account(OpenAccountCommand(account_id=2, name="Online store", initial_balance=5))
    return svc


def create_transaction(
    sender: Account,
    recipient: Account,
    payment_method: PaymentMethod = PaymentMethod.DEBIT,
    amount: int = 55,
    transaction_id: int = 1,
    bind_handler: bool = True,
) -> Transaction:
    """Helper to create an OPEN Transaction, optionally with its handler bound."""
    transaction = Transaction(
        id=transaction_id,
        amount=amount,
        sender=sender,
        recipient=recipient,
        payment_method=payment_method,
    )
    if bind_handler:
        select_handler(transaction)
    return transaction
