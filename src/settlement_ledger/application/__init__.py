"""Application layer - services and use cases."""

from settlement_ledger.application.services import (
    OpenAccountCommand,
    OpenTransactionCommand,
    SettlementResult,
    SettlementService,
    SettlementStatus,
)


__all__ = [
    "OpenAccountCommand",
    "OpenTransactionCommand",
    "SettlementResult",
    "SettlementService",
    "SettlementStatus",
]
