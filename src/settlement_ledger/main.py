import structlog

from settlement_ledger.application.services import (
    OpenAccountCommand,
    OpenTransactionCommand,
    SettlementResult,
    SettlementService,
    SettlementStatus,
)
from settlement_ledger.config import Settings, settings
from settlement_ledger.domain.models import PaymentMethod
from settlement_ledger.logging import configure_logging


logger = structlog.get_logger()


def run_demo(service: SettlementService) -> SettlementResult:
    """Settle a 55-unit cash payment from a personal account to an online store."""
    service.open_account(OpenAccountCommand(account_id=1, name="My first account", initial_balance=150))
    service.open_account(OpenAccountCommand(account_id=2, name="Online store", initial_balance=5))
    service.open_transaction(
        OpenTransactionCommand(
            transaction_id=1,
            amount=55,
            sender_account_id=1,
            recipient_account_id=2,
            payment_method=PaymentMethod.CASH,
        )
    )
    return service.settle(1)


def main(config: Settings = settings) -> int:
    configure_logging(
        level=config.log_level,
        log_format=config.log_format,
    )

    service = SettlementService(fees=config.fee_schedule())
    result = run_demo(service)

    if result.status is SettlementStatus.DECLINED:
        logger.error("demo_failed", error_code=result.error_code, error_message=result.error_message)
        return 1

    logger.info(
        "demo_finished",
        balances={account.name: account.balance for account in service.accounts.list()},
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
