from settlement_ledger.domain.exceptions import AccountNotFoundError, DuplicateAccountError
from settlement_ledger.domain.models import Account


class AccountRepository:
    """In-process account table keyed by account id."""

    def __init__(self) -> None:
        self._accounts: dict[int, Account] = {}

    def get(self, account_id: int) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def add(self, account: Account) -> None:
        if account.id in self._accounts:
            raise DuplicateAccountError(account.id)
        self._accounts[account.id] = account

    def list(self) -> list[Account]:
        return list(self._accounts.values())

    def __contains__(self, account_id: int) -> bool:
        return account_id in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
