from __future__ import annotations

from dataclasses import dataclass, field

from moneyvalue.domain.account import Account
from moneyvalue.domain.money import Money


@dataclass
class InMemoryAccountRepository:
    """
    In-memory repo.
    - Deterministic (list sorted by id)
    - Same errors as SqlAccountRepository
    """
    _items: dict[str, Account] = field(default_factory=dict)

    def add(self, account: Account) -> None:
        if not isinstance(account, Account):
            raise TypeError("account must be an Account")
        if account.id in self._items:
            raise ValueError(f"account id '{account.id}' already exists")
        self._items[account.id] = account

    def get_account(self, account_id: str) -> Account:
        target = _require_id(account_id)
        try:
            return self._items[target]
        except KeyError:
            raise KeyError(f"unknown account_id '{target}'") from None

    def list_accounts(self) -> list[Account]:
        return [self._items[k] for k in sorted(self._items)]

    def update_balance(self, *, account_id: str, balance: Money) -> Account:
        updated = self.get_account(account_id).with_balance(balance)
        self._items[updated.id] = updated
        return updated

    def delete(self, *, account_id: str) -> bool:
        if not isinstance(account_id, str) or not account_id.strip():
            return False
        return self._items.pop(account_id.strip(), None) is not None


def _require_id(account_id: str) -> str:
    if not isinstance(account_id, str) or not account_id.strip():
        raise ValueError("account_id cannot be empty")
    return account_id.strip()
