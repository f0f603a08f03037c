from __future__ import annotations

from typing import Protocol

from moneyvalue.domain.account import Account
from moneyvalue.domain.money import Money


class AccountRepository(Protocol):
    def add(self, account: Account) -> None: ...
    def get_account(self, account_id: str) -> Account: ...
    def list_accounts(self) -> list[Account]: ...
    def update_balance(self, *, account_id: str, balance: Money) -> Account: ...
    def delete(self, *, account_id: str) -> bool: ...
