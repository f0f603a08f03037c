from __future__ import annotations

from dataclasses import dataclass

from moneyvalue.domain.money import Money


@dataclass(frozen=True, slots=True)
class Account:
    """
    Domain object holding Money fields, persisted by the account repositories.
    - balance: always set
    - overdraft_limit: optional, same currency as balance
    """
    id: str
    name: str
    balance: Money
    overdraft_limit: Money | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("account.id must be non-empty")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("account.name must be non-empty")
        if not isinstance(self.balance, Money):
            raise ValueError("account.balance must be a Money")
        if self.overdraft_limit is not None:
            if not isinstance(self.overdraft_limit, Money):
                raise ValueError("account.overdraft_limit must be a Money or None")
            if self.overdraft_limit.currency is not self.balance.currency:
                raise ValueError("overdraft_limit currency must match balance currency")

    def with_balance(self, balance: Money) -> Account:
        if self.overdraft_limit is not None and balance.currency is not self.overdraft_limit.currency:
            raise ValueError("balance currency must match overdraft_limit currency")
        return Account(id=self.id, name=self.name, balance=balance, overdraft_limit=self.overdraft_limit)
