from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import String, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Mapped, mapped_column, sessionmaker, Session

from moneyvalue.db import init_db, new_session
from moneyvalue.db_base import Base
from moneyvalue.domain.account import Account
from moneyvalue.domain.money import Money
from moneyvalue.repositories.account_repository import AccountRepository
from moneyvalue.repositories.money_columns import compose, decompose
from moneyvalue.repositories.sql_types import ExactDecimal

logger = logging.getLogger(__name__)


class AccountRow(Base):
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    balance_amount: Mapped[Decimal] = mapped_column(ExactDecimal, nullable=False)
    balance_currency: Mapped[str] = mapped_column(String(3), nullable=False)
    # both null or both set
    overdraft_amount: Mapped[Decimal | None] = mapped_column(ExactDecimal, nullable=True)
    overdraft_currency: Mapped[str | None] = mapped_column(String(3), nullable=True)


class SqlAccountRepository(AccountRepository):
    """
    SQL implementation aligned with InMemoryAccountRepository behavior:
    - add(): raises ValueError if id exists
    - get_account(): raises KeyError if unknown
    - delete(): returns False if unknown/invalid id
    Money fields go through money_columns, a corrupt pair raises CorruptMoneyDataError.
    """

    def __init__(self, *, engine: Engine | None = None) -> None:
        init_db(engine)
        # None: the process-wide session factory from moneyvalue.db
        self._session_factory: sessionmaker[Session] | None = None
        if engine is not None:
            self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def _session(self) -> Session:
        if self._session_factory is None:
            return new_session()
        return self._session_factory()

    def add(self, account: Account) -> None:
        if not isinstance(account, Account):
            raise TypeError("account must be an Account")

        with self._session() as s:
            if s.get(AccountRow, account.id) is not None:
                raise ValueError(f"account id '{account.id}' already exists")
            s.add(self._to_row(account))
            s.commit()
        logger.debug("Added account %s with balance %s", account.id, account.balance)

    def get_account(self, account_id: str) -> Account:
        target = _require_id(account_id)
        with self._session() as s:
            row = s.get(AccountRow, target)
            if row is None:
                raise KeyError(f"unknown account_id '{target}'")
            return self._to_domain(row)

    def list_accounts(self) -> list[Account]:
        with self._session() as s:
            rows = s.execute(select(AccountRow).order_by(AccountRow.id.asc())).scalars().all()
            return [self._to_domain(r) for r in rows]

    def update_balance(self, *, account_id: str, balance: Money) -> Account:
        target = _require_id(account_id)
        with self._session() as s:
            row = s.get(AccountRow, target)
            if row is None:
                raise KeyError(f"unknown account_id '{target}'")

            updated = self._to_domain(row).with_balance(balance)
            cols = decompose(updated.balance)
            row.balance_amount = cols.amount
            row.balance_currency = cols.currency
            s.commit()
        logger.debug("Updated balance of account %s to %s", target, balance)
        return updated

    def delete(self, *, account_id: str) -> bool:
        if not isinstance(account_id, str) or not account_id.strip():
            return False
        target = account_id.strip()

        with self._session() as s:
            row = s.get(AccountRow, target)
            if row is None:
                return False
            s.delete(row)
            s.commit()
        logger.debug("Deleted account %s", target)
        return True

    @staticmethod
    def _to_row(account: Account) -> AccountRow:
        balance = decompose(account.balance)
        overdraft = decompose(account.overdraft_limit)
        return AccountRow(
            id=account.id,
            name=account.name,
            balance_amount=balance.amount,
            balance_currency=balance.currency,
            overdraft_amount=overdraft.amount,
            overdraft_currency=overdraft.currency,
        )

    @staticmethod
    def _to_domain(row: AccountRow) -> Account:
        balance = compose(row.balance_amount, row.balance_currency)
        overdraft = compose(row.overdraft_amount, row.overdraft_currency)
        return Account(
            id=row.id,
            name=row.name,
            balance=balance,
            overdraft_limit=overdraft,
        )


def _require_id(account_id: str) -> str:
    if not isinstance(account_id, str) or not account_id.strip():
        raise ValueError("account_id cannot be empty")
    return account_id.strip()
