"""
Two-column mapping of Money (amount, currency code).

Repositories store a Money as a decimal column plus a currency code column
and go through `decompose` / `compose` so the null convention and the
"never re-round a stored value" rule live in one place.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from moneyvalue.domain.currency import Currency
from moneyvalue.domain.errors import CorruptMoneyDataError, UnknownCurrencyError
from moneyvalue.domain.money import Money


@dataclass(frozen=True)
class MoneyColumns:
    amount: Decimal | None
    currency: str | None


def decompose(money: Money | None) -> MoneyColumns:
    if money is None:
        return MoneyColumns(amount=None, currency=None)
    return MoneyColumns(amount=money.amount, currency=money.currency_code)


def compose(amount: Decimal | None, currency: str | None) -> Money | None:
    if amount is None and currency is None:
        return None
    if amount is None or currency is None:
        raise CorruptMoneyDataError(
            f"amount and currency must both be null or both be set (amount={amount!r}, currency={currency!r})"
        )

    try:
        cur = Currency.of(currency)
    except UnknownCurrencyError as exc:
        raise CorruptMoneyDataError(f"stored currency {currency!r} is unknown") from exc

    # trailing zeros beyond the currency scale are fine, significant digits are not
    try:
        return Money.of(amount, cur)
    except ValueError as exc:
        raise CorruptMoneyDataError(
            f"stored amount {amount} does not fit the {cur.code} scale of {cur.scale}: {exc}"
        ) from exc

