import dataclasses
from decimal import Decimal

import pytest

from moneyvalue.domain.currency import Currency
from moneyvalue.domain.errors import CorruptMoneyDataError
from moneyvalue.domain.money import Money
from moneyvalue.repositories.money_columns import MoneyColumns, compose, decompose


def test_decompose_money():
    cols = decompose(Money.of("10.000001", Currency.XDR))
    assert cols == MoneyColumns(amount=Decimal("10.000001"), currency="XDR")
    assert cols.amount.as_tuple().exponent == -6


def test_decompose_none_gives_two_nulls():
    assert decompose(None) == MoneyColumns(amount=None, currency=None)


def test_compose_both_null_is_none():
    assert compose(None, None) is None


def test_compose_builds_money():
    m = compose(Decimal("3.34"), "DKK")
    assert m == Money.of("3.34", Currency.DKK)
    assert m.currency is Currency.DKK


def test_compose_accepts_trailing_zero_padding():
    # rows written by other tools may carry a wider scale than the currency
    m = compose(Decimal("3.3400000000"), "DKK")
    assert str(m) == "3.34 DKK"


@pytest.mark.parametrize("amount, currency", [(Decimal("1.00"), None), (None, "DKK")])
def test_compose_half_null_is_corrupt(amount, currency):
    with pytest.raises(CorruptMoneyDataError):
        compose(amount, currency)


def test_compose_unknown_currency_is_corrupt():
    with pytest.raises(CorruptMoneyDataError):
        compose(Decimal("1.00"), "ZZZ")


def test_compose_does_not_reround_stored_amount():
    with pytest.raises(CorruptMoneyDataError):
        compose(Decimal("3.335"), "DKK")


def test_compose_decompose_keeps_value():
    m = Money.of("-42.10", Currency.EUR)
    cols = decompose(m)
    assert compose(cols.amount, cols.currency) == m


def test_composed_money_cannot_be_modified():
    m = compose(Decimal("5"), "JPY")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.amount = Decimal("6")
    assert m.amount == Decimal("5")


def test_compose_rejects_oversized_amount_as_corrupt():
    with pytest.raises(CorruptMoneyDataError):
        compose(Decimal("1E+200"), "DKK")
