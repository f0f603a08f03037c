import pytest

from moneyvalue.domain.currency import FALLBACK_SCALE, Currency
from moneyvalue.domain.errors import UnknownCurrencyError
from moneyvalue.domain.money import Money


@pytest.mark.parametrize(
    "currency, digits",
    [
        (Currency.DKK, 2),
        (Currency.EUR, 2),
        (Currency.JPY, 0),
        (Currency.KWD, 3),
        (Currency.CLF, 4),
        (Currency.XDR, None),
        (Currency.XAU, None),
    ],
)
def test_fraction_digits(currency, digits):
    assert currency.fraction_digits == digits


def test_scale_falls_back_to_six_without_fraction_digits():
    assert FALLBACK_SCALE == 6
    assert Currency.XDR.scale == 6
    assert Currency.JPY.scale == 0
    assert Currency.DKK.scale == 2


def test_of_normalizes_code():
    assert Currency.of(" dkk ") is Currency.DKK
    assert Currency("nok") is Currency.NOK
    assert Currency.of(Currency.JPY) is Currency.JPY


def test_of_unknown_code():
    with pytest.raises(UnknownCurrencyError):
        Currency.of("ABC")


def test_of_rejects_non_string():
    with pytest.raises(TypeError):
        Currency.of(208)


def test_code_and_str():
    assert Currency.DKK.code == "DKK"
    assert str(Currency.DKK) == "DKK"


@pytest.mark.parametrize(
    "code, digits",
    [
        ("MYR", 2),
        ("PHP", 2),
        ("EGP", 2),
        ("NGN", 2),
        ("KES", 2),
        ("RUB", 2),
        ("UYI", 0),
        ("XCD", 2),
        ("ZWG", 2),
        ("XPT", None),
    ],
)
def test_full_iso_table_lookup(code, digits):
    currency = Currency.of(code)
    assert currency.code == code
    assert currency.fraction_digits == digits


def test_table_size():
    assert len(Currency) == 182
    assert all(len(c.code) == 3 and c.code.isupper() for c in Currency)


def test_money_in_currency_outside_the_usual_few():
    assert str(Money.of("1.00", "MYR")) == "1.00 MYR"
