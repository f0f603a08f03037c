from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Iterable

from moneyvalue.domain.currency import Currency
from moneyvalue.domain.errors import CurrencyMismatchError, InexactAmountError, InvalidPartCountError
from moneyvalue.domain.rounding import RoundingPolicy

# Unbounded precision: add/subtract/multiply/quantize never round with it.
# Never divide with it (a repeating quotient would exhaust memory).
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[InvalidOperation, DivisionByZero, Overflow])

# Same as IEEE 754 decimal128
_SPLIT_PRECISION = 34

# Largest accepted amount is just below 10**MAX_INTEGER_DIGITS.
MAX_INTEGER_DIGITS = 100


def _to_decimal(value: Decimal | int | str) -> Decimal:
    """
    Strict conversion to Decimal.
    Accepts Decimal, int and numeric strings; floats are rejected because
    their binary representation is not an exact amount.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Money amount must be a Decimal, int or str, got {type(value).__name__}")

    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, int):
        dec = Decimal(value)
    elif isinstance(value, str):
        raw = value.strip()
        if raw == "":
            raise ValueError("Amount cannot be empty")
        try:
            dec = Decimal(raw)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal amount: {value!r}") from exc
    else:
        raise TypeError(f"Money amount must be a Decimal, int or str, got {type(value).__name__}")

    if not dec.is_finite():
        raise ValueError(f"Money amount must be finite, got {dec}")
    # checked before any quantize: a huge exponent would expand into that many digits
    if dec and dec.adjusted() >= MAX_INTEGER_DIGITS:
        raise ValueError(f"Money amount must have at most {MAX_INTEGER_DIGITS} integer digits, got {dec}")
    return dec


def _minimal_step(scale: int) -> Decimal:
    return Decimal(1).scaleb(-scale)


def _rescale(amount: Decimal, scale: int, rounding: RoundingPolicy) -> Decimal:
    rescaled = amount.quantize(_minimal_step(scale), rounding=rounding.decimal_rounding, context=_EXACT)
    if rounding.is_exact and rescaled != amount:
        raise InexactAmountError(amount, scale)
    return rescaled


@dataclass(frozen=True)
class Money:
    """
    Immutable amount of money in a single currency.

    The amount always carries exactly `currency.scale` fraction digits.
    Building a Money from a value with more precision fails unless a
    rounding policy is given explicitly (see `Money.of`).

    Equality is numeric (1.5 DKK == 1.50 DKK) and scoped to the currency.
    Arithmetic and ordering between different currencies raise
    CurrencyMismatchError; nothing is ever converted.
    """
    amount: Decimal
    currency: Currency

    @classmethod
    def of(
        cls,
        amount: Decimal | int | str,
        currency: Currency | str,
        rounding: RoundingPolicy = RoundingPolicy.REQUIRE_EXACT,
    ) -> Money:
        cur = Currency.of(currency)
        dec = _rescale(_to_decimal(amount), cur.scale, rounding)
        return cls(amount=dec, currency=cur)

    @classmethod
    def zero(cls, currency: Currency | str) -> Money:
        return cls.of(0, currency)

    @classmethod
    def sum(cls, monies: Iterable[Money] | None) -> Money | None:
        """
        Sum of a collection of Money sharing one currency.

        Returns None for None or an empty collection: there is no zero
        without a currency.
        """
        if monies is None:
            return None
        total: Money | None = None
        for money in monies:
            total = money if total is None else total.add(money)
        return total

    def __post_init__(self) -> None:
        cur = Currency.of(self.currency)
        dec = _rescale(_to_decimal(self.amount), cur.scale, RoundingPolicy.REQUIRE_EXACT)
        object.__setattr__(self, "currency", cur)
        object.__setattr__(self, "amount", dec)

    @property
    def currency_code(self) -> str:
        return self.currency.code

    def _check_same_currency(self, other: Money) -> None:
        if other.currency is not self.currency:
            raise CurrencyMismatchError(self.currency.code, other.currency.code)

    def _with_amount(self, amount: Decimal) -> Money:
        return Money(amount=amount, currency=self.currency)

    def add(self, augend: Money) -> Money:
        self._check_same_currency(augend)
        return self._with_amount(_EXACT.add(self.amount, augend.amount))

    def subtract(self, subtrahend: Money) -> Money:
        self._check_same_currency(subtrahend)
        return self._with_amount(_EXACT.subtract(self.amount, subtrahend.amount))

    def negate(self) -> Money:
        # 0 - x rather than -x: no negative zero
        return self._with_amount(_EXACT.subtract(Decimal(0), self.amount))

    def abs(self) -> Money:
        if self.amount >= 0:
            return self
        return self.negate()

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        self._check_same_currency(other)
        return int(self.amount.compare(other.amount))

    def divide_evenly_into_parts(self, parts: int) -> list[Money]:
        """
        Split into `parts` amounts that add up exactly to self.

        Parts differ by at most one minimal step of the currency and the
        larger parts are spread over the list rather than grouped, e.g.
        20.00 DKK in 6 parts gives 3.33, 3.34, 3.33, 3.33, 3.34, 3.33.

        Each part is the difference between two consecutive rounded running
        totals amount * k / parts, so the rounding never accumulates.
        """
        if isinstance(parts, bool) or not isinstance(parts, int):
            raise TypeError(f"parts must be an int, got {type(parts).__name__}")
        if parts < 1:
            raise InvalidPartCountError(parts)

        scale = self.currency.scale
        step = _minimal_step(scale)
        divisor = Decimal(parts)

        result: list[Money] = []
        previous_total = Decimal(0).quantize(step)
        for k in range(1, parts + 1):
            numerator = _EXACT.multiply(self.amount, Decimal(k))
            # enough digits to reach the currency scale, plus guard digits
            prec = max(_SPLIT_PRECISION, numerator.adjusted() + scale + 3)
            running_total = Context(prec=prec, rounding=ROUND_HALF_EVEN).divide(numerator, divisor)
            running_total = running_total.quantize(step, rounding=ROUND_HALF_EVEN, context=_EXACT)
            result.append(self._with_amount(_EXACT.subtract(running_total, previous_total)))
            previous_total = running_total
        return result

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Money:
        return self.negate()

    def __abs__(self) -> Money:
        return self.abs()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.code}"
