from __future__ import annotations

from decimal import Decimal


class MoneyError(ValueError):
    """Base class for caller or data errors raised by the money domain."""


class CurrencyMismatchError(MoneyError):
    def __init__(self, left: str, right: str) -> None:
        super().__init__(f"Amounts must have same currency: {left} != {right}")
        self.left = left
        self.right = right


class InexactAmountError(MoneyError):
    def __init__(self, amount: Decimal, scale: int) -> None:
        super().__init__(f"Amount {amount} cannot be represented with {scale} fraction digits without rounding")
        self.amount = amount
        self.scale = scale


class InvalidPartCountError(MoneyError):
    def __init__(self, parts: int) -> None:
        super().__init__(f"parts must be >= 1, got {parts}")
        self.parts = parts


class UnknownCurrencyError(MoneyError):
    def __init__(self, code: object) -> None:
        super().__init__(f"Unknown currency code: {code!r}")
        self.code = code


class CorruptMoneyDataError(MoneyError):
    """Persisted amount/currency columns do not describe a valid Money."""
