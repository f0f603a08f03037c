from __future__ import annotations

from decimal import Decimal, InvalidOperation

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from moneyvalue.domain.errors import CorruptMoneyDataError


class ExactDecimal(TypeDecorator):
    """
    Decimal stored as its plain text form ("12345678.91").
    Numeric goes through float on backends without a native decimal
    (SQLite); text keeps every digit and the scale as written.
    """
    impl = String(128)
    cache_ok = True

    def process_bind_param(self, value: Decimal | None, dialect) -> str | None:
        if value is None:
            return None
        if not isinstance(value, Decimal):
            raise TypeError(f"ExactDecimal expects a Decimal, got {type(value).__name__}")
        return format(value, "f")

    def process_result_value(self, value: str | None, dialect) -> Decimal | None:
        if value is None:
            return None
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise CorruptMoneyDataError(f"stored amount {value!r} is not a decimal") from exc
