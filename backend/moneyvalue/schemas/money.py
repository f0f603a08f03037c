from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from moneyvalue.domain.money import Money


class MoneyPayload(BaseModel):
    """
    JSON shape of a Money: {"amount": "10.00", "currency": "DKK"}.
    The amount stays a decimal string so no float ever touches it.
    """
    model_config = ConfigDict(frozen=True)

    amount: str = Field(
        ...,
        min_length=1,
        pattern=r"^-?\d+(\.\d+)?$",
        examples=["-12.34", "1000.00"],
    )
    currency: str = Field(..., min_length=3, max_length=3, examples=["DKK", "JPY"])

    @classmethod
    def from_domain(cls, money: Money) -> MoneyPayload:
        return cls(amount=str(money.amount), currency=money.currency_code)

    def to_domain(self) -> Money:
        # exact: a payload carrying more digits than the currency allows is rejected
        return Money.of(self.amount, self.currency)
