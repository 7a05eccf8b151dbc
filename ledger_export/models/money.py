"""Money value type."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

DEFAULT_CURRENCY_CODE = "USD"


@dataclass(frozen=True)
class Money:
    """Signed decimal amount in a currency.

    Arithmetic never converts between currencies: the result of an addition
    carries the currency of the left operand.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY_CODE

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY_CODE) -> Money:
        return cls(Decimal(0), currency)

    def add(self, other: Money) -> Money:
        return Money(self.amount + other.amount, self.currency)

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def negate(self) -> Money:
        return Money(-self.amount, self.currency)

    def __neg__(self) -> Money:
        return self.negate()

    def with_currency(self, currency: str) -> Money:
        """Return the same amount bound to another currency."""
        return Money(self.amount, currency)

    def is_negative(self) -> bool:
        return self.amount < 0

    def to_plain_string(self) -> str:
        """Render the amount as plain decimal text, without exponent or grouping."""
        return format(self.amount, "f")

    def __str__(self) -> str:
        return f"{self.to_plain_string()} {self.currency}"
