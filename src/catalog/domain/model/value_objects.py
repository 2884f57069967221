"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, TypedDict

from catalog.domain.exceptions import ValidationError


class Currency(str, Enum):
    """Currencies a product can be priced in."""

    USD = "USD"
    RUB = "RUB"

    @classmethod
    def parse(cls, value: str | Currency) -> Currency:
        try:
            return cls(value)
        except ValueError as exc:
            allowed = ", ".join(c.value for c in cls)
            raise ValidationError(
                f"Unsupported currency {value!r}, expected one of: {allowed}"
            ) from exc


class MoneyDict(TypedDict):
    """Wire shape of Money inside a JSON document."""

    amount: float | int
    currency: str


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: Currency = Currency.USD

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if not isinstance(self.currency, Currency):
            object.__setattr__(self, "currency", Currency.parse(self.currency))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.value}"

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> MoneyDict:
        # Document stores have no decimal type; the JSON number is the
        # canonical wire form.
        if self.amount == self.amount.to_integral_value():
            amount: float | int = int(self.amount)
        else:
            amount = float(self.amount)
        return {"amount": amount, "currency": self.currency.value}

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> Money:
        try:
            return Money.of(raw["amount"], raw.get("currency", Currency.USD))
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Invalid money value: {raw!r}") from exc

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        amount: str | float | int | Decimal,
        currency: str | Currency = Currency.USD,
    ) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value, Currency.parse(currency))
