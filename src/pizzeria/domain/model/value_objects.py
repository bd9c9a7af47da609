"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from pizzeria.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "UAH"


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so fractional option prices add up exactly.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __add__(self, other: Money) -> Money:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )
        return Money(self.amount + other.amount, self.currency)

    def __str__(self) -> str:
        return f"{self.amount}{self.currency}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


class OptionKind(Enum):
    SIZE = "SIZE"
    TYPE = "TYPE"
    EXTRA = "EXTRA"


@dataclass(frozen=True)
class Option:
    """A named, priced choice belonging to exactly one catalog.

    The ``kind`` takes part in equality, so a size and an extra can never
    be mistaken for one another even if they share a name and price.
    """

    kind: OptionKind
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.kind, OptionKind):
            raise ValidationError(
                f"Option kind must be an OptionKind, got {type(self.kind).__name__}"
            )
        if not isinstance(self.name, str):
            raise ValidationError(
                f"Option name must be a str, got {type(self.name).__name__}"
            )
        if not self.name.strip():
            raise ValidationError("Option name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Option price must be Money, got {type(self.price).__name__}"
            )

    def __str__(self) -> str:
        return self.name
