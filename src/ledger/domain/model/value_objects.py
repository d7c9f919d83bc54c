"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from ledger.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot stock, buy or return zero or
    negative units.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ProductName:
    """A non-empty product name.

    The empty string is reserved to mean "no such product", so it can
    never name a real one.  Names are kept exactly as given: "Lemon" and
    "Lemon " are two different products.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Product name must be a string, got {type(self.value).__name__}"
            )
        if not self.value:
            raise ValidationError("Product name is required")

    def __str__(self) -> str:
        return self.value
