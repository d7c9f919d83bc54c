"""Product aggregate: stock level plus purchase bookkeeping.

A product is created once, the first time its name is added, and is never
removed or renamed.  Every mutation validates first and only then changes
state, so a rejected call leaves the product untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ledger.domain.exceptions import (
    DuplicateOpenPurchaseError,
    InsufficientInventoryError,
    NoOpenPurchaseError,
    ReturnWindowExpiredError,
    ValidationError,
)
from ledger.domain.model.value_objects import Quantity


@dataclass
class Product:
    """Aggregate root for a catalog entry.

    Invariants:
    - ``quantity`` is never negative
    - a buyer appears in ``purchased_at`` at most once (one open purchase)
    - ``buyers`` is append-only and may repeat a buyer
    """

    id: int
    name: str
    quantity: int = 0
    purchased_at: dict[str, datetime] = field(default_factory=dict)
    buyers: list[str] = field(default_factory=list)

    @property
    def is_available(self) -> bool:
        return self.quantity > 0

    def has_open_purchase(self, buyer: str) -> bool:
        return buyer in self.purchased_at

    def restock(self, quantity: Quantity) -> None:
        """Add units to the existing stock."""
        self.quantity += quantity.value

    def sell(self, buyer: str, quantity: Quantity, now: datetime) -> None:
        """Hand *quantity* units to *buyer* and open a purchase at *now*.

        Raises DuplicateOpenPurchaseError if the buyer has not returned a
        previous purchase, and InsufficientInventoryError if stock is short.
        """
        if not buyer:
            raise ValidationError("Buyer identity is required")
        if self.has_open_purchase(buyer):
            raise DuplicateOpenPurchaseError(self.name, buyer)
        if quantity.value > self.quantity:
            raise InsufficientInventoryError(
                product_name=self.name,
                product_id=self.id,
                requested=quantity.value,
                available=self.quantity,
            )
        self.quantity -= quantity.value
        self.buyers.append(buyer)
        self.purchased_at[buyer] = now

    def take_back(
        self,
        buyer: str,
        quantity: Quantity,
        now: datetime,
        window: timedelta,
        close_purchase: bool = True,
    ) -> None:
        """Accept a return of *quantity* units from *buyer*.

        The amount is trusted as given; it is not checked against what
        was originally bought.  When ``close_purchase`` is false the open
        purchase stays recorded and the buyer cannot buy this product
        again.
        """
        purchased_at = self.purchased_at.get(buyer)
        if purchased_at is None:
            raise NoOpenPurchaseError(self.name, buyer)
        if now - purchased_at > window:
            raise ReturnWindowExpiredError(self.name, buyer, purchased_at, window)
        self.quantity += quantity.value
        if close_purchase:
            del self.purchased_at[buyer]
