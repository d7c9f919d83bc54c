"""Notifications emitted by the ledger after each committed mutation.

They form the audit trail of the catalog: one event per successful
add, restock, purchase or return, in commit order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LedgerEvent:
    """Common shape of every notification.

    ``quantity`` is the stock level of the product after the mutation.
    """

    product_id: int
    product_name: str
    quantity: int
    actor: str
    occurred_at: datetime

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def message(self) -> str:
        return f"{self.kind} for '{self.product_name}', {self.quantity} in stock"


@dataclass(frozen=True)
class ProductCreated(LedgerEvent):
    @property
    def message(self) -> str:
        return (
            f"Product #{self.product_id} '{self.product_name}' created "
            f"with {self.quantity} units"
        )


@dataclass(frozen=True)
class ProductRestocked(LedgerEvent):
    added: int = 0

    @property
    def message(self) -> str:
        return (
            f"Restocked {self.added} units of '{self.product_name}', "
            f"now {self.quantity} in stock"
        )


@dataclass(frozen=True)
class ProductBought(LedgerEvent):
    bought: int = 0

    @property
    def message(self) -> str:
        return (
            f"'{self.actor}' bought {self.bought} units of '{self.product_name}', "
            f"{self.quantity} left"
        )


@dataclass(frozen=True)
class ProductReturned(LedgerEvent):
    returned: int = 0

    @property
    def message(self) -> str:
        return (
            f"'{self.actor}' returned {self.returned} units of "
            f"'{self.product_name}', now {self.quantity} in stock"
        )
