"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals (mutable buyer maps, the Product aggregate
itself) to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ledger.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    quantity: int
    open_purchases: int
    total_purchases: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            quantity=product.quantity,
            open_purchases=len(product.purchased_at),
            total_purchases=len(product.buyers),
        )
