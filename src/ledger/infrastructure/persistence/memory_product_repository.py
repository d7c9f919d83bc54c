"""In-memory implementation of ProductRepository.

Products live in a single list (the arena) whose positions are the
product ids; the name index maps each name to a position in that list.
There is one record per product, so the id view and the name view can
never disagree.
"""

from __future__ import annotations

from ledger.domain.exceptions import ValidationError
from ledger.domain.model.product import Product
from ledger.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = []
        self._index: dict[str, int] = {}
        for p in products or []:
            self.save(p)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return len(self._products)

    def get_by_id(self, product_id: int) -> Product | None:
        if 0 <= product_id < len(self._products):
            return self._products[product_id]
        return None

    def get_by_name(self, name: str) -> Product | None:
        position = self._index.get(name)
        if position is None:
            return None
        return self._products[position]

    def list_all(self) -> list[Product]:
        return list(self._products)

    def save(self, product: Product) -> None:
        owner = self._index.get(product.name)
        if owner is not None and owner != product.id:
            raise ValidationError(f"Product '{product.name}' already exists")

        if product.id == len(self._products):
            self._products.append(product)
            self._index[product.name] = product.id
            return

        current = self.get_by_id(product.id)
        if current is None:
            raise ValidationError(
                f"Product #{product.id} is neither stored nor next in sequence"
            )
        if current.name != product.name:
            raise ValidationError(f"Product #{product.id} cannot be renamed")
        self._products[product.id] = product
