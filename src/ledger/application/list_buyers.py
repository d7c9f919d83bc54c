"""Application service: List Buyers By Product use case (query)."""

from __future__ import annotations

from ledger.domain.exceptions import NotFoundError
from ledger.domain.repository.product_repository import ProductRepository


class ListBuyersHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> list[str]:
        """Every purchase of the product in order, repeat buyers included."""
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise NotFoundError(f"Product does not exist: '{name}'", key=name)
        return list(product.buyers)
