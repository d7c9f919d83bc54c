"""Application service: Show Product use case (query)."""

from __future__ import annotations

from ledger.application.dto import ProductDTO
from ledger.domain.exceptions import NotFoundError
from ledger.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> ProductDTO:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise NotFoundError(f"Product does not exist: '{name}'", key=name)
        return ProductDTO.from_product(product)

    def list_all(self) -> list[ProductDTO]:
        """Whole catalog, out-of-stock products included."""
        return [ProductDTO.from_product(p) for p in self._product_repo.list_all()]
