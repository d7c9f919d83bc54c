"""Application service: List Available Products use case (query)."""

from __future__ import annotations

from ledger.domain.repository.product_repository import ProductRepository


class ListAvailableHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[str]:
        """Names of in-stock products, in catalog order."""
        return [p.name for p in self._product_repo.list_all() if p.is_available]
