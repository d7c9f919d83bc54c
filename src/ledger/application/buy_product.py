"""Application service: Buy Product use case.

Products are bought by id.  A buyer may hold only one open purchase per
product; the aggregate enforces that and the stock check.
"""

from __future__ import annotations

from datetime import datetime

from ledger.application.dto import ProductDTO
from ledger.application.notifier import Notifier
from ledger.domain.exceptions import NotFoundError
from ledger.domain.model.events import ProductBought
from ledger.domain.model.value_objects import Quantity
from ledger.domain.repository.product_repository import ProductRepository


class BuyProductHandler:

    def __init__(self, product_repo: ProductRepository, notifier: Notifier) -> None:
        self._product_repo = product_repo
        self._notifier = notifier

    def handle(self, caller: str, product_id: int, quantity: int, now: datetime) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product #{product_id} not found", key=product_id)

        qty = Quantity(quantity)
        product.sell(caller, qty, now)
        self._product_repo.save(product)

        self._notifier.publish(
            ProductBought(
                product_id=product.id,
                product_name=product.name,
                quantity=product.quantity,
                actor=caller,
                occurred_at=now,
                bought=qty.value,
            )
        )
        return ProductDTO.from_product(product)
