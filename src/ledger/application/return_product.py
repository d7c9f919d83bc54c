"""Application service: Return Product use case.

Returns are addressed by product name and accepted only while the
buyer's open purchase is younger than the return window.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from ledger.application.dto import ProductDTO
from ledger.application.notifier import Notifier
from ledger.domain.exceptions import NotFoundError
from ledger.domain.model.events import ProductReturned
from ledger.domain.model.value_objects import Quantity
from ledger.domain.repository.product_repository import ProductRepository


class ReturnProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifier: Notifier,
        return_window: timedelta,
        clear_purchase_on_return: bool = True,
    ) -> None:
        self._product_repo = product_repo
        self._notifier = notifier
        self._return_window = return_window
        self._clear_purchase_on_return = clear_purchase_on_return

    def handle(self, caller: str, name: str, quantity: int, now: datetime) -> ProductDTO:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise NotFoundError(f"Product does not exist: '{name}'", key=name)

        qty = Quantity(quantity)
        product.take_back(
            caller,
            qty,
            now,
            self._return_window,
            close_purchase=self._clear_purchase_on_return,
        )
        self._product_repo.save(product)

        self._notifier.publish(
            ProductReturned(
                product_id=product.id,
                product_name=product.name,
                quantity=product.quantity,
                actor=caller,
                occurred_at=now,
                returned=qty.value,
            )
        )
        return ProductDTO.from_product(product)
