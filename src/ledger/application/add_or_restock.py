"""Application service: Add Or Restock Product use case.

The first time a name is added a new product is created with the next
sequential id; later additions under the same name only raise its stock.
"""

from __future__ import annotations

from datetime import datetime

from ledger.application.dto import ProductDTO
from ledger.application.notifier import Notifier
from ledger.domain.model.events import ProductCreated, ProductRestocked
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import ProductName, Quantity
from ledger.domain.repository.product_repository import ProductRepository
from ledger.domain.service.access_policy import AccessPolicy


class AddOrRestockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        policy: AccessPolicy,
        notifier: Notifier,
    ) -> None:
        self._product_repo = product_repo
        self._policy = policy
        self._notifier = notifier

    def handle(self, caller: str, name: str, quantity: int, now: datetime) -> ProductDTO:
        self._policy.require_catalog_manager(caller)
        qty = Quantity(quantity)
        product_name = ProductName(name)

        existing = self._product_repo.get_by_name(product_name.value)
        if existing is not None:
            existing.restock(qty)
            self._product_repo.save(existing)
            self._notifier.publish(
                ProductRestocked(
                    product_id=existing.id,
                    product_name=existing.name,
                    quantity=existing.quantity,
                    actor=caller,
                    occurred_at=now,
                    added=qty.value,
                )
            )
            return ProductDTO.from_product(existing)

        product = Product(
            id=self._product_repo.next_id(),
            name=product_name.value,
            quantity=qty.value,
        )
        self._product_repo.save(product)
        self._notifier.publish(
            ProductCreated(
                product_id=product.id,
                product_name=product.name,
                quantity=product.quantity,
                actor=caller,
                occurred_at=now,
            )
        )
        return ProductDTO.from_product(product)
