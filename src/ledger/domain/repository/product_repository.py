"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON) live in the
infrastructure layer.

Products are addressable two ways: by their dense integer id (their
position in the catalog) and by their unique name.  Implementations must
keep both lookups pointing at the same record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the id the next new product will receive (catalog size)."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its id, or None if out of range."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion (id) order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert a product whose id is ``next_id()`` or replace an existing one."""
