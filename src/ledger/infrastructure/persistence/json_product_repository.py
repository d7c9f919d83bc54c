"""JSON-file-backed implementation of ProductRepository.

The file holds a JSON array; a product's position in the array is its id.
Each call reloads the file into an in-memory arena, so callers always get
fresh objects and an uncommitted mutation never leaks into storage.
The repository itself does not lock; processes sharing the file must be
serialized by the caller (see ``bootstrap.catalog_lock``).
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path

from ledger.domain.model.product import Product
from ledger.domain.repository.product_repository import ProductRepository
from ledger.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> int:
        return len(self._load_raw())

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get_by_id(product_id)

    def get_by_name(self, name: str) -> Product | None:
        return self._load().get_by_name(name)

    def list_all(self) -> list[Product]:
        return self._load().list_all()

    def save(self, product: Product) -> None:
        catalog = self._load()
        catalog.save(product)
        self._persist_raw([self._to_raw(p) for p in catalog.list_all()])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "purchased_at": {
                buyer: ts.isoformat() for buyer, ts in product.purchased_at.items()
            },
            "buyers": list(product.buyers),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            purchased_at={
                buyer: datetime.fromisoformat(ts)
                for buyer, ts in raw.get("purchased_at", {}).items()
            },
            buyers=list(raw.get("buyers", [])),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> InMemoryProductRepository:
        return InMemoryProductRepository(
            [self._to_domain(raw) for raw in self._load_raw()]
        )

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        # The catalog file is only ever replaced whole
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._file_path.parent,
            prefix=f".{self._file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp.write(json.dumps(records, indent=2) + "\n")
        os.replace(tmp.name, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
