"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from filelock import FileLock

from ledger.application.ledger import InventoryLedger
from ledger.application.notifier import Notifier
from ledger.domain.repository.product_repository import ProductRepository
from ledger.domain.service.access_policy import OwnerPolicy
from ledger.infrastructure.config import LedgerSettings
from ledger.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ledger.infrastructure.structlog_notifier import StructlogNotifier


def settings() -> LedgerSettings:
    return LedgerSettings()


def product_repository(config: LedgerSettings) -> JsonProductRepository:
    return JsonProductRepository(config.catalog_file)


def catalog_lock(config: LedgerSettings) -> FileLock:
    """Inter-process lock guarding the JSON catalog file."""
    config.data_dir.mkdir(parents=True, exist_ok=True)
    return FileLock(config.catalog_file.with_suffix(".lock"))


def inventory_ledger(
    config: LedgerSettings,
    product_repo: ProductRepository | None = None,
    notifier: Notifier | None = None,
) -> InventoryLedger:
    return InventoryLedger(
        product_repo=product_repo or product_repository(config),
        policy=OwnerPolicy(config.owner),
        notifier=notifier or StructlogNotifier(),
        return_window=config.return_window,
        clear_purchase_on_return=config.clear_purchase_on_return,
        storage_lock=catalog_lock(config) if product_repo is None else None,
    )
