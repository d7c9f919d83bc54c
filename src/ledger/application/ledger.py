"""InventoryLedger: the single entry point to the catalog.

Every operation runs under one re-entrant lock, so mutations are applied
in a single total order and queries never see a product half-way through
an update (stock changed but buyer not yet recorded, say).  When the
catalog is shared between processes, a storage lock (a file lock for the
JSON catalog) is held as well.  Caller identity and the current time are
explicit arguments; the ledger never reads a clock or a session on its
own.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager, nullcontext
from datetime import datetime, timedelta

import structlog

from ledger.application.add_or_restock import AddOrRestockHandler
from ledger.application.buy_product import BuyProductHandler
from ledger.application.dto import ProductDTO
from ledger.application.list_available import ListAvailableHandler
from ledger.application.list_buyers import ListBuyersHandler
from ledger.application.notifier import Notifier
from ledger.application.return_product import ReturnProductHandler
from ledger.application.show_product import ShowProductHandler
from ledger.domain.exceptions import DomainException
from ledger.domain.repository.product_repository import ProductRepository
from ledger.domain.service.access_policy import AccessPolicy

logger = structlog.get_logger(__name__)


class InventoryLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        policy: AccessPolicy,
        notifier: Notifier,
        return_window: timedelta,
        clear_purchase_on_return: bool = True,
        storage_lock: AbstractContextManager | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._storage_lock = storage_lock if storage_lock is not None else nullcontext()
        self._add_or_restock = AddOrRestockHandler(product_repo, policy, notifier)
        self._buy = BuyProductHandler(product_repo, notifier)
        self._return = ReturnProductHandler(
            product_repo,
            notifier,
            return_window=return_window,
            clear_purchase_on_return=clear_purchase_on_return,
        )
        self._list_available = ListAvailableHandler(product_repo)
        self._list_buyers = ListBuyersHandler(product_repo)
        self._show_product = ShowProductHandler(product_repo)

    @contextmanager
    def _serialized(self) -> Iterator[None]:
        with self._lock, self._storage_lock:
            yield

    # --- Commands -------------------------------------------------------------

    def add_or_restock(
        self, caller: str, name: str, quantity: int, now: datetime
    ) -> ProductDTO:
        with self._serialized(), _log_rejection("add_or_restock", caller=caller, name=name):
            return self._add_or_restock.handle(caller, name, quantity, now)

    def buy(
        self, caller: str, product_id: int, quantity: int, now: datetime
    ) -> ProductDTO:
        with self._serialized(), _log_rejection("buy", caller=caller, product_id=product_id):
            return self._buy.handle(caller, product_id, quantity, now)

    def return_product(
        self, caller: str, name: str, quantity: int, now: datetime
    ) -> ProductDTO:
        with self._serialized(), _log_rejection("return_product", caller=caller, name=name):
            return self._return.handle(caller, name, quantity, now)

    # --- Queries --------------------------------------------------------------

    def list_available(self) -> list[str]:
        with self._serialized():
            return self._list_available.handle()

    def list_buyers(self, name: str) -> list[str]:
        with self._serialized():
            return self._list_buyers.handle(name)

    def show_product(self, name: str) -> ProductDTO:
        with self._serialized():
            return self._show_product.handle(name)

    def list_products(self) -> list[ProductDTO]:
        with self._serialized():
            return self._show_product.list_all()


@contextmanager
def _log_rejection(operation: str, **context: object) -> Iterator[None]:
    """Log a DomainException raised inside the block, then re-raise it."""
    try:
        yield
    except DomainException as exc:
        logger.warning(
            "ledger operation rejected",
            operation=operation,
            error=type(exc).__name__,
            reason=str(exc),
            **context,
        )
        raise
