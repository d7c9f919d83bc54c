"""Unit tests for ledger notification messages."""

from ledger.domain.model.events import (
    LedgerEvent,
    ProductBought,
    ProductCreated,
    ProductRestocked,
    ProductReturned,
)
from tests.fakes import T0


def _fields(**overrides):
    base = dict(product_id=0, product_name="Lemon", quantity=5, actor="owner", occurred_at=T0)
    base.update(overrides)
    return base


class TestEventMessages:

    def test_created(self):
        event = ProductCreated(**_fields())
        assert event.kind == "ProductCreated"
        assert event.message == "Product #0 'Lemon' created with 5 units"

    def test_restocked(self):
        event = ProductRestocked(**_fields(quantity=8), added=3)
        assert event.message == "Restocked 3 units of 'Lemon', now 8 in stock"

    def test_bought(self):
        event = ProductBought(**_fields(quantity=3, actor="alice"), bought=2)
        assert event.message == "'alice' bought 2 units of 'Lemon', 3 left"

    def test_returned(self):
        event = ProductReturned(**_fields(actor="alice"), returned=2)
        assert event.message == "'alice' returned 2 units of 'Lemon', now 5 in stock"

    def test_base_event_has_generic_message(self):
        event = LedgerEvent(**_fields())
        assert event.kind == "LedgerEvent"
        assert event.message == "LedgerEvent for 'Lemon', 5 in stock"
