"""Unit tests for the Product aggregate."""

from datetime import timedelta

import pytest

from ledger.domain.exceptions import (
    DuplicateOpenPurchaseError,
    InsufficientInventoryError,
    NoOpenPurchaseError,
    ReturnWindowExpiredError,
)
from ledger.domain.model.product import Product
from ledger.domain.model.value_objects import Quantity
from tests.fakes import T0, WINDOW


class TestProductRestock:

    def test_restock_adds_to_quantity(self):
        p = Product(id=0, name="Lemon", quantity=5)
        p.restock(Quantity(3))
        assert p.quantity == 8

    def test_availability_follows_quantity(self):
        assert Product(id=0, name="Lemon", quantity=1).is_available
        assert not Product(id=0, name="Lemon", quantity=0).is_available


class TestProductSell:

    def test_sell_updates_stock_history_and_timestamp(self):
        p = Product(id=0, name="Lemon", quantity=5)
        p.sell("alice", Quantity(2), T0)

        assert p.quantity == 3
        assert p.buyers == ["alice"]
        assert p.purchased_at == {"alice": T0}
        assert p.has_open_purchase("alice")

    def test_sell_entire_stock(self):
        p = Product(id=0, name="Lemon", quantity=2)
        p.sell("alice", Quantity(2), T0)
        assert p.quantity == 0
        assert not p.is_available

    def test_second_open_purchase_rejected(self):
        p = Product(id=0, name="Lemon", quantity=100)
        p.sell("alice", Quantity(1), T0)

        with pytest.raises(DuplicateOpenPurchaseError) as info:
            p.sell("alice", Quantity(1), T0)

        assert info.value.buyer == "alice"
        assert info.value.product_name == "Lemon"
        assert p.quantity == 99

    def test_insufficient_inventory_carries_details(self):
        p = Product(id=4, name="Lemon", quantity=3)

        with pytest.raises(InsufficientInventoryError) as info:
            p.sell("bob", Quantity(10), T0)

        err = info.value
        assert err.product_name == "Lemon"
        assert err.product_id == 4
        assert err.requested == 10
        assert err.available == 3
        assert "Insufficient inventory for Lemon" in err.message

    def test_insufficient_inventory_has_no_partial_effect(self):
        p = Product(id=0, name="Lemon", quantity=3)

        with pytest.raises(InsufficientInventoryError):
            p.sell("bob", Quantity(10), T0)

        assert p.quantity == 3
        assert p.buyers == []
        assert p.purchased_at == {}


class TestProductTakeBack:

    def test_return_within_window(self):
        p = Product(id=0, name="Lemon", quantity=3, purchased_at={"alice": T0}, buyers=["alice"])
        p.take_back("alice", Quantity(2), T0 + timedelta(days=1), WINDOW)

        assert p.quantity == 5
        assert not p.has_open_purchase("alice")
        assert p.buyers == ["alice"]

    def test_return_at_window_edge_accepted(self):
        p = Product(id=0, name="Lemon", quantity=0, purchased_at={"alice": T0})
        p.take_back("alice", Quantity(1), T0 + WINDOW, WINDOW)
        assert p.quantity == 1

    def test_return_amount_is_trusted(self):
        p = Product(id=0, name="Lemon", quantity=3, purchased_at={"alice": T0})
        p.take_back("alice", Quantity(50), T0, WINDOW)
        assert p.quantity == 53

    def test_return_without_purchase_rejected(self):
        p = Product(id=0, name="Lemon", quantity=3)
        with pytest.raises(NoOpenPurchaseError, match="no open purchase"):
            p.take_back("alice", Quantity(1), T0, WINDOW)

    def test_return_after_window_rejected(self):
        p = Product(id=0, name="Lemon", quantity=3, purchased_at={"alice": T0})
        late = T0 + WINDOW + timedelta(seconds=1)

        with pytest.raises(ReturnWindowExpiredError) as info:
            p.take_back("alice", Quantity(1), late, WINDOW)

        assert info.value.purchased_at == T0
        assert info.value.window == WINDOW
        assert p.quantity == 3
        assert p.has_open_purchase("alice")

    def test_return_can_keep_purchase_open(self):
        p = Product(id=0, name="Lemon", quantity=3, purchased_at={"alice": T0})
        p.take_back("alice", Quantity(1), T0, WINDOW, close_purchase=False)

        assert p.quantity == 4
        assert p.has_open_purchase("alice")
