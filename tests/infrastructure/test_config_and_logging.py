"""Tests for settings loading and the structlog notifier."""

from datetime import timedelta
from pathlib import Path

from structlog.testing import capture_logs

from ledger.domain.model.events import ProductBought
from ledger.infrastructure.config import LedgerSettings
from ledger.infrastructure.structlog_notifier import StructlogNotifier
from tests.fakes import T0


class TestLedgerSettings:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = LedgerSettings()

        assert config.owner == "owner"
        assert config.return_window == timedelta(days=30)
        assert config.clear_purchase_on_return is True
        assert config.catalog_file == Path("data") / "products.json"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LEDGER_OWNER", "shopkeeper")
        monkeypatch.setenv("LEDGER_RETURN_WINDOW", "PT1H")
        monkeypatch.setenv("LEDGER_CLEAR_PURCHASE_ON_RETURN", "false")
        monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path / "store"))

        config = LedgerSettings()

        assert config.owner == "shopkeeper"
        assert config.return_window == timedelta(hours=1)
        assert config.clear_purchase_on_return is False
        assert config.catalog_file == tmp_path / "store" / "products.json"


class TestStructlogNotifier:

    def test_event_logged_with_fields(self):
        event = ProductBought(
            product_id=0, product_name="Lemon", quantity=3,
            actor="alice", occurred_at=T0, bought=2,
        )

        with capture_logs() as logs:
            StructlogNotifier().publish(event)

        [entry] = logs
        assert entry["event"] == event.message
        assert entry["kind"] == "ProductBought"
        assert entry["product_name"] == "Lemon"
        assert entry["quantity"] == 3
        assert entry["bought"] == 2
        assert entry["actor"] == "alice"
        assert entry["occurred_at"] == T0.isoformat()
        assert entry["log_level"] == "info"
