"""Runtime settings, read from ``LEDGER_*`` environment variables or a .env file."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_prefix="LEDGER_", env_file=".env")

    # Access control
    owner: str = "owner"

    # Returns; the window is read as an ISO-8601 duration, e.g. "P30D"
    return_window: timedelta = timedelta(days=30)
    clear_purchase_on_return: bool = True

    # Storage
    data_dir: Path = Path("data")

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def catalog_file(self) -> Path:
        return self.data_dir / "products.json"
