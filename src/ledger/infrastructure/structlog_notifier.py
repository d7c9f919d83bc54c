"""Notifier that writes every ledger event as a structured log line."""

from __future__ import annotations

from dataclasses import asdict

import structlog

from ledger.application.notifier import Notifier
from ledger.domain.model.events import LedgerEvent
from ledger.infrastructure.logging import get_logger


class StructlogNotifier(Notifier):

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or get_logger("ledger.notifications")

    def publish(self, event: LedgerEvent) -> None:
        fields = asdict(event)
        fields["occurred_at"] = event.occurred_at.isoformat()
        self._logger.info(event.message, kind=event.kind, **fields)
