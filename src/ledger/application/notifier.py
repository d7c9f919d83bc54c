"""Outbound port for ledger notifications.

Use cases publish an event after every committed mutation.  The
infrastructure layer decides where events go (structured log, message
bus); ``CollectingNotifier`` just keeps them in memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.domain.model.events import LedgerEvent


class Notifier(ABC):

    @abstractmethod
    def publish(self, event: LedgerEvent) -> None:
        """Deliver one event."""


class CollectingNotifier(Notifier):
    """Records published events in order."""

    def __init__(self) -> None:
        self.events: list[LedgerEvent] = []

    def publish(self, event: LedgerEvent) -> None:
        self.events.append(event)
