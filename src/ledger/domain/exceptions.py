"""Domain-level exceptions.

All ledger rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly
messages.  Kinds that callers may want to branch on carry the relevant
identifiers as attributes, not just a message string.
"""

from __future__ import annotations

from datetime import datetime, timedelta


class DomainException(Exception):
    """Base class for all domain errors."""

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class AuthorizationError(DomainException):
    """The caller is not allowed to perform an owner-only operation."""

    def __init__(self, caller: str) -> None:
        super().__init__(f"'{caller}' is not allowed to manage the catalog")
        self.caller = caller


class NotFoundError(DomainException):
    """A product name or identifier does not resolve to a product."""

    def __init__(self, message: str, key: str | int) -> None:
        super().__init__(message)
        self.key = key


class DuplicateOpenPurchaseError(DomainException):
    """The buyer already holds an unreturned purchase of this product."""

    def __init__(self, product_name: str, buyer: str) -> None:
        super().__init__(
            f"'{buyer}' already has an open purchase of {product_name}"
        )
        self.product_name = product_name
        self.buyer = buyer


class InsufficientInventoryError(DomainException):
    """Requested quantity exceeds the current stock."""

    def __init__(
        self,
        product_name: str,
        product_id: int,
        requested: int,
        available: int,
    ) -> None:
        super().__init__(
            f"Insufficient inventory for {product_name} "
            f"(need {requested}, have {available} available)"
        )
        self.product_name = product_name
        self.product_id = product_id
        self.requested = requested
        self.available = available


class NoOpenPurchaseError(DomainException):
    """A return was attempted for a product the buyer has not bought."""

    def __init__(self, product_name: str, buyer: str) -> None:
        super().__init__(
            f"'{buyer}' has no open purchase of {product_name} to return"
        )
        self.product_name = product_name
        self.buyer = buyer


class ReturnWindowExpiredError(DomainException):
    """A return was attempted after the allowed duration elapsed."""

    def __init__(
        self,
        product_name: str,
        buyer: str,
        purchased_at: datetime,
        window: timedelta,
    ) -> None:
        super().__init__(
            f"Return window for {product_name} has expired "
            f"(purchased {purchased_at.isoformat()}, window {window})"
        )
        self.product_name = product_name
        self.buyer = buyer
        self.purchased_at = purchased_at
        self.window = window
