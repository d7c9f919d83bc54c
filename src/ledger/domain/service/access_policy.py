"""Domain service: catalog access control.

Only the owner may add or restock products.  The check is behind a small
interface so a different policy (several administrators, say) can be
plugged into the ledger without touching the use cases.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.domain.exceptions import AuthorizationError, ValidationError


class AccessPolicy(ABC):

    @abstractmethod
    def can_manage_catalog(self, caller: str) -> bool:
        """Return True if *caller* may add or restock products."""

    def require_catalog_manager(self, caller: str) -> None:
        if not self.can_manage_catalog(caller):
            raise AuthorizationError(caller)


class OwnerPolicy(AccessPolicy):
    """Grants catalog management to a single configured owner."""

    def __init__(self, owner: str) -> None:
        if not owner or not owner.strip():
            raise ValidationError("Owner identity is required")
        self._owner = owner

    @property
    def owner(self) -> str:
        return self._owner

    def can_manage_catalog(self, caller: str) -> bool:
        return caller == self._owner
