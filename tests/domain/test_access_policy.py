"""Unit tests for the catalog access policy."""

import pytest

from ledger.domain.exceptions import AuthorizationError, ValidationError
from ledger.domain.service.access_policy import OwnerPolicy


class TestOwnerPolicy:

    def test_owner_may_manage(self):
        assert OwnerPolicy("owner").can_manage_catalog("owner")

    def test_others_may_not(self):
        assert not OwnerPolicy("owner").can_manage_catalog("alice")

    def test_require_raises_for_non_owner(self):
        with pytest.raises(AuthorizationError) as info:
            OwnerPolicy("owner").require_catalog_manager("alice")
        assert info.value.caller == "alice"

    def test_require_passes_for_owner(self):
        OwnerPolicy("owner").require_catalog_manager("owner")

    def test_blank_owner_rejected(self):
        with pytest.raises(ValidationError, match="Owner identity is required"):
            OwnerPolicy("  ")
