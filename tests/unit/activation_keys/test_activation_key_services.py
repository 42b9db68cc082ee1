"""
Unit tests for activation key domain services.
"""

import pytest

from activation_keys.domain.services import ActivationKeyLookup, parse_server_group_ids
from core.domain.exceptions import (
    ActivationKeyNotFoundError,
    InvalidSelectionError,
    PermissionDeniedError,
)


class TestParseServerGroupIds:
    """Tests for parse_server_group_ids."""

    def test_parses_strings_and_ints(self):
        assert parse_server_group_ids(["3", 1, " 2 "]) == [3, 1, 2]

    def test_drops_duplicates_keeping_first_position(self):
        assert parse_server_group_ids(["5", "1", "5", 1]) == [5, 1]

    def test_empty_selection(self):
        assert parse_server_group_ids([]) == []

    @pytest.mark.parametrize("raw_id", ["abc", "1.5", "", None, True])
    def test_invalid_id_rejected(self, raw_id):
        with pytest.raises(InvalidSelectionError):
            parse_server_group_ids(["1", raw_id])


@pytest.mark.asyncio
class TestActivationKeyLookup:
    """Tests for ActivationKeyLookup."""

    async def test_lookup_success(self, key_repo, key, key_admin_user):
        found = await ActivationKeyLookup(key_repo).lookup(key.id, key_admin_user)

        assert found == key

    async def test_lookup_requires_role(self, key_repo, key, viewer_user):
        with pytest.raises(PermissionDeniedError):
            await ActivationKeyLookup(key_repo).lookup(key.id, viewer_user)

    async def test_lookup_unknown_key(self, key_repo, org_admin_user):
        with pytest.raises(ActivationKeyNotFoundError):
            await ActivationKeyLookup(key_repo).lookup(999, org_admin_user)

    async def test_lookup_key_of_other_organization(self, key_repo, key, outsider_user):
        """Test keys of other organizations are reported as missing."""
        with pytest.raises(ActivationKeyNotFoundError):
            await ActivationKeyLookup(key_repo).lookup(key.id, outsider_user)
