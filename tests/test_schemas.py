"""
Unit tests for request schemas.

Tests cover:
- Accepted id encodings (JSON integers, digit strings)
- Rejected id encodings (booleans, floats, signed or padded strings)
"""

import pydantic
import pytest

from secret_santa_api.app.schemas.group import GroupAdminAction, GroupCreate, GroupJoin
from secret_santa_api.app.schemas.user import UserDelete


class TestEntityId:
    """Tests for the shared id field."""

    @pytest.mark.parametrize("raw", [0, 7, "0", "42"])
    def test_accepts_integers_and_digit_strings(self, raw):
        assert GroupCreate(creator_id=raw).creator_id == int(raw)

    @pytest.mark.parametrize("raw", [True, False, 1.0, 1.5, "1.0", "-1", -1, "+1", " 1", "", "abc", None])
    def test_rejects_everything_else(self, raw):
        with pytest.raises(pydantic.ValidationError):
            GroupCreate(creator_id=raw)

    def test_same_rules_in_every_model(self):
        """Every id field of every request model refuses booleans."""
        with pytest.raises(pydantic.ValidationError):
            GroupJoin(user_id="1", group_id=False)
        with pytest.raises(pydantic.ValidationError):
            GroupAdminAction(admin_id=True, group_id="0")
        with pytest.raises(pydantic.ValidationError):
            UserDelete(user_id=True)
        assert GroupJoin(user_id="1", group_id=0) == GroupJoin(user_id=1, group_id="0")
