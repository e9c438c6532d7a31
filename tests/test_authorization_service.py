"""
tests/test_authorization_service.py -- Ownership policy, no storage involved.
"""

from __future__ import annotations

import uuid

import pytest

from dashboard.domain.exceptions import PermissionDeniedException
from dashboard.domain.services.authorization_service import OwnershipPolicy, can_mutate


class TestOwnershipPolicy:

    def test_owner_can_mutate(self) -> None:
        owner = uuid.uuid4()
        assert can_mutate(owner, owner) is True

    def test_uuid_and_string_forms_match(self) -> None:
        owner = uuid.uuid4()
        assert can_mutate(owner, str(owner)) is True

    def test_other_user_cannot_mutate(self) -> None:
        assert can_mutate(uuid.uuid4(), uuid.uuid4()) is False

    def test_missing_ids_never_match(self) -> None:
        assert can_mutate(None, None) is False
        assert can_mutate(uuid.uuid4(), None) is False

    def test_ensure_raises_forbidden_with_resource_message(self) -> None:
        with pytest.raises(PermissionDeniedException) as exc_info:
            OwnershipPolicy.ensure_can_mutate(uuid.uuid4(), uuid.uuid4(), "update", "quiz")
        assert exc_info.value.detail == "You are not authorized to update this quiz"

    def test_ensure_passes_for_owner(self) -> None:
        owner = uuid.uuid4()
        OwnershipPolicy.ensure_can_mutate(owner, owner, "delete", "announcement")
