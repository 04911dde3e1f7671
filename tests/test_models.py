"""
Tests for Data Models

Tests Assistant and AssistantPublic models.
"""

import pytest
from pydantic import ValidationError

from assistant_accounts.models.assistant import AccountState, Assistant, AssistantPublic


class TestAssistantPublic:
    """Tests for the public assistant representation."""

    def test_from_document_hides_internals(self):
        doc = {"_id": object(), "id": "a1", "name": "Sara", "password": "$2b$hash"}
        assistant = AssistantPublic.from_document(doc)
        dumped = assistant.model_dump()

        assert dumped["id"] == "a1"
        assert "password" not in dumped
        assert "_id" not in dumped

    def test_missing_state_defaults_to_activated(self):
        assistant = AssistantPublic.from_document({"id": "a1"})
        assert assistant.account_state == "Activated"

    def test_empty_state_defaults_to_activated(self):
        assistant = AssistantPublic.from_document({"id": "a1", "account_state": ""})
        assert assistant.account_state == AccountState.ACTIVATED.value

    def test_stored_state_kept(self):
        assistant = AssistantPublic.from_document({"id": "a1", "account_state": "Deactivated"})
        assert assistant.account_state == "Deactivated"

    def test_numeric_phone_coerced(self):
        assistant = AssistantPublic.from_document({"id": "a1", "phone": 5551234})
        assert assistant.phone == "5551234"

    def test_id_required(self):
        with pytest.raises(ValidationError):
            AssistantPublic.from_document({"name": "x"})


class TestAssistant:
    """Tests for the stored assistant document."""

    def test_defaults(self):
        assistant = Assistant(id="a1", name="Sara", password="hash")

        assert assistant.role == "assistant"
        assert assistant.account_state == "Activated"
        assert assistant.profile is None

    def test_to_document_includes_password(self):
        doc = Assistant(id="a1", name="Sara", password="hash").to_document()
        assert doc["password"] == "hash"
        assert doc["id"] == "a1"

    def test_password_required(self):
        with pytest.raises(ValidationError):
            Assistant(id="a1", name="Sara")
