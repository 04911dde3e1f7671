"""
Tests for UntrustedInput

Tests that request data can only be read back sanitized.
"""

import pytest

from assistant_accounts.security.sanitizer import InvalidTypeError, PayloadTooDeepError, Sanitizer
from assistant_accounts.security.untrusted import UntrustedInput


class TestUntrustedInput:
    """Tests for UntrustedInput accessors."""

    def test_field_is_stripped(self):
        data = UntrustedInput({"name": "$Sara..A"})
        assert data.field("name") == "Sara.A"

    def test_missing_field_is_none(self):
        data = UntrustedInput({"name": "x"})
        assert data.field("phone") is None
        assert not data.has("phone")

    def test_field_rejects_operator_object(self):
        data = UntrustedInput({"id": {"$ne": None}})
        with pytest.raises(InvalidTypeError) as exc_info:
            data.field("id")
        assert exc_info.value.field_name == "id"

    def test_non_mapping_payload_has_no_fields(self):
        data = UntrustedInput(["name", "x"])
        assert data.field("name") is None
        assert not data.has("name")

    def test_secret_keeps_content(self):
        """Test that passwords keep their $ characters."""
        data = UntrustedInput({"password": "pa$$..word"})
        assert data.secret("password") == "pa$$..word"

    def test_secret_rejects_non_string(self):
        data = UntrustedInput({"password": {"$gt": ""}})
        with pytest.raises(InvalidTypeError):
            data.secret("password")

    def test_value_sanitizes_whole_scalar(self):
        assert UntrustedInput("$a1").value("id") == "a1"
        with pytest.raises(InvalidTypeError):
            UntrustedInput({"$gt": ""}).value("id")

    def test_document_is_structurally_sanitized(self):
        data = UntrustedInput({"$where": "1", "profile": {"subjects": ["$physics"]}})
        assert data.document() == {"profile": {"subjects": ["physics"]}}

    def test_document_uses_given_sanitizer(self):
        data = UntrustedInput({"a": {"b": {"c": 1}}}, Sanitizer(max_depth=2))
        with pytest.raises(PayloadTooDeepError):
            data.document()

    def test_repr_hides_raw_value(self):
        data = UntrustedInput({"password": "hunter2"})
        assert "hunter2" not in repr(data)
        assert "dict" in repr(data)
