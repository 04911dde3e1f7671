"""
Assistant Data Model

Defines the stored assistant account and its public representation.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountState(str, Enum):
    """Whether the assistant may log in."""
    ACTIVATED = "Activated"
    DEACTIVATED = "Deactivated"


class AssistantPublic(BaseModel):
    """
    Assistant as returned by the API.

    Password hashes and Mongo internals never appear here.
    """

    model_config = ConfigDict(extra="ignore", use_enum_values=True, coerce_numbers_to_str=True)

    id: str = Field(..., description="Login identifier chosen by the admin")
    name: Optional[str] = None
    phone: Optional[str] = None
    role: str = "assistant"
    profile: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Free-form details, stored only after structural sanitization",
    )
    account_state: str = Field(
        default=AccountState.ACTIVATED.value,
        description="Older documents have no state and count as Activated",
    )

    @classmethod
    def from_document(cls, doc: dict) -> "AssistantPublic":
        data = {k: v for k, v in doc.items() if k not in ("_id", "password")}
        if not data.get("account_state"):
            data["account_state"] = AccountState.ACTIVATED.value
        return cls(**data)


class Assistant(AssistantPublic):
    """Stored assistant document."""

    password: str = Field(..., description="bcrypt hash")

    def to_document(self) -> dict:
        return self.model_dump()
