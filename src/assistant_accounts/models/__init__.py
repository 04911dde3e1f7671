"""Data models package."""

from assistant_accounts.models.assistant import AccountState, Assistant, AssistantPublic

__all__ = ["AccountState", "Assistant", "AssistantPublic"]
