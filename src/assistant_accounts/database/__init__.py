"""Database package - MongoDB integration."""

from assistant_accounts.database.repository import AssistantRepository

__all__ = ["AssistantRepository"]
