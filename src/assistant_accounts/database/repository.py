"""
Assistant Repository

CRUD operations on the assistants collection.

Callers pass values that have already gone through the sanitizer; every
operator document ($set, projections) is built here, never taken from
request data.
"""

import logging
from typing import List, Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from assistant_accounts.config import MongoConfig

logger = logging.getLogger("assistant_accounts.repository")

PUBLIC_PROJECTION = {"_id": 0, "password": 0}


class AssistantRepository:
    """
    Repository for assistant account documents.

    Provides methods for:
    - Listing and fetching assistants (password excluded)
    - Creating, updating and deleting by assistant id
    """

    def __init__(self, config: Optional[MongoConfig] = None):
        self.config = config or MongoConfig()
        self._client: Optional[AsyncMongoClient] = None
        self._collection: Optional[AsyncCollection] = None

    async def connect(self) -> None:
        """Open the client and resolve the collection."""
        if self._client is not None:
            return
        self._client = AsyncMongoClient(self.config.uri)
        self._collection = self._client[self.config.database][self.config.collection]
        logger.info(f"Connected to collection '{self.config.database}.{self.config.collection}'")

    async def disconnect(self) -> None:
        """Close the client."""
        if self._client:
            await self._client.close()
            self._client = None
            self._collection = None

    @property
    def collection(self) -> AsyncCollection:
        if self._collection is None:
            raise RuntimeError("Repository not connected")
        return self._collection

    # ========== Read Operations ==========

    async def list_assistants(self, limit: int = 0) -> List[dict]:
        """All assistants, without password hashes."""
        cursor = self.collection.find({}, projection=PUBLIC_PROJECTION).sort("id", 1)
        return await cursor.to_list(length=limit or None)

    async def get_assistant(self, assistant_id: str) -> Optional[dict]:
        """Get an assistant by id, without the password hash."""
        return await self.collection.find_one(
            {"id": assistant_id},
            projection=PUBLIC_PROJECTION,
        )

    async def get_password_hash(self, assistant_id: str) -> Optional[str]:
        """Stored bcrypt hash for credential checks. Never returned by the API."""
        doc = await self.collection.find_one(
            {"id": assistant_id},
            projection={"_id": 0, "password": 1},
        )
        return doc.get("password") if doc else None

    async def exists(self, assistant_id: str) -> bool:
        doc = await self.collection.find_one({"id": assistant_id}, projection={"_id": 1})
        return doc is not None

    # ========== Write Operations ==========

    async def create_assistant(self, document: dict) -> dict:
        """Insert a new assistant document."""
        # insert_one adds _id to the dict it is given
        await self.collection.insert_one(dict(document))
        logger.info(f"Created assistant {document.get('id')}")
        return document

    async def update_assistant(self, assistant_id: str, fields: dict) -> int:
        """
        Set fields on an assistant.

        Returns:
            Number of matched documents (0 or 1)
        """
        result = await self.collection.update_one({"id": assistant_id}, {"$set": fields})
        if result.matched_count:
            logger.info(f"Updated assistant {assistant_id}: {sorted(k for k in fields if k != 'password')}")
        return result.matched_count

    async def delete_assistant(self, assistant_id: str) -> int:
        """
        Delete an assistant.

        Returns:
            Number of deleted documents (0 or 1)
        """
        result = await self.collection.delete_one({"id": assistant_id})
        if result.deleted_count:
            logger.info(f"Deleted assistant {assistant_id}")
        return result.deleted_count
