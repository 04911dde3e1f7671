"""
Unit Tests for Assistant Repository

Tests repository logic using mocks for the Mongo collection.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from assistant_accounts.config import MongoConfig
from assistant_accounts.database.repository import PUBLIC_PROJECTION, AssistantRepository


class TestRepositoryUnit:
    """Unit tests for AssistantRepository."""

    @pytest.fixture
    def mock_repo(self):
        """Create a repository with a mocked collection."""
        repo = AssistantRepository(MongoConfig())
        repo._client = MagicMock()
        repo._collection = MagicMock()
        return repo

    def test_unconnected_repository_raises(self):
        repo = AssistantRepository()
        with pytest.raises(RuntimeError):
            _ = repo.collection

    @pytest.mark.asyncio
    async def test_connect_and_disconnect(self):
        """Test client lifecycle."""
        config = MongoConfig(uri="mongodb://db:27017", database="school", collection="helpers")
        with patch("assistant_accounts.database.repository.AsyncMongoClient") as client_cls:
            client = client_cls.return_value
            client.close = AsyncMock()

            repo = AssistantRepository(config)
            await repo.connect()
            await repo.connect()

            client_cls.assert_called_once_with("mongodb://db:27017")
            client.__getitem__.assert_called_with("school")
            assert repo._collection is not None

            await repo.disconnect()
            client.close.assert_awaited_once()
            assert repo._client is None

    @pytest.mark.asyncio
    async def test_get_assistant_projects_out_password(self, mock_repo):
        mock_repo._collection.find_one = AsyncMock(return_value={"id": "a1", "name": "Sara"})

        doc = await mock_repo.get_assistant("a1")

        assert doc == {"id": "a1", "name": "Sara"}
        mock_repo._collection.find_one.assert_awaited_once_with(
            {"id": "a1"}, projection=PUBLIC_PROJECTION
        )
        assert PUBLIC_PROJECTION["password"] == 0

    @pytest.mark.asyncio
    async def test_get_missing_assistant(self, mock_repo):
        mock_repo._collection.find_one = AsyncMock(return_value=None)
        assert await mock_repo.get_assistant("nobody") is None

    @pytest.mark.asyncio
    async def test_get_password_hash(self, mock_repo):
        mock_repo._collection.find_one = AsyncMock(return_value={"password": "$2b$hash"})

        assert await mock_repo.get_password_hash("a1") == "$2b$hash"
        mock_repo._collection.find_one.assert_awaited_once_with(
            {"id": "a1"}, projection={"_id": 0, "password": 1}
        )

        mock_repo._collection.find_one = AsyncMock(return_value=None)
        assert await mock_repo.get_password_hash("nobody") is None

    @pytest.mark.asyncio
    async def test_exists(self, mock_repo):
        mock_repo._collection.find_one = AsyncMock(return_value={"_id": "x"})
        assert await mock_repo.exists("a1")

        mock_repo._collection.find_one = AsyncMock(return_value=None)
        assert not await mock_repo.exists("a1")

    @pytest.mark.asyncio
    async def test_list_assistants(self, mock_repo):
        cursor = MagicMock()
        cursor.sort.return_value = cursor
        cursor.to_list = AsyncMock(return_value=[{"id": "a1"}, {"id": "a2"}])
        mock_repo._collection.find.return_value = cursor

        docs = await mock_repo.list_assistants()

        assert [d["id"] for d in docs] == ["a1", "a2"]
        mock_repo._collection.find.assert_called_once_with({}, projection=PUBLIC_PROJECTION)
        cursor.to_list.assert_awaited_once_with(length=None)

    @pytest.mark.asyncio
    async def test_create_does_not_mutate_input(self, mock_repo):
        mock_repo._collection.insert_one = AsyncMock()
        document = {"id": "a1", "name": "Sara", "password": "hash"}

        result = await mock_repo.create_assistant(document)

        assert result == {"id": "a1", "name": "Sara", "password": "hash"}
        inserted = mock_repo._collection.insert_one.call_args[0][0]
        assert inserted == document
        assert inserted is not document

    @pytest.mark.asyncio
    async def test_update_builds_set_document(self, mock_repo):
        mock_repo._collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))

        matched = await mock_repo.update_assistant("a1", {"name": "New"})

        assert matched == 1
        mock_repo._collection.update_one.assert_awaited_once_with(
            {"id": "a1"}, {"$set": {"name": "New"}}
        )

    @pytest.mark.asyncio
    async def test_update_unmatched(self, mock_repo):
        mock_repo._collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))
        assert await mock_repo.update_assistant("nobody", {"name": "x"}) == 0

    @pytest.mark.asyncio
    async def test_delete(self, mock_repo):
        mock_repo._collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))

        deleted = await mock_repo.delete_assistant("a1")

        assert deleted == 1
        mock_repo._collection.delete_one.assert_awaited_once_with({"id": "a1"})
