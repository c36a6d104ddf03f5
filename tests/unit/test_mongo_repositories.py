"""
Unit tests for the MongoDB repositories, run against mocked Motor collections
and, for the toggle pipeline, an in-process Mongo engine (mongomock-motor).
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from blog_api.domain.exceptions import DuplicateEmailError, DuplicateUsernameError, InternalError
from blog_api.domain.models.post import Post
from blog_api.domain.models.user import User
from blog_api.infrastructure.db import mongo_connection
from blog_api.infrastructure.db.mongo_post_repository import MongoPostRepository, toggle_like_pipeline
from blog_api.infrastructure.db.mongo_user_repository import MongoUserRepository

POST_ID = ObjectId("665f1c2e8b3e4a5d6c7b8a90")
CREATED = datetime(2024, 5, 1, tzinfo=timezone.utc)


def _post_document(**overrides) -> dict:
    document = {
        "_id": POST_ID,
        "title": "Hello",
        "content": "World",
        "author_id": "user-a",
        "author_name": "alice",
        "liked_by": [],
        "created_at": CREATED,
        "updated_at": CREATED,
    }
    document.update(overrides)
    return document


@pytest.fixture
def post_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


@pytest.fixture
def user_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    return collection


class TestMongoPostRepository:
    @pytest.mark.asyncio
    async def test_list_all_sorts_newest_first(self, post_collection):
        cursor = MagicMock()
        cursor.__aiter__.return_value = [_post_document(), _post_document(_id=ObjectId(), title="Other")]
        post_collection.find.return_value.sort.return_value = cursor

        posts = await MongoPostRepository(post_collection).list_all()

        post_collection.find.return_value.sort.assert_called_once_with(
            [("created_at", DESCENDING), ("_id", DESCENDING)]
        )
        assert [p.title for p in posts] == ["Hello", "Other"]

    @pytest.mark.asyncio
    async def test_find_by_id_maps_document(self, post_collection):
        post_collection.find_one.return_value = _post_document(liked_by=["user-b"])

        post = await MongoPostRepository(post_collection).find_by_id(str(POST_ID))

        post_collection.find_one.assert_awaited_once_with({"_id": POST_ID})
        assert post.id == str(POST_ID)
        assert post.author_id == "user-a"
        assert post.liked_by == ["user-b"]

    @pytest.mark.asyncio
    async def test_find_by_malformed_id_skips_query(self, post_collection):
        assert await MongoPostRepository(post_collection).find_by_id("not-an-id") is None
        post_collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_inserts_with_timestamps(self, post_collection):
        post_collection.insert_one.return_value = MagicMock(inserted_id=POST_ID)
        post_collection.find_one.return_value = _post_document()

        saved = await MongoPostRepository(post_collection).create(
            Post(id=None, title="Hello", content="World", author_id="user-a", author_name="alice")
        )

        inserted = post_collection.insert_one.await_args.args[0]
        assert "_id" not in inserted
        assert inserted["liked_by"] == []
        assert inserted["created_at"] == inserted["updated_at"]
        assert saved.id == str(POST_ID)

    @pytest.mark.asyncio
    async def test_update_content_is_conditional_on_author(self, post_collection):
        post_collection.find_one_and_update.return_value = _post_document(title="Hi")

        updated = await MongoPostRepository(post_collection).update_content(
            str(POST_ID), "user-a", title="Hi", content=None
        )

        args, kwargs = post_collection.find_one_and_update.await_args
        assert args[0] == {"_id": POST_ID, "author_id": "user-a"}
        changes = args[1]["$set"]
        assert changes["title"] == "Hi"
        assert "content" not in changes
        assert "updated_at" in changes
        assert kwargs["return_document"] is ReturnDocument.AFTER
        assert updated.title == "Hi"

    @pytest.mark.asyncio
    async def test_update_content_no_match_returns_none(self, post_collection):
        post_collection.find_one_and_update.return_value = None
        result = await MongoPostRepository(post_collection).update_content(
            str(POST_ID), "user-b", title="Hi", content=None
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_delete_is_conditional_on_author(self, post_collection):
        post_collection.delete_one.return_value = MagicMock(deleted_count=1)

        assert await MongoPostRepository(post_collection).delete(str(POST_ID), "user-a") is True
        post_collection.delete_one.assert_awaited_once_with({"_id": POST_ID, "author_id": "user-a"})

    @pytest.mark.asyncio
    async def test_delete_no_match_returns_false(self, post_collection):
        post_collection.delete_one.return_value = MagicMock(deleted_count=0)
        assert await MongoPostRepository(post_collection).delete(str(POST_ID), "user-b") is False

    @pytest.mark.asyncio
    async def test_toggle_like_is_single_atomic_update(self, post_collection):
        post_collection.find_one_and_update.return_value = _post_document(liked_by=["user-b"])

        post = await MongoPostRepository(post_collection).toggle_like(str(POST_ID), "user-b")

        args, kwargs = post_collection.find_one_and_update.await_args
        assert args[0] == {"_id": POST_ID}
        assert args[1] == toggle_like_pipeline("user-b")
        assert kwargs["return_document"] is ReturnDocument.AFTER
        post_collection.find_one.assert_not_called()
        assert post.is_liked_by("user-b")

    def test_toggle_pipeline_branches_on_membership(self):
        [stage] = toggle_like_pipeline("user-b")
        condition, remove, add = stage["$set"]["liked_by"]["$cond"]
        assert condition["$in"][0] == "user-b"
        assert remove["$filter"]["cond"] == {"$ne": ["$$this", "user-b"]}
        assert add["$concatArrays"][1] == ["user-b"]

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_internal_error(self, post_collection):
        post_collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        with pytest.raises(InternalError):
            await MongoPostRepository(post_collection).find_by_id(str(POST_ID))


class TestTogglePipelineOnEngine:
    """Runs the toggle pipeline through an in-process Mongo engine."""

    @pytest.fixture
    def engine_collection(self):
        return AsyncMongoMockClient()["blog_test"]["posts"]

    @pytest.mark.asyncio
    async def test_like_like_unlike_sequence(self, engine_collection):
        repo = MongoPostRepository(engine_collection)
        post = await repo.create(
            Post(id=None, title="Hello", content="World", author_id="user-a", author_name="alice")
        )

        liked = await repo.toggle_like(post.id, "user-b")
        assert liked.liked_by == ["user-b"]
        assert liked.like_count == 1

        liked_twice = await repo.toggle_like(post.id, "user-c")
        assert liked_twice.liked_by == ["user-b", "user-c"]
        assert liked_twice.like_count == 2

        unliked = await repo.toggle_like(post.id, "user-b")
        assert unliked.liked_by == ["user-c"]
        assert unliked.like_count == 1
        assert not unliked.is_liked_by("user-b")

        stored = await engine_collection.find_one({"_id": ObjectId(post.id)})
        assert stored["liked_by"] == ["user-c"]

    @pytest.mark.asyncio
    async def test_toggle_unknown_post_returns_none(self, engine_collection):
        assert await MongoPostRepository(engine_collection).toggle_like(str(ObjectId()), "user-b") is None


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_email_normalizes(self, user_collection):
        user_collection.find_one.return_value = None
        await MongoUserRepository(user_collection).find_by_email(" Alice@Example.com ")
        user_collection.find_one.assert_awaited_once_with({"email": "alice@example.com"})

    @pytest.mark.asyncio
    async def test_create_returns_saved_user(self, user_collection):
        user_id = ObjectId()
        user_collection.insert_one.return_value = MagicMock(inserted_id=user_id)
        user_collection.find_one.return_value = {
            "_id": user_id,
            "username": "alice",
            "email": "alice@example.com",
            "hashed_password": "hash",
        }

        saved = await MongoUserRepository(user_collection).create(
            User(id=None, username="alice", email="alice@example.com", hashed_password="hash")
        )

        inserted = user_collection.insert_one.await_args.args[0]
        assert inserted["hashed_password"] == "hash"
        assert "created_at" in inserted
        assert saved.id == str(user_id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "key_pattern, expected",
        [({"username": 1}, DuplicateUsernameError), ({"email": 1}, DuplicateEmailError)],
    )
    async def test_duplicate_key_maps_to_domain_error(self, user_collection, key_pattern, expected):
        user_collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key error", 11000, {"keyPattern": key_pattern}
        )
        with pytest.raises(expected):
            await MongoUserRepository(user_collection).create(
                User(id=None, username="alice", email="alice@example.com", hashed_password="hash")
            )


class TestMongoConnection:
    def test_client_returns_timezone_aware_datetimes(self):
        settings = MagicMock(mongo_uri="mongodb://db.example:27017", mongo_database_name="blog_test")
        with patch.object(mongo_connection, "get_settings", return_value=settings), patch.object(
            mongo_connection, "AsyncIOMotorClient"
        ) as client_class:
            mongo_connection.close_connection()
            try:
                mongo_connection.get_database()
            finally:
                mongo_connection.close_connection()

        client_class.assert_called_once_with("mongodb://db.example:27017", tz_aware=True)
        client_class.return_value.__getitem__.assert_called_once_with("blog_test")
