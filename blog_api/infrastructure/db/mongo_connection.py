# Standard library imports
import logging
from typing import Optional

# External package imports
import pymongo
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings
from ...domain.constants import PostFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client connects lazily, so this does not touch the network.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_post_collection() -> AsyncIOMotorCollection:
    """
    Get posts collection from MongoDB

    Returns:
        MongoDB collection for posts
    """
    return get_database()[POSTS_COLLECTION]


async def ensure_indexes() -> None:
    """
    Create the indexes the repositories rely on (idempotent)

    The unique indexes on username and email back the signup uniqueness
    checks; the created_at index serves the newest-first listing.
    """
    users = get_user_collection()
    posts = get_post_collection()

    await users.create_index(UserFields.USERNAME, unique=True)
    await users.create_index(UserFields.EMAIL, unique=True)
    await posts.create_index([(PostFields.CREATED_AT, pymongo.DESCENDING)])
    logger.info("MongoDB indexes ensured")


def close_connection() -> None:
    """Close the MongoDB client, if one was opened"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
