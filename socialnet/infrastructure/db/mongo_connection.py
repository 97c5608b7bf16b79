# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, PostFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
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


async def ensure_indexes(database: Optional[AsyncIOMotorDatabase] = None) -> None:
    """
    Create the indexes the repositories rely on.

    The unique index on users.email is what turns a second registration
    with the same address into a duplicate-key error.
    """
    database = database if database is not None else get_database()
    await database[USERS_COLLECTION].create_index(UserFields.EMAIL, unique=True)
    await database[POSTS_COLLECTION].create_index(
        [(PostFields.USER_ID, 1), (PostFields.CREATED_AT, -1)]
    )
    logger.info("MongoDB indexes ensured on database %s", database.name)


def close_connection() -> None:
    """Close the shared client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
