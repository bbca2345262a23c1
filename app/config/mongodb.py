"""MongoDB connection and configuration."""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.config.settings import MONGODB_DB_NAME, MONGODB_URL

logger = logging.getLogger(__name__)

# Global MongoDB client
_mongo_client: Optional[AsyncIOMotorClient] = None
_database: Optional[AsyncIOMotorDatabase] = None


async def connect_to_mongo() -> AsyncIOMotorDatabase:
    """Open the MongoDB connection and make sure the indexes exist."""
    global _mongo_client, _database

    if _database is not None:
        return _database

    logger.info(f"Connecting to MongoDB database: {MONGODB_DB_NAME}")
    _mongo_client = AsyncIOMotorClient(MONGODB_URL)
    _database = _mongo_client[MONGODB_DB_NAME]

    await _database.command("ping")
    logger.info("MongoDB connection established")

    await ensure_indexes(_database)
    return _database


async def close_mongo_connection() -> None:
    """Close the MongoDB connection."""
    global _mongo_client, _database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")

    _mongo_client = None
    _database = None


def get_database() -> AsyncIOMotorDatabase:
    """Get the connected database instance."""
    if _database is None:
        raise RuntimeError("MongoDB is not connected; call connect_to_mongo() first")
    return _database


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the indexes the concepts rely on."""
    logger.debug("Ensuring MongoDB indexes")
    await database["users"].create_index([("username", ASCENDING)], unique=True)
    await database["profiles"].create_index(
        [("user", ASCENDING), ("question", ASCENDING)], unique=True
    )
    await database["posts"].create_index([("thread", ASCENDING)])
    await database["posts"].create_index([("author", ASCENDING)])
    await database["threads"].create_index([("members", ASCENDING)])
