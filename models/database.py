"""Database models and connection setup."""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)


class Database:
    """Database connection manager."""
    
    client: Optional[AsyncIOMotorClient] = None


db = Database()


async def connect_to_mongo():
    """Create database connection."""
    db.client = AsyncIOMotorClient(settings.mongo_uri)
    logger.info(f"Connecting to MongoDB database '{settings.database_name}'")


async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        db.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo():
    """Connect to MongoDB and check the server answers.

    A failed ping is logged and startup continues; requests then fail with a
    store error until the server becomes reachable.
    """
    await connect_to_mongo()
    try:
        await db.client.admin.command("ping")
        logger.info("MongoDB connected")
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")


def get_database() -> AsyncIOMotorDatabase:
    """Get database instance."""
    if db.client is None:
        raise RuntimeError("MongoDB client is not connected")
    return db.client[settings.database_name]


def get_users_collection() -> AsyncIOMotorCollection:
    """Get users collection."""
    return get_database().users
