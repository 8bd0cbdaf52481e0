"""
Index management for the user directory database.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.databases import users_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes used by the user lookups."""
    users = db[users_db.Collections.USERS]

    # Non-unique: several users may share a name, lookups act on the first
    await users.create_index(users_db.Fields.NAME)
    logger.info("Indexes ensured on %s.%s", db.name, users_db.Collections.USERS)
