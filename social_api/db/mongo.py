import logging
from typing import Iterable

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from ..models.member_type import DEFAULT_MEMBER_TYPES
from .collections import (
    MEMBER_TYPES_COLLECTION,
    POSTS_COLLECTION,
    PROFILES_COLLECTION,
    USERS_COLLECTION,
)

LOGGER = logging.getLogger("uvicorn.error")


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[PROFILES_COLLECTION].create_index(
        [("userId", ASCENDING)],
        name="profiles_user_id_unique",
        unique=True,
    )
    await db[POSTS_COLLECTION].create_index(
        [("userId", ASCENDING)],
        name="posts_user_id_idx",
    )
    await db[USERS_COLLECTION].create_index(
        [("subscribedToUserIds", ASCENDING)],
        name="users_subscribed_to_idx",
    )


async def seed_member_types(db: AsyncIOMotorDatabase, member_type_ids: Iterable[str]) -> int:
    """Insert any configured member type that is missing; never overwrites."""

    collection = db[MEMBER_TYPES_COLLECTION]
    created = 0
    for member_type_id in member_type_ids:
        defaults = DEFAULT_MEMBER_TYPES.get(member_type_id, {"discount": 0, "monthPostsLimit": 0})
        result = await collection.update_one(
            {"_id": member_type_id},
            {"$setOnInsert": {"_id": member_type_id, **defaults}},
            upsert=True,
        )
        if result.upserted_id is not None:
            created += 1
    if created:
        LOGGER.info("Seeded %s member type(s)", created)
    return created


__all__ = ["ensure_indexes", "seed_member_types"]
