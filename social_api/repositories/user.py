"""Repository helpers for user records."""

from __future__ import annotations

from ..db.collections import USERS_COLLECTION
from ..models.user import User
from .base import RecordRepository


class UserRepository(RecordRepository[User]):
    collection_name = USERS_COLLECTION
    record_model = User
    entity_label = "user"

    async def find_subscribers(self, user_id: str) -> list[User]:
        """Users whose subscription list contains ``user_id``."""

        return await self.scan({"subscribedToUserIds": user_id})


__all__ = ["UserRepository"]
