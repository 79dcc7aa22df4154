"""Repository helpers for profile records."""

from __future__ import annotations

from typing import Optional

from ..db.collections import PROFILES_COLLECTION
from ..models.profile import Profile
from .base import RecordRepository


class ProfileRepository(RecordRepository[Profile]):
    collection_name = PROFILES_COLLECTION
    record_model = Profile
    entity_label = "profile"

    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        return await self.find_one({"userId": user_id})


__all__ = ["ProfileRepository"]
