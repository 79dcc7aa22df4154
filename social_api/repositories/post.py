"""Repository helpers for post records."""

from __future__ import annotations

from ..db.collections import POSTS_COLLECTION
from ..models.post import Post
from .base import RecordRepository


class PostRepository(RecordRepository[Post]):
    collection_name = POSTS_COLLECTION
    record_model = Post
    entity_label = "post"

    async def find_by_user_id(self, user_id: str) -> list[Post]:
        return await self.scan({"userId": user_id})


__all__ = ["PostRepository"]
