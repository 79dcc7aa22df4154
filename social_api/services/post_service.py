from __future__ import annotations

from typing import Any, Dict, Optional

from ..db import get_db
from ..models.post import Post, PostCreateRequest, PostPatch
from ..repositories.exceptions import NotFoundRepositoryError
from ..repositories.post import PostRepository
from ..repositories.user import UserRepository
from .exceptions import InvalidOperationError, require_record_id


class PostService:
    """Post CRUD. Posts always belong to an existing user."""

    def __init__(self, post_repo: PostRepository, user_repo: UserRepository) -> None:
        self._posts = post_repo
        self._users = user_repo

    async def list_posts(self) -> list[Post]:
        return await self._posts.scan()

    async def get_post(self, post_id: str) -> Optional[Post]:
        try:
            post_id = require_record_id(post_id)
        except InvalidOperationError:
            return None
        return await self._posts.get(post_id)

    async def create_post(self, payload: PostCreateRequest) -> Post:
        user_id = require_record_id(payload.user_id, "userId")
        if not await self._users.get(user_id):
            raise InvalidOperationError("author does not exist")
        fields = payload.model_dump(by_alias=True)
        fields["userId"] = user_id
        return await self._posts.insert(fields)

    async def update_post(self, post_id: str, patch: PostPatch) -> Post:
        post_id = require_record_id(post_id)
        updates: Dict[str, Any] = patch.model_dump(exclude_none=True)
        if not updates:
            post = await self._posts.get(post_id)
            if not post:
                raise NotFoundRepositoryError("post not found")
            return post
        return await self._posts.update(post_id, updates)

    async def delete_post(self, post_id: str) -> Post:
        return await self._posts.remove(require_record_id(post_id))


def get_post_service() -> PostService:
    db = get_db()
    return PostService(PostRepository(db), UserRepository(db))


__all__ = ["PostService", "get_post_service"]
