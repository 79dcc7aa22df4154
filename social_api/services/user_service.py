from __future__ import annotations

from typing import Any, Dict, Optional

from ..db import get_db
from ..models.user import User, UserCreateRequest, UserPatch
from ..repositories.exceptions import NotFoundRepositoryError
from ..repositories.user import UserRepository
from .exceptions import InvalidOperationError, require_record_id


class UserService:
    """Plain create/read/update flows for users.

    Deletion and subscription edges live in ``UserDeletionService`` and
    ``SubscriptionService``.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    async def list_users(self) -> list[User]:
        return await self._repository.scan()

    async def get_user(self, user_id: str) -> Optional[User]:
        try:
            user_id = require_record_id(user_id)
        except InvalidOperationError:
            return None
        return await self._repository.get(user_id)

    async def create_user(self, payload: UserCreateRequest) -> User:
        fields = payload.model_dump(by_alias=True)
        fields["subscribedToUserIds"] = []
        return await self._repository.insert(fields)

    async def update_user(self, user_id: str, patch: UserPatch) -> User:
        user_id = require_record_id(user_id)
        updates: Dict[str, Any] = patch.model_dump(by_alias=True, exclude_none=True)
        if not updates:
            user = await self._repository.get(user_id)
            if not user:
                raise NotFoundRepositoryError("user not found")
            return user
        return await self._repository.update(user_id, updates)


def get_user_service() -> UserService:
    return UserService(UserRepository(get_db()))


__all__ = ["UserService", "get_user_service"]
