"""Follow relation between users.

Each user carries ``subscribedToUserIds``. Subscribing writes to both the
follower's and the followed user's list; unsubscribing only rewrites the
followed user's list unless ``symmetric_unsubscribe`` is enabled. Both paths
read whole lists and write them back as separate single-record updates, so
concurrent calls on the same user can lose edges and a failure between the
two writes leaves the first one in place.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..db import get_db
from ..models.user import User
from ..repositories.exceptions import NotFoundRepositoryError
from ..repositories.user import UserRepository
from .exceptions import InvalidOperationError, require_record_id

LOGGER = logging.getLogger("uvicorn.error")


class SubscriptionService:
    def __init__(self, user_repo: UserRepository, *, symmetric_unsubscribe: bool = False) -> None:
        self._users = user_repo
        self._symmetric_unsubscribe = symmetric_unsubscribe

    async def subscribe(self, parent_id: str, child_id: str) -> User:
        """Record that ``parent_id`` follows ``child_id``; returns the updated parent."""

        parent_id = require_record_id(parent_id)
        child_id = require_record_id(child_id, "userId")

        parent = await self._users.get(parent_id)
        child = await self._users.get(child_id)
        if not parent or not child:
            raise NotFoundRepositoryError("user not found")

        parent_ids = [*parent.subscribed_to_user_ids, child_id]
        child_ids = [*child.subscribed_to_user_ids, parent_id]

        updated_parent = await self._users.update(parent_id, {"subscribedToUserIds": parent_ids})
        await self._users.update(child_id, {"subscribedToUserIds": child_ids})
        LOGGER.debug("User %s subscribed to %s", parent_id, child_id)
        return updated_parent

    async def unsubscribe(self, parent_id: str, child_id: str) -> User:
        """Drop the ``parent_id`` -> ``child_id`` edge; returns the updated child."""

        parent_id = require_record_id(parent_id)
        child_id = require_record_id(child_id, "userId")

        parent = await self._users.get(parent_id)
        child = await self._users.get(child_id)
        # An unknown parent follows nobody
        if not parent or child_id not in parent.subscribed_to_user_ids:
            raise InvalidOperationError("user is not a follower")
        if not child:
            raise NotFoundRepositoryError("user not found")

        child_ids = [uid for uid in child.subscribed_to_user_ids if uid != parent_id]
        updated_child = await self._users.update(child_id, {"subscribedToUserIds": child_ids})

        if self._symmetric_unsubscribe:
            parent_ids = [uid for uid in parent.subscribed_to_user_ids if uid != child_id]
            await self._users.update(parent_id, {"subscribedToUserIds": parent_ids})

        LOGGER.debug("User %s unsubscribed from %s", parent_id, child_id)
        return updated_child


def get_subscription_service() -> SubscriptionService:
    settings = get_settings()
    return SubscriptionService(
        UserRepository(get_db()),
        symmetric_unsubscribe=settings.symmetric_unsubscribe,
    )


__all__ = ["SubscriptionService", "get_subscription_service"]
