"""Cascade of corrective writes that follows a user deletion."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..db import get_db
from ..models.user import User
from ..repositories.deletion_journal import DeletionJournalRepository
from ..repositories.exceptions import NotFoundRepositoryError, RepositoryError
from ..repositories.post import PostRepository
from ..repositories.profile import ProfileRepository
from ..repositories.user import UserRepository
from .exceptions import require_record_id

LOGGER = logging.getLogger("uvicorn.error")


@dataclass
class CascadeResult:
    subscribers_updated: int = 0
    posts_removed: int = 0
    profile_removed: bool = False


class UserDeletionService:
    """Deletes users and purges or corrects every record that points at them.

    The user record is removed first; subscriber lists, posts and the profile
    are cleaned up afterwards with one store call per record. A journal entry
    written before the removal and dropped after the cleanup lets
    ``resume_pending_deletions`` finish a cascade that was interrupted.
    Only the caller that opened an entry closes it. Failures are not rolled
    back.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        post_repo: PostRepository,
        profile_repo: ProfileRepository,
        journal_repo: DeletionJournalRepository,
    ) -> None:
        self._users = user_repo
        self._posts = post_repo
        self._profiles = profile_repo
        self._journal = journal_repo

    async def delete_user(self, user_id: str) -> User:
        user_id = require_record_id(user_id)
        if not await self._users.get(user_id):
            raise NotFoundRepositoryError("user not found")

        token = await self._journal.open_entry(user_id)
        try:
            deleted = await self._users.remove(user_id)
        except NotFoundRepositoryError:
            # Removed concurrently. The entry stays open: the remover may not
            # own it and its cascade must stay replayable.
            raise
        except RepositoryError:
            # The user is still there, so there is nothing to replay.
            if token:
                await self._journal.close_entry(user_id, token)
            raise

        result = await self._cascade(user_id)
        if token:
            await self._journal.close_entry(user_id, token)
        LOGGER.info(
            "Deleted user %s: %s subscriber list(s) corrected, %s post(s) removed, profile removed=%s",
            user_id,
            result.subscribers_updated,
            result.posts_removed,
            result.profile_removed,
        )
        return deleted

    async def resume_pending_deletions(self) -> int:
        """Complete every journaled deletion; returns how many were replayed."""

        pending = await self._journal.scan()
        for entry in pending:
            user_id = entry.user_id
            if await self._users.get(user_id):
                try:
                    await self._users.remove(user_id)
                except NotFoundRepositoryError:
                    pass
            result = await self._cascade(user_id)
            await self._journal.close_entry(user_id, entry.token)
            LOGGER.info(
                "Resumed deletion of user %s: %s subscriber list(s), %s post(s), profile=%s",
                user_id,
                result.subscribers_updated,
                result.posts_removed,
                result.profile_removed,
            )
        return len(pending)

    async def _cascade(self, user_id: str) -> CascadeResult:
        result = CascadeResult()

        for subscriber in await self._users.find_subscribers(user_id):
            remaining = [uid for uid in subscriber.subscribed_to_user_ids if uid != user_id]
            await self._users.update(subscriber.id, {"subscribedToUserIds": remaining})
            result.subscribers_updated += 1

        for post in await self._posts.find_by_user_id(user_id):
            await self._posts.remove(post.id)
            result.posts_removed += 1

        profile = await self._profiles.get_by_user_id(user_id)
        if profile:
            await self._profiles.remove(profile.id)
            result.profile_removed = True

        return result


def get_user_deletion_service() -> UserDeletionService:
    db = get_db()
    return UserDeletionService(
        UserRepository(db),
        PostRepository(db),
        ProfileRepository(db),
        DeletionJournalRepository(db),
    )


__all__ = ["CascadeResult", "UserDeletionService", "get_user_deletion_service"]
