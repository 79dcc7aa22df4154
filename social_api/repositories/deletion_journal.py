"""Journal of user deletions whose cascade is still in flight."""

from __future__ import annotations

import time
from typing import Optional

from ..db.collections import USER_DELETIONS_COLLECTION
from ..models.deletion import PendingUserDeletion
from ..models.identifiers import new_record_id
from .base import RecordRepository, store_errors


class DeletionJournalRepository(RecordRepository[PendingUserDeletion]):
    """One entry per user id, owned by the caller that created it.

    Only the holder of an entry's token may close it, so a concurrent
    deletion of the same user can never drop another caller's entry.
    """

    collection_name = USER_DELETIONS_COLLECTION
    record_model = PendingUserDeletion
    entity_label = "pending deletion"

    async def open_entry(self, user_id: str) -> Optional[str]:
        """Open the entry for ``user_id``; returns its token, or None if it was already open."""

        token = new_record_id()
        with store_errors("open", self.collection_name):
            result = await self._collection.update_one(
                {"_id": user_id},
                {
                    "$setOnInsert": {
                        "_id": user_id,
                        "token": token,
                        "startedAt": int(time.time() * 1000),
                    }
                },
                upsert=True,
            )
        return token if result.upserted_id is not None else None

    async def close_entry(self, user_id: str, token: str) -> bool:
        with store_errors("close", self.collection_name):
            result = await self._collection.delete_one({"_id": user_id, "token": token})
        return bool(result.deleted_count)


__all__ = ["DeletionJournalRepository"]
