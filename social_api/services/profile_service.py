from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from ..config import get_settings
from ..db import get_db
from ..models.profile import Profile, ProfileCreateRequest, ProfilePatch
from ..repositories.exceptions import DuplicateKeyRepositoryError, NotFoundRepositoryError
from ..repositories.member_type import MemberTypeRepository
from ..repositories.profile import ProfileRepository
from ..repositories.user import UserRepository
from .exceptions import InvalidOperationError, require_record_id

LOGGER = logging.getLogger("uvicorn.error")


class ProfileService:
    """Profile CRUD; creation enforces one profile per user and a known member type."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        user_repo: UserRepository,
        member_type_repo: MemberTypeRepository,
        *,
        member_type_ids: Iterable[str],
    ) -> None:
        self._profiles = profile_repo
        self._users = user_repo
        self._member_types = member_type_repo
        self._member_type_ids = frozenset(member_type_ids)

    async def _ensure_member_type(self, member_type_id: str) -> None:
        if member_type_id not in self._member_type_ids:
            raise InvalidOperationError(f"unknown member type: {member_type_id}")
        if not await self._member_types.get(member_type_id):
            raise InvalidOperationError(f"member type {member_type_id} is not configured")

    async def list_profiles(self) -> list[Profile]:
        return await self._profiles.scan()

    async def get_profile(self, profile_id: str) -> Optional[Profile]:
        try:
            profile_id = require_record_id(profile_id)
        except InvalidOperationError:
            return None
        return await self._profiles.get(profile_id)

    async def create_profile(self, payload: ProfileCreateRequest) -> Profile:
        """Validate fully, then insert once; a rejected request writes nothing."""

        user_id = require_record_id(payload.user_id, "userId")
        await self._ensure_member_type(payload.member_type_id)
        if not await self._users.get(user_id):
            raise InvalidOperationError("user does not exist")
        if await self._profiles.get_by_user_id(user_id):
            raise InvalidOperationError("user already has a profile")

        fields = payload.model_dump(by_alias=True)
        fields["userId"] = user_id
        try:
            created = await self._profiles.insert(fields)
        except DuplicateKeyRepositoryError as exc:
            raise InvalidOperationError("user already has a profile") from exc

        if not created.id:
            raise InvalidOperationError("profile was stored without an id")
        LOGGER.debug("Created profile %s for user %s", created.id, user_id)
        return created

    async def update_profile(self, profile_id: str, patch: ProfilePatch) -> Profile:
        profile_id = require_record_id(profile_id)
        updates: Dict[str, Any] = patch.model_dump(by_alias=True, exclude_none=True)
        if "memberTypeId" in updates:
            await self._ensure_member_type(updates["memberTypeId"])
        if not updates:
            profile = await self._profiles.get(profile_id)
            if not profile:
                raise NotFoundRepositoryError("profile not found")
            return profile
        return await self._profiles.update(profile_id, updates)

    async def delete_profile(self, profile_id: str) -> Profile:
        return await self._profiles.remove(require_record_id(profile_id))


def get_profile_service() -> ProfileService:
    settings = get_settings()
    db = get_db()
    return ProfileService(
        ProfileRepository(db),
        UserRepository(db),
        MemberTypeRepository(db),
        member_type_ids=settings.member_type_ids,
    )


__all__ = ["ProfileService", "get_profile_service"]
