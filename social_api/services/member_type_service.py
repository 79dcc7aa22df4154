from __future__ import annotations

from typing import Any, Dict, Optional

from ..db import get_db
from ..models.member_type import MemberType, MemberTypePatch
from ..repositories.exceptions import NotFoundRepositoryError
from ..repositories.member_type import MemberTypeRepository


class MemberTypeService:
    """Member types are seeded on connect and only ever read or patched."""

    def __init__(self, repository: MemberTypeRepository) -> None:
        self._repository = repository

    async def list_member_types(self) -> list[MemberType]:
        return await self._repository.scan()

    async def get_member_type(self, member_type_id: str) -> Optional[MemberType]:
        return await self._repository.get(member_type_id.strip())

    async def update_member_type(self, member_type_id: str, patch: MemberTypePatch) -> MemberType:
        member_type_id = member_type_id.strip()
        updates: Dict[str, Any] = patch.model_dump(by_alias=True, exclude_none=True)
        if not updates:
            member_type = await self._repository.get(member_type_id)
            if not member_type:
                raise NotFoundRepositoryError("member type not found")
            return member_type
        return await self._repository.update(member_type_id, updates)


def get_member_type_service() -> MemberTypeService:
    return MemberTypeService(MemberTypeRepository(get_db()))


__all__ = ["MemberTypeService", "get_member_type_service"]
