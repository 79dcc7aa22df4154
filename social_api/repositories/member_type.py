"""Repository helpers for member type records."""

from __future__ import annotations

from ..db.collections import MEMBER_TYPES_COLLECTION
from ..models.member_type import MemberType
from .base import RecordRepository


class MemberTypeRepository(RecordRepository[MemberType]):
    collection_name = MEMBER_TYPES_COLLECTION
    record_model = MemberType
    entity_label = "member type"


__all__ = ["MemberTypeRepository"]
