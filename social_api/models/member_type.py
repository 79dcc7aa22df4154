from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Values used when a configured member type is first seeded
DEFAULT_MEMBER_TYPES: Dict[str, Dict[str, Any]] = {
    "basic": {"discount": 0, "monthPostsLimit": 20},
    "business": {"discount": 5, "monthPostsLimit": 100},
}


class MemberType(BaseModel):
    """Member type configuration. Identifiers are fixed names, not UUIDs."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    discount: float
    month_posts_limit: int = Field(alias="monthPostsLimit")


class MemberTypePatch(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    discount: Optional[float] = None
    month_posts_limit: Optional[int] = Field(default=None, alias="monthPostsLimit")


__all__ = ["DEFAULT_MEMBER_TYPES", "MemberType", "MemberTypePatch"]
