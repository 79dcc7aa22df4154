from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .identifiers import RecordId


class Profile(BaseModel):
    """Profile record; at most one exists per user."""

    model_config = ConfigDict(populate_by_name=True)

    id: RecordId = Field(validation_alias=AliasChoices("_id", "id"))
    avatar: str
    sex: str
    birthday: int
    country: str
    street: str
    city: str
    member_type_id: str = Field(alias="memberTypeId")
    user_id: str = Field(alias="userId")


class ProfileCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    avatar: str
    sex: str
    birthday: int
    country: str
    street: str
    city: str
    member_type_id: str = Field(alias="memberTypeId", min_length=1)
    user_id: str = Field(alias="userId", min_length=1)


class ProfilePatch(BaseModel):
    """Mutable profile fields. The owning user cannot be changed."""

    model_config = ConfigDict(populate_by_name=True)

    avatar: Optional[str] = None
    sex: Optional[str] = None
    birthday: Optional[int] = None
    country: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    member_type_id: Optional[str] = Field(default=None, alias="memberTypeId", min_length=1)


__all__ = ["Profile", "ProfileCreateRequest", "ProfilePatch"]
