from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .identifiers import RecordId


class User(BaseModel):
    """User record as stored in MongoDB and returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: RecordId = Field(validation_alias=AliasChoices("_id", "id"))
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    subscribed_to_user_ids: List[str] = Field(default_factory=list, alias="subscribedToUserIds")


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str


class UserPatch(BaseModel):
    """Mutable fields for partial user updates."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None


class SubscriptionRequest(BaseModel):
    """Body of the subscribeTo / unsubscribeFrom endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId", min_length=1)


__all__ = ["SubscriptionRequest", "User", "UserCreateRequest", "UserPatch"]
