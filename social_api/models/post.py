from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .identifiers import RecordId


class Post(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: RecordId = Field(validation_alias=AliasChoices("_id", "id"))
    title: str
    content: str
    user_id: str = Field(alias="userId")


class PostCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    user_id: str = Field(alias="userId", min_length=1)


class PostPatch(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


__all__ = ["Post", "PostCreateRequest", "PostPatch"]
