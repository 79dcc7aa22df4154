from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PendingUserDeletion(BaseModel):
    """Journal entry for a user deletion whose cascade has not finished."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(validation_alias=AliasChoices("_id", "userId"), serialization_alias="userId")
    token: str
    started_at: int = Field(alias="startedAt")


__all__ = ["PendingUserDeletion"]
