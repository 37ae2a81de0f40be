"""Card schemas."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from around.schemas.fields import Link, Name


class CardCreate(BaseModel):
    """Create a new card. The owner always comes from the token."""

    model_config = ConfigDict(extra="forbid")

    name: Name
    link: Link


class CardResponse(BaseModel):
    """Card response, with the owner and likes given as user ids."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    link: str
    # ORM objects expose owner_id (owner is the relationship); dumped responses use owner
    owner: str = Field(
        validation_alias=AliasChoices("owner_id", "owner"), serialization_alias="owner"
    )
    likes: list[str] = Field(default_factory=list)
    created_at: datetime = Field(alias="createdAt")


class CardEnvelope(BaseModel):
    data: CardResponse
