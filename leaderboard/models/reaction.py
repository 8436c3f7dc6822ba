"""
Reaction models.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Actor(BaseModel):
    """User who left a reaction."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    handle: str = Field(validation_alias=AliasChoices("login", "handle"))


class Reaction(BaseModel):
    """A single reaction on an issue, e.g. kind "+1" or "laugh"."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    kind: str = Field(validation_alias=AliasChoices("content", "kind"))
    actor: Actor = Field(validation_alias=AliasChoices("user", "actor"))
