"""
Issue listing model.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class Item(BaseModel):
    """
    An entry of the open issue listing.

    GitHub returns pull requests from the issues endpoint too; those carry a
    ``pull_request`` member and are flagged with ``is_container_link``.
    ``id`` is the issue number, which is what the reactions endpoint takes.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int = Field(validation_alias=AliasChoices("number", "id"))
    title: str
    is_container_link: bool = False

    @model_validator(mode="before")
    @classmethod
    def detect_container_link(cls, data: Any) -> Any:
        if isinstance(data, dict) and "pull_request" in data:
            data = {**data, "is_container_link": data["pull_request"] is not None}
        return data
