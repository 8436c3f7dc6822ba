"""
Ranked leaderboard entry.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RankedEntry(BaseModel):
    """Position of an issue on the leaderboard."""
    model_config = ConfigDict(frozen=True)

    id: int
    count: int = Field(ge=1)
    position: int = Field(ge=1)
    title: Optional[str] = None
