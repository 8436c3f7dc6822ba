"""
Data models for Issue Leaderboard.

All models parsed from API responses are immutable pydantic models.
"""

from .issue import Item
from .ranking import RankedEntry
from .reaction import Actor, Reaction
from .tally import ReactionTally

__all__ = [
    "Item",
    "Actor",
    "Reaction",
    "ReactionTally",
    "RankedEntry",
]
