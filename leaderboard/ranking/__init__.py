# Leaderboard ranking

from .ranker import rank

__all__ = ["rank"]
