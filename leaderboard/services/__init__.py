"""
Service layer for Issue Leaderboard.

Usage:
    from leaderboard.services import build_leaderboard

    result = asyncio.run(build_leaderboard(get_settings(), "owner", "repo"))
"""

from .leaderboard_service import LeaderboardResult, build_leaderboard

__all__ = ["LeaderboardResult", "build_leaderboard"]
