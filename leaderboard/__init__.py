"""
Issue Leaderboard.

Ranks the open issues of a GitHub repository by their thumbs-up reactions.

Usage:
    # Config
    from leaderboard.config import get_settings, Settings

    # Logging
    from leaderboard.logging import get_logger, configure_logging

    # Pipeline
    from leaderboard.services import build_leaderboard
"""

__version__ = "1.0.0"
