"""
Application constants for Issue Leaderboard.

Contains GitHub API endpoints, defaults, and reaction labels.
"""

# =============================================================================
# GitHub API
# =============================================================================

GITHUB_API_BASE = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github+json"

DEFAULT_OWNER = "FlorianWoelki"
DEFAULT_REPO = "obsidian-iconize"
DEFAULT_USER_AGENT = "FlorianWoelki"

# GitHub caps per_page at 100
DEFAULT_PER_PAGE = 100
ISSUE_STATE = "open"

# =============================================================================
# Concurrency
# =============================================================================

DEFAULT_MAX_CONCURRENCY = 8
DEFAULT_REQUEST_TIMEOUT = 30

# =============================================================================
# Reactions
# =============================================================================

THUMBS_UP = "+1"

REACTION_EMOJI = {
    "+1": "👍",
    "-1": "👎",
    "laugh": "😄",
    "hooray": "🎉",
    "confused": "😕",
    "heart": "❤️",
    "rocket": "🚀",
    "eyes": "👀",
}

REACTION_LABELS = tuple(REACTION_EMOJI)
