"""Request descriptors for the two GitHub endpoints the leaderboard uses."""

from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from leaderboard.config import Settings
from leaderboard.constants import (
    DEFAULT_PER_PAGE,
    DEFAULT_USER_AGENT,
    GITHUB_ACCEPT,
    GITHUB_API_BASE,
    ISSUE_STATE,
)

from .transport import ApiRequest


@dataclass(frozen=True)
class RequestFactory:
    """
    Builds authenticated requests for one repository.

    Constructed once at startup from explicit configuration; nothing here
    reads the environment.
    """

    owner: str
    repo: str
    token: str = field(repr=False)
    user_agent: str = DEFAULT_USER_AGENT
    api_base: str = GITHUB_API_BASE
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def from_settings(cls, settings: Settings, owner: str, repo: str) -> "RequestFactory":
        """Raises ConfigurationError when no token is configured."""
        return cls(
            owner=owner,
            repo=repo,
            token=settings.require_token(),
            user_agent=settings.user_agent,
            api_base=settings.api_base,
            per_page=settings.per_page,
        )

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def repo_base(self) -> str:
        return f"{self.api_base}/repos/{quote(self.owner, safe='')}/{quote(self.repo, safe='')}"

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "User-Agent": self.user_agent,
            "Accept": GITHUB_ACCEPT,
        }

    def listing(self, page: int = 1) -> ApiRequest:
        """Open issues, one page."""
        query = urlencode({"state": ISSUE_STATE, "page": page, "per_page": self.per_page})
        return ApiRequest(url=f"{self.repo_base}/issues?{query}", headers=self.headers())

    def continuation(self, cursor: str) -> ApiRequest:
        """Follow a server-supplied next-page URL as is."""
        return ApiRequest(url=cursor, headers=self.headers())

    def reactions(self, issue_id: int) -> ApiRequest:
        """Reactions of one issue, first page."""
        query = urlencode({"per_page": self.per_page})
        return ApiRequest(
            url=f"{self.repo_base}/issues/{issue_id}/reactions?{query}", headers=self.headers()
        )
