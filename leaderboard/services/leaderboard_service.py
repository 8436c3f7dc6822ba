"""
Leaderboard pipeline.

Paginator -> ReactionAggregator -> rank, for one repository.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from leaderboard.api import HttpTransport, Paginator, ReactionAggregator, RequestFactory, Transport
from leaderboard.config import Settings
from leaderboard.logging import LogContext, get_logger
from leaderboard.models import RankedEntry
from leaderboard.ranking import rank

logger = get_logger("leaderboard")


@dataclass
class LeaderboardResult:
    """Ranked entries plus what is needed to present them."""

    owner: str
    repo: str
    entries: list[RankedEntry]
    issue_count: int
    labels: list[str]
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


async def build_leaderboard(
    settings: Settings,
    owner: str,
    repo: str,
    labels: Optional[Sequence[str]] = None,
    limit: Optional[int] = None,
    unique_actors: bool = False,
    transport: Optional[Transport] = None,
) -> LeaderboardResult:
    """
    Build the reaction leaderboard of a repository's open issues.

    Args:
        settings: Application settings (token, agent, concurrency, timeout)
        owner: Repository owner
        repo: Repository name
        labels: Reaction kinds to count (default from settings, "+1")
        limit: Keep only the top N entries
        unique_actors: Count each user once per issue
        transport: Transport to use; an HttpTransport is opened when omitted

    Raises:
        ConfigurationError: when no token is configured, before any request
    """
    requests = RequestFactory.from_settings(settings, owner, repo)
    counted = list(labels or settings.reaction_labels_list)

    with LogContext(repo=requests.slug):
        if transport is not None:
            return await _run(transport, requests, settings, counted, limit, unique_actors)

        async with HttpTransport(
            max_concurrency=settings.max_concurrency,
            timeout=settings.request_timeout,
        ) as http:
            return await _run(http, requests, settings, counted, limit, unique_actors)


async def _run(
    transport: Transport,
    requests: RequestFactory,
    settings: Settings,
    labels: list[str],
    limit: Optional[int],
    unique_actors: bool,
) -> LeaderboardResult:
    paginator = Paginator(transport, requests)
    issues = await paginator.collect()
    logger.info("issues_collected", count=len(issues))

    aggregator = ReactionAggregator(
        transport,
        requests,
        labels=labels,
        max_concurrency=settings.max_concurrency,
        unique_actors=unique_actors,
    )
    tally = await aggregator.aggregate(issue.id for issue in issues)

    titles = {issue.id: issue.title for issue in issues}
    entries = rank(tally, titles=titles, limit=limit)
    logger.info("leaderboard_ranked", entries=len(entries))

    return LeaderboardResult(
        owner=requests.owner,
        repo=requests.repo,
        entries=entries,
        issue_count=len(issues),
        labels=list(aggregator.labels),
    )
