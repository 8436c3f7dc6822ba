"""
Concurrent reaction aggregation.

One reaction request per issue, at most ``max_concurrency`` in flight, with
every per-issue count merged into a single ReactionTally.
"""

import asyncio
from collections.abc import Iterable, Sequence
from typing import Optional

from leaderboard.constants import DEFAULT_MAX_CONCURRENCY, THUMBS_UP
from leaderboard.exceptions import TransportError
from leaderboard.logging import get_logger, log_timing
from leaderboard.models import Reaction, ReactionTally

from .endpoints import RequestFactory
from .pagination import parse_next_link
from .parsing import parse_list
from .transport import ApiRequest, Transport

logger = get_logger("github.reactions")


def count_reactions(
    reactions: Iterable[Reaction],
    labels: Iterable[str] = (THUMBS_UP,),
    unique_actors: bool = False,
) -> int:
    """
    Count reactions whose kind is one of ``labels``.

    With ``unique_actors`` each user counts at most once, whatever the
    number of matching labels they left.
    """
    wanted = set(labels)
    matching = [reaction for reaction in reactions if reaction.kind in wanted]
    if unique_actors:
        return len({reaction.actor.handle for reaction in matching})
    return len(matching)


class ReactionAggregator:
    """
    Fetches reactions for many issues and tallies the counted labels.

    Example:
        aggregator = ReactionAggregator(transport, requests, max_concurrency=8)
        tally = await aggregator.aggregate([1, 2, 3])
    """

    def __init__(
        self,
        transport: Transport,
        requests: RequestFactory,
        labels: Sequence[str] = (THUMBS_UP,),
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        unique_actors: bool = False,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.transport = transport
        self.requests = requests
        self.labels = tuple(labels) or (THUMBS_UP,)
        self.max_concurrency = max_concurrency
        self.unique_actors = unique_actors

    async def fetch_reactions(self, issue_id: int) -> list[Reaction]:
        """
        All reactions of one issue, following ``rel="next"`` across pages.

        A failed first request yields an empty list; a failure on a later
        page keeps the reactions already collected.
        """
        reactions: list[Reaction] = []
        request: Optional[ApiRequest] = self.requests.reactions(issue_id)
        pages = 0
        while request is not None:
            try:
                response = await self.transport.get(request)
            except TransportError as e:
                logger.warning(
                    "reaction_fetch_failed", issue=issue_id, page=pages + 1, error=str(e)
                )
                break

            if not response.ok:
                logger.warning(
                    "reaction_fetch_failed", issue=issue_id, page=pages + 1, status=response.status
                )
                break

            reactions.extend(parse_list(response, Reaction))
            pages += 1
            next_url = parse_next_link(response.header("Link"))
            request = self.requests.continuation(next_url) if next_url else None

        return reactions

    @log_timing("reaction_aggregation")
    async def aggregate(self, ids: Iterable[int]) -> ReactionTally:
        """
        Tally counted reactions for every distinct id.

        Every id gets an entry, including ids whose fetch failed (count 0).
        If any fetch raises, the remaining fetches are cancelled.
        """
        tally = ReactionTally()
        lock = asyncio.Lock()
        semaphore = asyncio.Semaphore(self.max_concurrency)
        unique_ids = list(dict.fromkeys(ids))

        async def worker(issue_id: int) -> None:
            async with semaphore:
                reactions = await self.fetch_reactions(issue_id)
            count = count_reactions(reactions, self.labels, self.unique_actors)
            async with lock:
                tally.add(issue_id, count)

        tasks = [asyncio.ensure_future(worker(issue_id)) for issue_id in unique_ids]
        try:
            await asyncio.gather(*tasks)
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        logger.info(
            "aggregation_complete",
            issues=len(unique_ids),
            issues_with_reactions=sum(1 for _, count in tally.items() if count),
            labels=list(self.labels),
        )
        return tally
