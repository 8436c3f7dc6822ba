"""Turn a reaction tally into leaderboard positions."""

from collections.abc import Mapping
from operator import itemgetter
from typing import Optional

from leaderboard.models import RankedEntry, ReactionTally


def rank(
    tally: ReactionTally | Mapping[int, int],
    titles: Optional[Mapping[int, str]] = None,
    limit: Optional[int] = None,
) -> list[RankedEntry]:
    """
    Rank issues by reaction count, highest first.

    Issues with no counted reactions are left out. The sort is stable, so
    ties keep the order in which the tally presented them.

    Args:
        tally: Completed tally of issue id -> count
        titles: Optional issue id -> title, carried onto the entries
        limit: Keep only the top N entries

    Returns:
        Entries with 1-based positions
    """
    counted = [(issue_id, count) for issue_id, count in tally.items() if count > 0]
    ordered = sorted(counted, key=itemgetter(1), reverse=True)
    if limit is not None:
        ordered = ordered[: max(limit, 0)]

    titles = titles or {}
    return [
        RankedEntry(id=issue_id, count=count, position=position, title=titles.get(issue_id))
        for position, (issue_id, count) in enumerate(ordered, 1)
    ]
