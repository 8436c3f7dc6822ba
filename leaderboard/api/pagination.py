"""
Link-header pagination over the open issue listing.

GitHub announces the next page in the ``Link`` response header:

    <https://api.github.com/...&page=2>; rel="next", <...&page=5>; rel="last"

Each page URL depends on the previous response, so pages are fetched one
after another.
"""

import re
from collections.abc import AsyncIterator
from typing import Optional

from leaderboard.exceptions import TransportError
from leaderboard.logging import get_logger
from leaderboard.models import Item

from .endpoints import RequestFactory
from .parsing import parse_list
from .transport import ApiRequest, Transport

logger = get_logger("github.pagination")

# A target URL may itself contain commas; its parameters run up to the next "<".
_LINK_TARGET = re.compile(r"<(?P<url>[^>]*)>(?P<params>[^<]*)")


def parse_next_link(link_header: Optional[str]) -> Optional[str]:
    """
    Extract the ``rel="next"`` URL from a Link header value.

    Args:
        link_header: Raw Link header value (may be None or empty)

    Returns:
        Next page URL, or None when there is no next page
    """
    if not link_header:
        return None

    for match in _LINK_TARGET.finditer(link_header):
        url = match.group("url").strip()
        for param in match.group("params").split(";"):
            key, _, value = param.partition("=")
            if key.strip().lower() != "rel":
                continue
            relations = value.strip(' \t,"').split()
            if "next" in relations and url:
                return url
    return None


class Paginator:
    """
    Drains the open issue listing, skipping pull requests.

    Example:
        paginator = Paginator(transport, requests)
        async for item in paginator.fetch_all():
            print(item.id, item.title)
    """

    def __init__(
        self,
        transport: Transport,
        requests: RequestFactory,
        max_pages: Optional[int] = None,
    ):
        self.transport = transport
        self.requests = requests
        self.max_pages = max_pages

    async def fetch_all(self, cursor: Optional[str] = None) -> AsyncIterator[Item]:
        """
        Yield every issue across all pages, in page order.

        Args:
            cursor: Optional page URL to start from instead of page 1

        A transport failure or non-success status ends the sequence early;
        items already yielded stand.
        """
        request: Optional[ApiRequest] = (
            self.requests.continuation(cursor) if cursor else self.requests.listing()
        )
        pages = 0

        while request is not None:
            if self.max_pages is not None and pages >= self.max_pages:
                logger.warning("pagination_page_cap_reached", max_pages=self.max_pages)
                return

            try:
                response = await self.transport.get(request)
            except TransportError as e:
                logger.warning("pagination_stopped", url=request.url, error=str(e))
                return

            if not response.ok:
                logger.warning("pagination_stopped", url=request.url, status=response.status)
                return

            page_items = parse_list(response, Item)
            pages += 1
            kept = [item for item in page_items if not item.is_container_link]
            logger.debug(
                "page_fetched",
                page=pages,
                items=len(kept),
                pull_requests_skipped=len(page_items) - len(kept),
            )

            for item in kept:
                yield item

            next_url = parse_next_link(response.header("Link"))
            request = self.requests.continuation(next_url) if next_url else None

    async def collect(self, cursor: Optional[str] = None) -> list[Item]:
        """Drain fetch_all into a list."""
        return [item async for item in self.fetch_all(cursor)]
