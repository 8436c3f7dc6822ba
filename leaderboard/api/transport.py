"""
Async HTTP transport.

Features:
- Async HTTP with aiohttp
- Connection pooling sized to the aggregation concurrency
- Per-request deadline; expiry surfaces as TransportError
"""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

import aiohttp

from leaderboard.constants import DEFAULT_MAX_CONCURRENCY, DEFAULT_REQUEST_TIMEOUT
from leaderboard.exceptions import TransportError
from leaderboard.logging import get_logger

logger = get_logger("http")


@dataclass(frozen=True)
class ApiRequest:
    """A GET request: absolute URL (query included) plus headers."""

    url: str
    headers: Mapping[str, str] = field(default_factory=dict, repr=False)


@dataclass(frozen=True)
class ApiResponse:
    """Status, headers and raw body of a completed request."""

    url: str
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class Transport(Protocol):
    """Anything that can perform an ApiRequest."""

    async def get(self, request: ApiRequest) -> ApiResponse: ...


class HttpTransport:
    """
    aiohttp-backed transport.

    Returns a response for every status code; only network failures and
    timeouts raise TransportError.

    Example:
        async with HttpTransport(max_concurrency=8) as transport:
            response = await transport.get(ApiRequest(url, headers))
    """

    def __init__(
        self,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        self.max_concurrency = max_concurrency
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HttpTransport":
        """Create aiohttp session on context entry."""
        connector = aiohttp.TCPConnector(
            limit=self.max_concurrency * 2,
            limit_per_host=self.max_concurrency,
        )
        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close session on context exit."""
        if self._session:
            await self._session.close()
            self._session = None

    async def get(self, request: ApiRequest) -> ApiResponse:
        if not self._session:
            raise RuntimeError("Transport not initialized. Use 'async with' context.")

        try:
            async with self._session.get(request.url, headers=dict(request.headers)) as response:
                body = await response.read()
                headers: Dict[str, str] = {k: v for k, v in response.headers.items()}
                logger.debug("http_get", url=request.url, status=response.status)
                return ApiResponse(
                    url=request.url,
                    status=response.status,
                    headers=headers,
                    body=body,
                )
        except asyncio.TimeoutError as e:
            raise TransportError(request.url, reason=f"timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(request.url, reason=str(e) or type(e).__name__) from e
