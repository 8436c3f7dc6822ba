"""Exception types raised by the leaderboard pipeline."""


class LeaderboardError(Exception):
    """Base class for leaderboard errors."""


class ConfigurationError(LeaderboardError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        message = "Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


class TransportError(LeaderboardError):
    """Raised when a request fails or returns a non-success status."""

    def __init__(self, url: str, status: int | None = None, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        detail = f"status {status}" if status is not None else (reason or "request failed")
        super().__init__(f"GET {url}: {detail}")


class ResponseParseError(LeaderboardError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, url: str, error: Exception):
        self.url = url
        self.error = error
        super().__init__(f"Malformed response from {url}: {error}")


__all__ = [
    "LeaderboardError",
    "ConfigurationError",
    "TransportError",
    "ResponseParseError",
]
