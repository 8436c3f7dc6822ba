# GitHub API integration module

from .endpoints import RequestFactory
from .pagination import Paginator, parse_next_link
from .reactions import ReactionAggregator, count_reactions
from .transport import ApiRequest, ApiResponse, HttpTransport, Transport

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "HttpTransport",
    "Transport",
    "RequestFactory",
    "Paginator",
    "parse_next_link",
    "ReactionAggregator",
    "count_reactions",
]
