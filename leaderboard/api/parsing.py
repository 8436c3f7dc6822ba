"""Response body parsing."""

from functools import lru_cache
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from leaderboard.exceptions import ResponseParseError

from .transport import ApiResponse

M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def _list_adapter(model: type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(list[model])  # type: ignore[valid-type]


def parse_list(response: ApiResponse, model: type[M]) -> list[M]:
    """
    Parse a JSON array body into models.

    A body that is not a JSON array of the expected objects means the API
    contract changed, so this raises instead of degrading.

    Raises:
        ResponseParseError: on invalid JSON or schema mismatch
    """
    try:
        return _list_adapter(model).validate_json(response.body)
    except ValidationError as e:
        raise ResponseParseError(response.url, e) from e
