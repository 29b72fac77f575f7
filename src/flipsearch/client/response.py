"""Search response wrapper."""

from dataclasses import dataclass
from typing import Any

from .criteria import Criteria


@dataclass(frozen=True)
class SearchResponse:
    """Raw result payload paired with the criteria that produced it.

    The payload is passed through exactly as the server returned it.
    """

    criteria: Criteria
    raw: dict[str, Any]
