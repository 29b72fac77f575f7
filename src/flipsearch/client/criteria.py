"""Search request objects consumed by the Connection."""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Criteria(Protocol):
    """One pending search request.

    Anything exposing these attributes can be passed to Connection.msearch,
    so query builders do not need to subclass SearchCriteria.
    """

    @property
    def index_name_with_prefix(self) -> str:
        """Target index name, including any index prefix."""
        ...

    @property
    def type_name(self) -> str:
        """Target type name."""
        ...

    @property
    def request(self) -> dict[str, Any]:
        """Request body sent for this search."""
        ...


@dataclass(frozen=True)
class SearchCriteria:
    """Plain search request targeting one index.

    Usage:
        SearchCriteria("products", {"query": {"match_all": {}}})
        SearchCriteria("comments", {"query": {"term": {"x": 1}}}, index_prefix="staging-")
    """

    index_name: str
    request: dict[str, Any] = field(default_factory=dict)
    type_name: str = "_doc"
    index_prefix: str = ""

    @property
    def index_name_with_prefix(self) -> str:
        return f"{self.index_prefix}{self.index_name}"
