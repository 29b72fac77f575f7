"""flipsearch - Connection library and CLI for HTTP search servers."""

from flipsearch.client import Connection, SearchCriteria, SearchResponse
from flipsearch.client.config import SearchConfig
from flipsearch.client.exceptions import (
    FlipSearchError,
    NotFoundError,
    ProtocolError,
    SerializationError,
    TransportConnectionError,
    TransportError,
)

try:
    from importlib.metadata import version
    __version__ = version("flipsearch")
except Exception:
    __version__ = "0.1.0"  # Fallback for development

__all__ = [
    "Connection",
    "FlipSearchError",
    "NotFoundError",
    "ProtocolError",
    "SearchConfig",
    "SearchCriteria",
    "SearchResponse",
    "SerializationError",
    "TransportConnectionError",
    "TransportError",
    "__version__",
]
