"""Search server client.

This package provides the connection used to talk to an HTTP search server
(Elasticsearch-compatible): multi-search batching, index and alias
lifecycle, and index metadata.

Usage:
    from flipsearch.client import Connection, SearchCriteria

    # Base URL from environment (FLIPSEARCH_BASE_URL), default localhost:9200
    connection = Connection()
    responses = connection.msearch([
        SearchCriteria("products", {"query": {"match_all": {}}}),
        SearchCriteria("comments", {"query": {"term": {"state": "new"}}}),
    ])

    # Explicit configuration
    config = SearchConfig(base_url="https://search.internal:9200", timeout=10)
    connection = Connection(config)
"""

from .config import SearchConfig
from .connection import Connection
from .criteria import Criteria, SearchCriteria
from .exceptions import (
    FlipSearchError,
    NotFoundError,
    ProtocolError,
    SerializationError,
    TransportConnectionError,
    TransportError,
)
from .http import HTTPTransport
from .response import SearchResponse
from .serializer import JSONSerializer
from .transport import SearchTransport

__all__ = [
    # Main API
    "Connection",
    "SearchConfig",
    # Requests and responses
    "Criteria",
    "SearchCriteria",
    "SearchResponse",
    # Collaborators
    "SearchTransport",
    "HTTPTransport",
    "JSONSerializer",
    # Exceptions
    "FlipSearchError",
    "NotFoundError",
    "ProtocolError",
    "SerializationError",
    "TransportConnectionError",
    "TransportError",
]
