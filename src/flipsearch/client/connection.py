"""Connection to a search server.

This module provides the single gateway to the remote search service:
single and batched searches, index and alias lifecycle, and index metadata.
It builds URLs and payloads, delegates the wire exchange to a transport and
classifies the results.
"""

import logging
from collections.abc import Iterable
from typing import Any

from .config import SearchConfig
from .criteria import Criteria
from .exceptions import ProtocolError, TransportError
from .http import HTTPTransport
from .response import SearchResponse
from .serializer import JSONSerializer
from .transport import SearchTransport

logger = logging.getLogger("flipsearch")

JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}
NDJSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/x-ndjson"}


class Connection:
    """Connection to one search server endpoint.

    A Connection holds no per-call state apart from the memoized server
    version, so one instance can be shared by concurrent callers.

    Usage:
        # Base URL from environment / .env (FLIPSEARCH_BASE_URL)
        connection = Connection()
        connection.create_index("products", {"settings": {"number_of_shards": 1}})

        # Explicit base URL
        with Connection(base_url="http://localhost:9200") as connection:
            responses = connection.msearch([
                SearchCriteria("products", {"query": {"match_all": {}}}),
                SearchCriteria("comments", {"query": {"match_all": {}}}),
            ])

        # Inject custom transport (for testing)
        connection = Connection(transport=mock_transport)
    """

    def __init__(
        self,
        config: SearchConfig | None = None,
        transport: SearchTransport | None = None,
        serializer: JSONSerializer | None = None,
        base_url: str | None = None,
    ):
        """Initialize connection.

        Args:
            config: Configuration (loads from environment if None)
            transport: Optional pre-configured transport. If provided, config
                is still used for the base URL but not to build a transport.
            serializer: Optional payload serializer (JSONSerializer if None)
            base_url: Optional base URL overriding config.base_url
        """
        self.config = config or SearchConfig()
        self._base_url = (base_url or self.config.base_url).rstrip("/")
        self._client = transport or HTTPTransport(self.config)
        self._serializer = serializer or JSONSerializer()
        self._version: str | None = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False

    @property
    def base_url(self) -> str:
        """Base URL of the search server."""
        return self._base_url

    def close(self) -> None:
        """Close the underlying transport and release resources."""
        self._client.close()

    def _parse(self, text: str) -> Any:
        return self._serializer.loads(text)

    def _dump(self, value: Any) -> str:
        return self._serializer.dumps(value)

    def version(self) -> str:
        """Query and memoize the version of the search server.

        Only the first successful call hits the network. A failed call leaves
        the cache unset, so the next call tries again.

        Returns:
            The server version, e.g. "7.17.9"

        Raises:
            TransportError: If the request fails
            ProtocolError: If the reply carries no version number
        """
        if self._version is None:
            reply = self._parse(self._client.get(f"{self.base_url}/"))
            try:
                number = reply["version"]["number"]
            except (KeyError, TypeError) as e:
                raise ProtocolError(f"Server info has no version number: {reply!r}") from e
            if not isinstance(number, str):
                raise ProtocolError(f"Server version number is not a string: {number!r}")
            logger.debug(f"Search server version {number}")
            self._version = number
        return self._version

    def msearch(self, criterias: Iterable[Criteria]) -> list[SearchResponse]:
        """Execute several searches within a single multi-search request.

        Each criteria contributes a header line naming its index and type and
        a body line holding its request. Replies are paired back to their
        criteria by position.

        Args:
            criterias: Search requests, in the order responses are wanted

        Returns:
            One SearchResponse per criteria, in input order. An empty input
            returns an empty list without contacting the server.

        Raises:
            TransportError: If the request fails
            ProtocolError: If the reply has no responses array or its length
                differs from the number of criteria
        """
        criterias = list(criterias)
        if not criterias:
            return []

        lines = []
        for criteria in criterias:
            lines.append(self._dump({
                "index": criteria.index_name_with_prefix,
                "type": criteria.type_name,
            }))
            lines.append(self._dump(criteria.request))
        payload = "\n".join(lines) + "\n"

        logger.debug(f"Sending multi-search with {len(criterias)} requests")
        reply = self._parse(
            self._client.post(f"{self.base_url}/_msearch", content=payload, headers=NDJSON_HEADERS)
        )

        responses = reply.get("responses") if isinstance(reply, dict) else None
        if not isinstance(responses, list):
            raise ProtocolError("Multi-search reply has no responses array")
        if len(responses) != len(criterias):
            raise ProtocolError(
                f"Multi-search returned {len(responses)} responses for {len(criterias)} requests"
            )

        return [
            SearchResponse(criteria, response)
            for criteria, response in zip(criterias, responses)
        ]

    def update_aliases(self, payload: dict[str, Any]) -> Any:
        """Add and remove index aliases.

        Example:
            connection.update_aliases({"actions": [
                {"remove": {"index": "test1", "alias": "alias1"}},
                {"add": {"index": "test2", "alias": "alias1"}},
            ]})

        Args:
            payload: The raw request payload

        Returns:
            The parsed reply
        """
        return self._parse(
            self._client.post(f"{self.base_url}/_aliases", content=self._dump(payload), headers=JSON_HEADERS)
        )

    def get_aliases(self, index_name: str = "*", alias_name: str = "*") -> Any:
        """Fetch information about index aliases.

        Args:
            index_name: Index name, comma separated list or pattern
            alias_name: Alias name, comma separated list or pattern

        Returns:
            The parsed reply
        """
        return self._parse(
            self._client.get(f"{self.base_url}/{index_name}/_alias/{alias_name}", headers=JSON_HEADERS)
        )

    def alias_exists(self, alias_name: str) -> bool:
        """Return whether the alias exists.

        Raises:
            TransportError: For any failure other than 404
        """
        try:
            self._client.get(f"{self.base_url}/_alias/{alias_name}", headers=JSON_HEADERS)
        except TransportError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def get_indices(self, name: str = "*") -> Any:
        """Fetch information about indices matching a name or pattern."""
        return self._parse(
            self._client.get(f"{self.base_url}/_cat/indices/{name}", headers=JSON_HEADERS)
        )

    def create_index(self, index_name: str, index_settings: dict[str, Any] | None = None) -> bool:
        """Create an index, applying settings and mappings if given.

        Creating an index that already exists is rejected by the server and
        surfaces as TransportError.
        """
        self._client.put(
            self.index_url(index_name),
            content=self._dump(index_settings or {}),
            headers=JSON_HEADERS,
        )
        return True

    def update_index_settings(self, index_name: str, index_settings: dict[str, Any]) -> bool:
        """Update the settings of an existing index."""
        self._client.put(
            f"{self.index_url(index_name)}/_settings",
            content=self._dump(index_settings),
            headers=JSON_HEADERS,
        )
        return True

    def get_index_settings(self, index_name: str) -> Any:
        """Fetch the settings of an index."""
        return self._parse(
            self._client.get(f"{self.index_url(index_name)}/_settings", headers={"Accept": "application/json"})
        )

    def refresh(self, index_names: str | Iterable[str] | None = None) -> bool:
        """Make recent writes searchable.

        Args:
            index_names: Index name or names to refresh. Refreshes all
                indices if None.
        """
        if index_names is None:
            url = f"{self.base_url}/_refresh"
        else:
            if isinstance(index_names, str):
                index_names = [index_names]
            url = f"{self.index_url(','.join(index_names))}/_refresh"

        self._client.post(url, content=self._dump({}), headers=JSON_HEADERS)
        return True

    def update_mapping(self, index_name: str, type_name: str, mapping: dict[str, Any]) -> bool:
        """Update the mapping of a type within an index."""
        self._client.put(
            f"{self.type_url(index_name, type_name)}/_mapping",
            content=self._dump(mapping),
            headers=JSON_HEADERS,
        )
        return True

    def get_mapping(self, index_name: str, type_name: str) -> Any:
        """Fetch the mapping of a type within an index."""
        return self._parse(
            self._client.get(
                f"{self.type_url(index_name, type_name)}/_mapping",
                headers={"Accept": "application/json"},
            )
        )

    def delete_index(self, index_name: str) -> bool:
        """Delete an index."""
        self._client.delete(self.index_url(index_name))
        return True

    def index_exists(self, index_name: str) -> bool:
        """Return whether the index exists.

        Raises:
            TransportError: For any failure other than 404
        """
        try:
            self._client.head(self.index_url(index_name), headers={"Accept": "application/json"})
        except TransportError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def type_url(self, index_name: str, type_name: str) -> str:
        """URL of a type within an index, e.g. http://localhost:9200/products/item."""
        return f"{self.index_url(index_name)}/{type_name}"

    def index_url(self, index_name: str) -> str:
        """URL of an index, e.g. http://localhost:9200/products."""
        return f"{self.base_url}/{index_name}"
