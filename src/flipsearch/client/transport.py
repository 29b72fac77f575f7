"""Transport protocol for search server communication.

This module defines the interface the Connection needs from an HTTP
transport. Transports work on absolute URLs and hand back the raw response
body; decoding is left to the serializer.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SearchTransport(Protocol):
    """Protocol defining the transport interface.

    Transports are responsible for:
    - Executing HTTP verbs against absolute URLs
    - Sending request headers and raw body content
    - Raising classified exceptions for non-2xx responses and network failures

    Transports must not retry on their own.
    """

    def get(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Execute an HTTP GET request.

        Args:
            url: Absolute URL (e.g., "http://localhost:9200/_cat/indices/*")
            headers: Optional request headers

        Returns:
            Raw response body text

        Raises:
            TransportConnectionError: If unable to connect or the request timed out
            NotFoundError: If the resource was not found (404)
            TransportError: For other non-2xx responses
        """
        ...

    def head(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Execute an HTTP HEAD request.

        Returns:
            Empty string on success

        Raises:
            Same as get()
        """
        ...

    def post(
        self,
        url: str,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Execute an HTTP POST request.

        Args:
            url: Absolute URL
            content: Optional raw request body
            headers: Optional request headers

        Returns:
            Raw response body text

        Raises:
            Same as get()
        """
        ...

    def put(
        self,
        url: str,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Execute an HTTP PUT request.

        Raises:
            Same as get()
        """
        ...

    def delete(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Execute an HTTP DELETE request.

        Raises:
            Same as get()
        """
        ...

    def close(self) -> None:
        """Clean up resources (connection pools, clients, etc.).

        Safe to call multiple times.
        """
        ...
