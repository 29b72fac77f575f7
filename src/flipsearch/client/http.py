"""HTTP transport over httpx.

This module implements the transport the Connection uses to talk to the
search server. It translates httpx failures and non-2xx responses into the
flipsearch exception hierarchy and never retries.
"""

import logging
import threading

import httpx

from .config import SearchConfig
from .exceptions import TransportConnectionError, raise_for_status

logger = logging.getLogger("flipsearch")


def _error_message(response: httpx.Response) -> str:
    """Pull a human-readable reason out of an error response.

    Search servers answer with either ``{"error": "..."}`` or
    ``{"error": {"type": ..., "reason": ...}}``.
    """
    try:
        data = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict):
            return error.get("reason") or error.get("type") or str(error)
        if error:
            return str(error)
    return str(data)


class HTTPTransport:
    """HTTP transport for the search server.

    Implements the SearchTransport protocol on top of a lazily created
    httpx.Client. Timeout and TLS verification come from SearchConfig.

    Usage:
        transport = HTTPTransport(config)
        body = transport.get("http://localhost:9200/")
        transport.close()

    Or as context manager:
        with HTTPTransport(config) as transport:
            body = transport.get("http://localhost:9200/")
    """

    def __init__(self, config: SearchConfig | None = None):
        """Initialize HTTP transport.

        Args:
            config: Search configuration. If None, loads from environment.
        """
        self.config = config or SearchConfig()
        self._client: httpx.Client | None = None
        self._client_lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client, once even under concurrent first use."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self.config.timeout,
                        verify=self.config.verify_certs,
                    )
        return self._client

    def __enter__(self) -> "HTTPTransport":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close client."""
        self.close()

    def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client:
            self._client.close()
            self._client = None

    def _request(
        self,
        method: str,
        url: str,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Execute a request and classify the outcome.

        Returns:
            Raw response body text

        Raises:
            TransportConnectionError: On connect failures, timeouts and other
                network errors
            NotFoundError: For 404 responses
            TransportError: For any other non-2xx response
        """
        try:
            response = self.client.request(
                method,
                url,
                content=content.encode("utf-8") if content is not None else None,
                headers=headers,
            )
        except httpx.ConnectError as e:
            raise TransportConnectionError(f"Cannot connect to {url}: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportConnectionError(f"Request timeout to {url}: {e}") from e
        except httpx.TransportError as e:
            raise TransportConnectionError(f"Request to {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        if not response.is_success:
            raise_for_status(response.status_code, _error_message(response), response.text)

        return response.text

    def get(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Execute GET request."""
        return self._request("GET", url, headers=headers)

    def head(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Execute HEAD request."""
        return self._request("HEAD", url, headers=headers)

    def post(
        self,
        url: str,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Execute POST request with an optional raw body."""
        return self._request("POST", url, content=content, headers=headers)

    def put(
        self,
        url: str,
        content: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Execute PUT request with an optional raw body."""
        return self._request("PUT", url, content=content, headers=headers)

    def delete(self, url: str, headers: dict[str, str] | None = None) -> str:
        """Execute DELETE request."""
        return self._request("DELETE", url, headers=headers)
