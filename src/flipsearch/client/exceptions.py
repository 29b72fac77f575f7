"""Custom exceptions for the search connection."""


class FlipSearchError(Exception):
    """Base exception for all flipsearch errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class TransportError(FlipSearchError):
    """Non-2xx response or network failure."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"HTTP {self.status_code}: {self.message}"
        return self.message


class TransportConnectionError(TransportError):
    """Cannot reach the search server (connect failure or timeout)."""
    pass


class NotFoundError(TransportError):
    """Resource not found (404)."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message, 404, body)


class ProtocolError(FlipSearchError):
    """A successful response whose shape violates the expected contract."""
    pass


class SerializationError(FlipSearchError):
    """Payload could not be encoded or decoded."""
    pass


def raise_for_status(status_code: int, message: str, body: str | None = None) -> None:
    """Raise appropriate exception based on HTTP status code."""
    if 200 <= status_code < 300:
        return
    if status_code == 404:
        raise NotFoundError(message, body)
    raise TransportError(message, status_code, body)
