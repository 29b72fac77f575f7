"""JSON serializer for request and response payloads."""

import json
from typing import Any

from .exceptions import SerializationError


class JSONSerializer:
    """Encode values to compact JSON text and decode replies back."""

    def dumps(self, value: Any) -> str:
        """Serialize a value to a single-line JSON string.

        Raises:
            SerializationError: If the value is not JSON serializable
        """
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot serialize payload: {e}") from e

    def loads(self, text: str) -> Any:
        """Parse a JSON reply. An empty body decodes to None.

        Raises:
            SerializationError: If the text is not valid JSON
        """
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Malformed JSON reply: {e}") from e
