"""Envelope helpers - Pull payload data out of the API's response wrapper."""

from typing import Any

# Keys the create endpoint has been seen to nest the new record under
CREATED_RECORD_KEYS = ('player', 'newPlayer')


class EnvelopeError(KeyError):
    """Raised when a response does not have the expected envelope shape."""

    def __init__(self, path: str, missing: str):
        super().__init__(f"Response envelope has no '{missing}' (looking up '{path}')")
        self.path = path
        self.missing = missing

    def __str__(self) -> str:
        return self.args[0]


def unwrap(payload: Any, path: str) -> Any:
    """
    Follow a dotted key path into a response payload.

    Args:
        payload: Parsed JSON response
        path: Dotted path such as "data.players"; empty returns payload as-is

    Returns:
        The value found at the path

    Raises:
        EnvelopeError: If any key along the path is missing
    """
    if not path:
        return payload

    current = payload
    for key in path.split('.'):
        if not isinstance(current, dict) or key not in current:
            raise EnvelopeError(path, key)
        current = current[key]
    return current


def unwrap_created(payload: Any, path: str) -> Any:
    """Unwrap a create response, descending into a nested record key if present."""
    data = unwrap(payload, path)
    if isinstance(data, dict) and 'id' not in data:
        for key in CREATED_RECORD_KEYS:
            if isinstance(data.get(key), dict):
                return data[key]
    return data
