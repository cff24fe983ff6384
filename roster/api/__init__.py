"""API layer - External API communication."""

from .client import PlayerApiClient, ProductionPlayerApiClient, MockPlayerApiClient, PlayerApiError
from .envelope import EnvelopeError, unwrap

__all__ = [
    'PlayerApiClient',
    'ProductionPlayerApiClient',
    'MockPlayerApiClient',
    'PlayerApiError',
    'EnvelopeError',
    'unwrap',
]
