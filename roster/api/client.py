"""Player API Client - Interface and implementations for roster API calls."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

import requests

from ..config import APIConfig
from ..models.player import Player, PlayerDraft
from .envelope import unwrap, unwrap_created

logger = logging.getLogger(__name__)


class PlayerApiError(Exception):
    """Raised when a roster API call fails for any reason."""

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


class PlayerApiClient(ABC):
    """Abstract interface for roster API calls."""

    @abstractmethod
    def list_players(self) -> List[Player]:
        """Get every player on the roster."""
        pass

    @abstractmethod
    def get_player(self, player_id: int) -> Player:
        """Get a single player by id."""
        pass

    @abstractmethod
    def create_player(self, draft: PlayerDraft) -> Player:
        """Add a new player; the server assigns its id."""
        pass

    @abstractmethod
    def delete_player(self, player_id: int) -> Dict[str, Any]:
        """Remove a player and return the server's confirmation payload."""
        pass


class ProductionPlayerApiClient(PlayerApiClient):
    """Real roster client talking HTTP via requests."""

    def __init__(self, config: Optional[APIConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize API client.

        Args:
            config: Base URL, cohort, timeout and envelope paths
            session: Optional pre-built session (tests pass a mock)
        """
        self.config = config or APIConfig()
        self.session = session or requests.Session()

    def _call(self, operation: str, error_message: str, send: Callable[[], requests.Response],
              extract: Callable[[Any], Any]) -> Any:
        """Send a request, parse JSON, extract the payload; log and re-raise any failure."""
        try:
            response = send()
            response.raise_for_status()
            return extract(response.json())
        except (requests.RequestException, ValueError, KeyError, TypeError) as e:
            logger.error("%s %s", error_message, e)
            raise PlayerApiError(operation, f"{error_message} {e}") from e

    def list_players(self) -> List[Player]:
        url = self.config.players_url
        logger.debug("GET %s", url)
        return self._call(
            'list_players',
            "Uh oh, trouble fetching players!",
            lambda: self.session.get(url, timeout=self.config.timeout),
            lambda body: [Player.from_dict(p) for p in unwrap(body, self.config.list_path)],
        )

    def get_player(self, player_id: int) -> Player:
        url = self.config.player_url(player_id)
        logger.debug("GET %s", url)
        return self._call(
            'get_player',
            f"Uh oh, trouble fetching player #{player_id}!",
            lambda: self.session.get(url, timeout=self.config.timeout),
            lambda body: Player.from_dict(unwrap(body, self.config.single_path)),
        )

    def create_player(self, draft: PlayerDraft) -> Player:
        url = self.config.players_url
        logger.debug("POST %s %s", url, draft.to_dict())
        return self._call(
            'create_player',
            "Uh oh, something went wrong with adding that player!",
            lambda: self.session.post(url, json=draft.to_dict(), timeout=self.config.timeout),
            lambda body: Player.from_dict(unwrap_created(body, self.config.create_path)),
        )

    def delete_player(self, player_id: int) -> Dict[str, Any]:
        url = self.config.player_url(player_id)
        logger.debug("DELETE %s", url)
        return self._call(
            'delete_player',
            f"Uh oh, trouble removing player #{player_id} from the roster!",
            lambda: self.session.delete(url, timeout=self.config.timeout),
            lambda body: body,
        )


class MockPlayerApiClient(PlayerApiClient):
    """In-memory client for testing."""

    def __init__(self, next_id: int = 1):
        self.players: Dict[int, Player] = {}
        self.failures: Dict[str, Exception] = {}
        self.call_count = 0
        self._next_id = next_id

    def _check(self, operation: str) -> None:
        self.call_count += 1
        if operation in self.failures:
            exc = self.failures[operation]
            logger.error("%s failed: %s", operation, exc)
            raise PlayerApiError(operation, str(exc)) from exc

    def list_players(self) -> List[Player]:
        self._check('list_players')
        return list(self.players.values())

    def get_player(self, player_id: int) -> Player:
        self._check('get_player')
        try:
            return self.players[int(player_id)]
        except KeyError:
            raise PlayerApiError('get_player', f"Player #{player_id} not found") from None

    def create_player(self, draft: PlayerDraft) -> Player:
        self._check('create_player')
        player = Player.from_dict({'id': self._next_id, **draft.to_dict(), 'teamId': None})
        self.players[player.id] = player
        self._next_id += 1
        return player

    def delete_player(self, player_id: int) -> Dict[str, Any]:
        self._check('delete_player')
        if self.players.pop(int(player_id), None) is None:
            raise PlayerApiError('delete_player', f"Player #{player_id} not found")
        return {'success': True, 'error': None, 'data': None}

    def add(self, player: Player) -> None:
        """Test helper to seed a player with a fixed id."""
        self.players[player.id] = player
        self._next_id = max(self._next_id, player.id + 1)

    def set_failure(self, operation: str, exc: Exception) -> None:
        """Test helper to make an operation fail."""
        self.failures[operation] = exc

    def reset(self) -> None:
        """Reset call count, players and failures."""
        self.call_count = 0
        self.players = {}
        self.failures = {}
