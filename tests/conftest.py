"""Shared pytest fixtures for roster tests."""

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def mock_api():
    """Create an empty mock roster API client."""
    from roster.api.client import MockPlayerApiClient
    return MockPlayerApiClient(next_id=9000)


@pytest.fixture
def seeded_api(mock_api, sample_players):
    """Mock client pre-populated with the sample roster."""
    for player in sample_players:
        mock_api.add(player)
    return mock_api


@pytest.fixture
def api_config():
    """API config pointing at a fake host."""
    from roster.config import APIConfig
    return APIConfig(base_url='https://api.test/api', cohort='TEST-COHORT', timeout=5)


@pytest.fixture
def mock_session():
    """A requests.Session stand-in whose responses tests configure."""
    return MagicMock()


@pytest.fixture
def filbert_record():
    """Single player record as the API sends it."""
    return {
        'id': 5617,
        'name': 'Filbert',
        'breed': 'Shetland Sheepdog / Border Collie',
        'status': 'bench',
        'imageUrl': 'https://images.test/filbert.jpg',
        'createdAt': '2023-10-18T16:20:57.284Z',
        'updatedAt': '2023-10-18T16:20:57.284Z',
        'teamId': None,
        'cohortId': 2670,
    }


@pytest.fixture
def sample_player_records(filbert_record):
    """Player records as returned in the list envelope."""
    return [
        filbert_record,
        {
            'id': 5618,
            'name': 'Anise',
            'breed': 'Dachshund',
            'status': 'field',
            'imageUrl': 'https://images.test/anise.jpg',
            'teamId': 412,
            'teamName': 'Ruff',
            'cohortId': 2670,
        },
        {
            'id': 5619,
            'name': 'Crumpet',
            'breed': 'American Staffordshire Terrier',
            'status': 'bench',
            'imageUrl': 'https://images.test/crumpet.jpg',
            'teamId': None,
            'cohortId': 2670,
        },
    ]


@pytest.fixture
def sample_players(sample_player_records):
    """Sample roster as Player models."""
    from roster.models.player import Player
    return [Player.from_dict(r) for r in sample_player_records]


@pytest.fixture
def main_target():
    from roster.render.target import RenderTarget, MAIN
    return RenderTarget(MAIN)


@pytest.fixture
def form_target():
    from roster.render.target import RenderTarget, NEW_PLAYER_FORM
    return RenderTarget(NEW_PLAYER_FORM)


def make_response(payload=None, status_code=200, json_error=None):
    """Build a fake requests.Response."""
    import requests

    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def response_factory():
    """Factory for fake requests.Response objects."""
    return make_response
