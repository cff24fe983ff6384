from dataclasses import dataclass
import os

# Default API location constants
DEFAULT_BASE_URL = 'https://fsa-puppy-bowl.herokuapp.com/api'
DEFAULT_COHORT = '2310-FSA-ET-WEB-PT-SF-B'
DEFAULT_OUTPUT_PATH = 'index.html'


def get_output_path() -> str:
    """
    Get the rendered page path from environment variable or default.

    Uses ROSTER_OUTPUT environment variable if set, otherwise returns default path.

    Returns:
        Path the rendered HTML page is written to
    """
    return os.getenv('ROSTER_OUTPUT', DEFAULT_OUTPUT_PATH)


@dataclass
class APIConfig:
    base_url: str = DEFAULT_BASE_URL
    cohort: str = DEFAULT_COHORT
    timeout: int = 30

    # Dotted key paths into the response envelope
    list_path: str = 'data.players'
    single_path: str = 'data.player'
    create_path: str = 'data'

    @property
    def players_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.cohort}/players"

    def player_url(self, player_id) -> str:
        return f"{self.players_url}/{player_id}"


@dataclass
class Config:
    output_path: str = DEFAULT_OUTPUT_PATH
    api: APIConfig = None

    def __post_init__(self):
        if self.api is None:
            self.api = APIConfig()

    @classmethod
    def from_env(cls) -> 'Config':
        return cls(
            output_path = get_output_path(),
            api=APIConfig(
                base_url = os.getenv('ROSTER_API_URL', DEFAULT_BASE_URL),
                cohort = os.getenv('ROSTER_COHORT', DEFAULT_COHORT),
                timeout = int(os.getenv('ROSTER_API_TIMEOUT', 30)),
            )
        )
