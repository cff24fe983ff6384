from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# Wire keys mapped onto dataclass attributes
WIRE_KEYS = {
    'id': 'id',
    'name': 'name',
    'breed': 'breed',
    'imageUrl': 'image_url',
    'teamName': 'team_name',
    'status': 'status',
    'teamId': 'team_id',
    'cohortId': 'cohort_id',
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
}


@dataclass
class Player:
    """A roster entry as returned by the API."""
    id: int
    name: str
    breed: str = ''
    image_url: str = ''
    team_name: Optional[str] = None

    # Metadata the API sends along
    status: Optional[str] = None
    team_id: Optional[int] = None
    cohort_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    # Original record, so to_dict() can hand back exactly what the server sent
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """Build a Player from an API record."""
        if not isinstance(data, dict):
            raise ValueError(f"Invalid player record: {data!r}")
        if 'id' not in data or 'name' not in data:
            raise ValueError(f"Player record missing id or name: {data!r}")

        kwargs = {attr: data[key] for key, attr in WIRE_KEYS.items() if key in data}
        return cls(**kwargs, raw=dict(data))

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the API's wire format."""
        if self.raw:
            return dict(self.raw)
        result = {}
        for key, attr in WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                result[key] = value
        return result

    @property
    def team_label(self) -> str:
        """Team name, or "Unassigned" when the player has none."""
        return self.team_name or 'Unassigned'


@dataclass
class PlayerDraft:
    """A player that has not been created yet (no server id)."""
    name: str
    breed: str
    image_url: str = ''

    @classmethod
    def from_form(cls, values: Dict[str, str]) -> 'PlayerDraft':
        """Build a draft from submitted form field values."""
        return cls(
            name=values.get('name', ''),
            breed=values.get('breed', ''),
            image_url=values.get('imageBox', ''),
        )

    def to_dict(self) -> dict:
        """Convert to JSON request body."""
        return {
            'name': self.name,
            'breed': self.breed,
            'imageUrl': self.image_url,
        }
