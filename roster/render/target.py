"""
Render Targets and Bindings

A render target stands in for a page container; render functions replace its
contents and hand back the bindings their controls need.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

MAIN = 'main'
NEW_PLAYER_FORM = 'new-player-form'


class Action(Enum):
    """What a control does when activated."""
    DETAILS = "details"
    REMOVE = "remove"
    BACK = "back"
    SUBMIT = "submit"


class ViewState(Enum):
    """Which view is mounted in the main container."""
    NONE = "none"
    LIST = "list"
    DETAIL = "detail"
    EMPTY = "empty"


@dataclass(frozen=True)
class Binding:
    """Ties a rendered control to an action and its argument."""
    action: Action
    control_id: str
    payload: Any = None


@dataclass
class RenderTarget:
    """An in-memory container that render functions write into."""
    name: str
    html: str = ""
    bindings: List[Binding] = field(default_factory=list)
    render_count: int = 0

    def replace(self, html: str, bindings: Optional[List[Binding]] = None) -> None:
        """Replace the container's contents (never appends)."""
        self.html = html
        self.bindings = list(bindings or [])
        self.render_count += 1

    def clear(self) -> None:
        self.replace("")
