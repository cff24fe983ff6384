"""
Roster View Builders

Build the HTML for the player list, the player detail card and the
new-player form. Each function replaces its target's contents and returns
the bindings for the controls it rendered.
"""

from html import escape
from typing import List, Sequence

from ..models.player import Player
from .target import Action, Binding, RenderTarget

NO_PLAYERS_MESSAGE = "No players available."

# Form field ids, in render order: (id, label)
FORM_FIELDS = [
    ("name", "Name:"),
    ("breed", "Breed:"),
    ("imageBox", "Image URL:"),
]


def _button(css_class: str, control_id: str, label: str) -> str:
    """Create a button tagged with the control id a dispatcher looks up."""
    return (
        f'<button type="button" class="{css_class}" data-action="{escape(control_id)}">'
        f'{escape(label)}</button>'
    )


def _image(player: Player) -> str:
    src = escape(player.image_url or "")
    return f'<img src="{src}" alt="{escape(player.name)}">'


def _card(lines: List[str]) -> str:
    """Wrap lines in a player card div."""
    body = "\n  ".join(lines)
    return f'<div class="player-card">\n  {body}\n</div>'


def details_control_id(player_id) -> str:
    return f"details-{player_id}"


def remove_control_id(player_id) -> str:
    return f"remove-{player_id}"


def render_all_players(players: Sequence[Player], target: RenderTarget) -> List[Binding]:
    """
    Replace the target with one card per player.

    Each card shows the name, id and image, plus "See details" and
    "Remove from roster" controls. An empty roster renders a single
    message and no cards.

    Args:
        players: Players from the last list fetch
        target: Main content container

    Returns:
        Bindings for every details and remove control
    """
    if not players:
        target.replace(f"<p>{NO_PLAYERS_MESSAGE}</p>")
        return []

    cards = []
    bindings = []
    for player in players:
        details_id = details_control_id(player.id)
        remove_id = remove_control_id(player.id)
        cards.append(_card([
            f"<h2>{escape(player.name)}</h2>",
            f"<p>ID: {escape(str(player.id))}</p>",
            _image(player),
            _button("details-button", details_id, "See details"),
            _button("remove-button", remove_id, "Remove from roster"),
        ]))
        bindings.append(Binding(Action.DETAILS, details_id, player))
        bindings.append(Binding(Action.REMOVE, remove_id, player.id))

    target.replace("\n".join(cards), bindings)
    return bindings


def render_single_player(player: Player, target: RenderTarget) -> List[Binding]:
    """Replace the target with a detail card and a "Back to all players" control."""
    html = _card([
        f"<h2>{escape(player.name)}</h2>",
        f"<p>ID: {escape(str(player.id))}</p>",
        f"<p>Breed: {escape(player.breed or '')}</p>",
        _image(player),
        f"<p>Team: {escape(player.team_label)}</p>",
        _button("back-button", "back", "Back to all players"),
    ])
    bindings = [Binding(Action.BACK, "back")]
    target.replace(html, bindings)
    return bindings


def render_new_player_form(target: RenderTarget) -> List[Binding]:
    """Replace the form container with the three required inputs and a submit control."""
    lines = []
    for field_id, label in FORM_FIELDS:
        lines.append(f'<label for="{field_id}">{label}</label>')
        lines.append(f'<input type="text" id="{field_id}" name="{field_id}" required>')
    lines.append(_button("add-button", "submit", "Add New Player"))

    bindings = [Binding(Action.SUBMIT, "submit")]
    target.replace("\n".join(lines), bindings)
    return bindings
