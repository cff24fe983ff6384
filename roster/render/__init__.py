"""Rendering layer - HTML views written into injected targets."""

from .target import MAIN, NEW_PLAYER_FORM, Action, Binding, RenderTarget, ViewState
from .views import (
    NO_PLAYERS_MESSAGE,
    render_all_players,
    render_new_player_form,
    render_single_player,
)
from .page import build_page

__all__ = [
    'MAIN',
    'NEW_PLAYER_FORM',
    'Action',
    'Binding',
    'RenderTarget',
    'ViewState',
    'NO_PLAYERS_MESSAGE',
    'render_all_players',
    'render_new_player_form',
    'render_single_player',
    'build_page',
]
