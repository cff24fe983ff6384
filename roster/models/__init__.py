"""Domain models."""

from .player import Player, PlayerDraft

__all__ = [
    'Player',
    'PlayerDraft',
]
