"""Roster App - Workflows that compose API calls with re-renders."""

import logging
from typing import Dict, List, Optional

from .api.client import PlayerApiClient
from .form import FormController
from .models.player import Player
from .render.page import build_page
from .render.target import MAIN, NEW_PLAYER_FORM, Action, Binding, RenderTarget, ViewState
from .render.views import render_all_players, render_single_player

logger = logging.getLogger(__name__)


class UnknownActionError(KeyError):
    """Raised when dispatching a control id that the current view did not bind."""


class RosterApp:
    """Drives the roster page.

    Each user action runs one workflow to completion, in order:
    mutate, refetch, re-render. The rendered containers and the bindings
    they carry are the only state besides the current view.
    """

    def __init__(
        self,
        client: PlayerApiClient,
        main: Optional[RenderTarget] = None,
        form: Optional[RenderTarget] = None,
    ):
        """
        Initialize app.

        Args:
            client: API client for roster calls
            main: Main content container (created if omitted)
            form: New-player form container (created if omitted)
        """
        self.client = client
        self.main = main or RenderTarget(MAIN)
        self.form = FormController(form or RenderTarget(NEW_PLAYER_FORM))
        self.view = ViewState.NONE
        self.players: List[Player] = []

    def _show_roster(self, players: List[Player]) -> None:
        """Render the list view and a fresh form from a list fetch."""
        self.players = list(players)
        render_all_players(self.players, self.main)
        self.view = ViewState.LIST if self.players else ViewState.EMPTY
        self.form.render()

    def initialize(self) -> None:
        """Fetch all players and render the list and the form."""
        logger.info("Loading roster...")
        self._show_roster(self.client.list_players())
        logger.info("Rendered %d players", len(self.players))

    def show_details(self, player: Player) -> None:
        """Mount the detail card for a player record from the list."""
        render_single_player(player, self.main)
        self.view = ViewState.DETAIL

    def submit_new_player(self, values: Dict[str, str]) -> Player:
        """Create a player from form values, then refetch and re-render."""
        draft = self.form.read(values)
        try:
            created = self.client.create_player(draft)
            logger.info("Added %s (#%s)", created.name, created.id)
            self._show_roster(self.client.list_players())
        except Exception as e:
            logger.error("Error submitting new player form: %s", e)
            raise
        return created

    def remove_and_refresh(self, player_id: int) -> None:
        """Delete a player, then refetch and re-render."""
        self.client.delete_player(player_id)
        logger.info("Removed player #%s", player_id)
        self._show_roster(self.client.list_players())

    @property
    def bindings(self) -> Dict[str, Binding]:
        """Bindings from whatever is currently mounted, keyed by control id."""
        return {b.control_id: b for b in self.main.bindings + self.form.target.bindings}

    def dispatch(self, control_id: str, form_values: Optional[Dict[str, str]] = None) -> None:
        """
        Run the workflow bound to a control.

        Args:
            control_id: The control's data-action id
            form_values: Field values when the control is the form submit

        Raises:
            UnknownActionError: If no mounted control has that id
        """
        binding = self.bindings.get(control_id)
        if binding is None:
            raise UnknownActionError(control_id)

        logger.debug("Dispatching %s (%s)", control_id, binding.action.value)
        if binding.action == Action.DETAILS:
            self.show_details(binding.payload)
        elif binding.action == Action.REMOVE:
            self.remove_and_refresh(binding.payload)
        elif binding.action == Action.BACK:
            self.initialize()
        elif binding.action == Action.SUBMIT:
            self.submit_new_player(form_values or {})

    def page(self) -> str:
        """Serialize the current containers into a full HTML document."""
        return build_page(self.main, self.form.target)
