"""New-player form controller."""

import logging
from typing import Dict, List

from .models.player import PlayerDraft
from .render.target import Binding, RenderTarget
from .render.views import FORM_FIELDS, render_new_player_form

logger = logging.getLogger(__name__)


class FormController:
    """Builds the new-player form and turns submitted values into a draft."""

    def __init__(self, target: RenderTarget):
        self.target = target

    @property
    def field_ids(self) -> List[str]:
        return [field_id for field_id, _ in FORM_FIELDS]

    def render(self) -> List[Binding]:
        """Mount a fresh, empty form."""
        return render_new_player_form(self.target)

    def read(self, values: Dict[str, str]) -> PlayerDraft:
        """Read submitted field values (keyed by input id) into a draft."""
        unknown = set(values) - set(self.field_ids)
        if unknown:
            logger.debug("Ignoring unknown form fields: %s", sorted(unknown))
        return PlayerDraft.from_form(values)
