"""Base class for anything that supplies player commands.

The turn engine calls :meth:`CommandSource.choose_command` once per
prompt.  Interactive play reads the keyboard; automated agents decide
from the game state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crawler.sim.core.game_state import GameState


class CommandSource(ABC):
    """Base class for players, human or automated."""

    @abstractmethod
    def choose_command(self, state: GameState) -> str:
        """Return the raw command text for this prompt.

        Parameters
        ----------
        state:
            The current game state, giving the source full observability.
            Sources must treat it as read-only.

        Returns
        -------
        str
            Raw input; only the first non-blank character is used.
            Anything unrecognised is rejected by the engine and the
            source is asked again.
        """
