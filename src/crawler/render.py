"""Text rendering for the HUD, the map and the end-of-game summary.

HUD and summary layouts live in Jinja2 templates next to this module; the
map grid comes straight from :meth:`DungeonMap.render`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader

from crawler.sim.commands import COMMAND_HELP

if TYPE_CHECKING:
    from crawler.sim.core.game_state import GameState
    from crawler.sim.telemetry import RunTelemetry

_TEMPLATE_DIR = Path(__file__).parent / "templates"

_jinja = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    keep_trailing_newline=True,
)


def render_hud(state: GameState) -> str:
    template = _jinja.get_template("hud.txt.j2")
    return template.render(state=state, player=state.player)


def render_map(state: GameState) -> str:
    return "\n".join(state.dungeon.render(state.player, state.enemies)) + "\n"


def render_frame(state: GameState) -> str:
    """HUD, map and the action prompt as one block of text."""
    return f"\n{render_hud(state)}\n{render_map(state)}\nActions: {COMMAND_HELP}"


def render_summary(telemetry: RunTelemetry) -> str:
    template = _jinja.get_template("summary.txt.j2")
    return template.render(telemetry=telemetry)
