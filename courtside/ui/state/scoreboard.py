"""Scoreboard grid state machine."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from courtside.client.browser import game_url
from courtside.core.models import Game
from courtside.events.types import SOURCE_SCOREBOARD, FetchFailed, KeyPressed, Resized, ScoreboardLoaded, UIEvent
from courtside.ui.constants import (
    DEFAULT_CARD_WIDTH,
    KEY_ENTER,
    KEY_WATCH,
    KEYS_DOWN,
    KEYS_LEFT,
    KEYS_RIGHT,
    KEYS_SCOREBOARD_QUIT,
    KEYS_UP,
)
from courtside.ui.state.commands import OpenUrl, Quit, SelectGame, Transition

logger = logging.getLogger(__name__)


def calculate_columns(width: int, card_width: int = DEFAULT_CARD_WIDTH) -> int:
    """Cards per row; always at least one."""
    if card_width <= 0:
        return 1
    return max(1, width // card_width)


@dataclass(frozen=True)
class ScoreboardState:
    games: tuple[Game, ...] = ()
    focus: int = 0
    error: Optional[str] = None
    last_updated: Optional[datetime] = None
    width: int = 0
    height: int = 0
    card_width: int = DEFAULT_CARD_WIDTH

    @property
    def columns(self) -> int:
        return calculate_columns(self.width, self.card_width)

    @property
    def focused_game(self) -> Optional[Game]:
        if not self.games:
            return None
        return self.games[self.focus]


def _move(state: ScoreboardState, key: str) -> ScoreboardState:
    count = len(state.games)
    focus = state.focus
    if key in KEYS_LEFT:
        focus = max(0, focus - 1)
    elif key in KEYS_RIGHT:
        focus = min(count - 1, focus + 1)
    elif key in KEYS_UP:
        if focus - state.columns >= 0:
            focus -= state.columns
    elif key in KEYS_DOWN:
        if focus + state.columns < count:
            focus += state.columns
    return replace(state, focus=max(0, focus))


def handle_key(state: ScoreboardState, event: KeyPressed) -> Transition:
    key = event.key
    if key in KEYS_SCOREBOARD_QUIT:
        return Transition(state, (Quit(),))

    game = state.focused_game
    if key == KEY_ENTER:
        if game is None:
            return Transition(state)
        return Transition(state, (SelectGame(game.game_id),))
    if key == KEY_WATCH:
        if game is None:
            return Transition(state)
        return Transition(state, (OpenUrl(game_url(game.game_id)),))

    return Transition(_move(state, key))


def handle_event(state: ScoreboardState, event: UIEvent) -> Transition:
    """Apply one event to the scoreboard state."""
    if isinstance(event, KeyPressed):
        return handle_key(state, event)

    if isinstance(event, Resized):
        return Transition(replace(state, width=event.width, height=event.height))

    if isinstance(event, ScoreboardLoaded):
        focus = min(state.focus, max(0, len(event.games) - 1))
        return Transition(
            replace(state, games=tuple(event.games), focus=focus, error=None, last_updated=event.timestamp)
        )

    if isinstance(event, FetchFailed) and event.source == SOURCE_SCOREBOARD:
        logger.warning(f"Scoreboard fetch failed: {event.error}")
        return Transition(replace(state, error=event.error))

    return Transition(state)
