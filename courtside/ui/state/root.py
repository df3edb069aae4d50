"""
Root state machine.

Owns the scoreboard state and, while a game is open, the detail state.
Every event enters here; keys go to the active screen, data goes to the
screen it was fetched for, and refresh ticks fetch for whatever is on
screen before scheduling the next tick.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from courtside.events.types import (
    SOURCE_SCOREBOARD,
    BoxScoreLoaded,
    FetchFailed,
    KeyPressed,
    PlayByPlayLoaded,
    RefreshTick,
    Resized,
    ScoreboardLoaded,
    UIEvent,
)
from courtside.ui.constants import DEFAULT_CARD_WIDTH, KEYS_BACK
from courtside.ui.state import game_detail, scoreboard
from courtside.ui.state.commands import (
    FetchGameDetail,
    FetchScoreboard,
    ScheduleRefresh,
    SelectGame,
    Transition,
)
from courtside.ui.state.game_detail import GameDetailState
from courtside.ui.state.scoreboard import ScoreboardState

logger = logging.getLogger(__name__)

DEFAULT_RELOAD_SECONDS = 10.0


class ActiveScreen(Enum):
    SCOREBOARD = "scoreboard"
    DETAIL = "detail"


@dataclass(frozen=True)
class RootState:
    scoreboard: ScoreboardState = field(default_factory=ScoreboardState)
    detail: Optional[GameDetailState] = None
    active: ActiveScreen = ActiveScreen.SCOREBOARD
    width: int = 0
    height: int = 0
    reload_seconds: float = DEFAULT_RELOAD_SECONDS


def start(reload_seconds: float = DEFAULT_RELOAD_SECONDS, card_width: int = DEFAULT_CARD_WIDTH) -> Transition:
    """Initial state: load the scoreboard and start the refresh cycle."""
    state = RootState(scoreboard=ScoreboardState(card_width=card_width), reload_seconds=reload_seconds)
    return Transition(state, (FetchScoreboard(), ScheduleRefresh(reload_seconds)))


def _on_refresh(state: RootState) -> Transition:
    if state.active is ActiveScreen.DETAIL and state.detail is not None:
        fetch = FetchGameDetail(state.detail.game_id)
    else:
        fetch = FetchScoreboard()
    logger.debug(f"Refresh tick on {state.active.value}")
    return Transition(state, (fetch, ScheduleRefresh(state.reload_seconds)))


def _on_scoreboard_transition(state: RootState, transition: Transition) -> Transition:
    state = replace(state, scoreboard=transition.state)
    commands = []
    for command in transition.commands:
        if isinstance(command, SelectGame):
            detail, detail_commands = game_detail.new_game_detail(command.game_id, state.width, state.height)
            state = replace(state, detail=detail, active=ActiveScreen.DETAIL)
            commands.extend(detail_commands)
            logger.debug(f"Opened game {command.game_id}")
        else:
            commands.append(command)
    return Transition(state, tuple(commands))


def _on_key(state: RootState, event: KeyPressed) -> Transition:
    if state.active is ActiveScreen.DETAIL and state.detail is not None:
        if event.key in KEYS_BACK and not state.detail.search.active:
            logger.debug(f"Closed game {state.detail.game_id}")
            state = replace(state, detail=None, active=ActiveScreen.SCOREBOARD)
            return Transition(state, (FetchScoreboard(),))
        detail, commands = game_detail.handle_event(state.detail, event)
        return Transition(replace(state, detail=detail), commands)

    return _on_scoreboard_transition(state, scoreboard.handle_event(state.scoreboard, event))


def handle_event(state: RootState, event: UIEvent) -> Transition:
    """Apply one event and collect the commands it produces."""
    if isinstance(event, Resized):
        state = replace(
            state,
            width=event.width,
            height=event.height,
            scoreboard=scoreboard.handle_event(state.scoreboard, event).state,
        )
        if state.detail is not None:
            state = replace(state, detail=game_detail.handle_event(state.detail, event).state)
        return Transition(state)

    if isinstance(event, RefreshTick):
        return _on_refresh(state)

    if isinstance(event, KeyPressed):
        return _on_key(state, event)

    if isinstance(event, ScoreboardLoaded) or (
        isinstance(event, FetchFailed) and event.source == SOURCE_SCOREBOARD
    ):
        return _on_scoreboard_transition(state, scoreboard.handle_event(state.scoreboard, event))

    if isinstance(event, (BoxScoreLoaded, PlayByPlayLoaded, FetchFailed)):
        if state.detail is None or state.detail.game_id != event.game_id:
            logger.debug(f"Dropping stale result for game {event.game_id}")
            return Transition(state)
        detail, commands = game_detail.handle_event(state.detail, event)
        return Transition(replace(state, detail=detail), commands)

    return Transition(state)
