"""
Detail screen state machine.

The detail screen shows one game: a box score pane and a play-by-play pane,
one of which has focus. A search prompt can be opened over the play-by-play
of the selected team and quarter. All offsets are kept in range whenever the
state changes, including when a refresh delivers shorter lists.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from courtside.client.browser import game_url
from courtside.core.models import Action, BoxScoreSnapshot, PlayByPlaySnapshot, Player, TeamSnapshot
from courtside.core.search import search_actions
from courtside.events.types import (
    BoxScoreLoaded,
    FetchFailed,
    KeyPressed,
    PlayByPlayLoaded,
    Resized,
    UIEvent,
)
from courtside.ui.constants import (
    KEY_BACKSPACE,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_FOCUS_BOX,
    KEY_FOCUS_LOG,
    KEY_NEXT_QUARTER,
    KEY_QUIT,
    KEY_SWITCH_TEAM,
    KEY_WATCH,
    KEYS_DOWN,
    KEYS_LEFT,
    KEYS_NEXT_MATCH,
    KEYS_PREVIOUS_MATCH,
    KEYS_RIGHT,
    KEYS_SEARCH,
    KEYS_UP,
    QUARTERS,
    SEARCH_CHAR_LIMIT,
    SEARCH_PROMPT,
)
from courtside.ui.layout import box_content_width
from courtside.ui.render.box_score import TABLE_WIDTH
from courtside.ui.render.text import max_scroll
from courtside.ui.state.commands import FetchGameDetail, OpenUrl, Quit, Transition

logger = logging.getLogger(__name__)


class Focus(Enum):
    BOX_SCORE = "box_score"
    GAME_LOG = "game_log"


@dataclass(frozen=True)
class SearchState:
    """
    Search prompt and results.

    ``draft`` is the text being typed while the prompt is open; ``query`` is
    the last confirmed search, re-run when new play-by-play arrives.
    """

    active: bool = False
    draft: str = ""
    query: str = ""
    matches: tuple[int, ...] = ()
    cursor: int = 0

    @property
    def current_match(self) -> Optional[int]:
        if not self.matches:
            return None
        return self.matches[self.cursor]


@dataclass(frozen=True)
class GameDetailState:
    """View state for one game."""

    game_id: str
    box_score: Optional[BoxScoreSnapshot] = None
    play_by_play: Optional[PlayByPlaySnapshot] = None
    error: Optional[str] = None
    last_updated: Optional[datetime] = None

    showing_home: bool = True
    focus: Focus = Focus.BOX_SCORE
    selected_period: int = 1
    box_offset: int = 0
    box_scroll_x: int = 0
    log_offset: int = 0
    search: SearchState = field(default_factory=SearchState)

    width: int = 0
    height: int = 0

    @property
    def current_team(self) -> TeamSnapshot:
        """The side whose box score and play-by-play are shown."""
        if self.box_score is None:
            return TeamSnapshot()
        game = self.box_score.game
        return game.home_team if self.showing_home else game.away_team

    @property
    def roster(self) -> tuple[Player, ...]:
        return self.current_team.players or ()

    @property
    def visible_actions(self) -> tuple[Action, ...]:
        """Actions of the selected team in the selected quarter, in feed order."""
        if self.play_by_play is None or self.box_score is None:
            return ()
        team_id = self.current_team.team_id
        return tuple(
            action
            for action in self.play_by_play.actions
            if action.period == self.selected_period and action.team_id == team_id
        )

    @property
    def max_box_scroll(self) -> int:
        return max_scroll(TABLE_WIDTH, box_content_width(self.width))


def new_game_detail(game_id: str, width: int = 0, height: int = 0) -> Transition:
    """Fresh detail state plus the fetch that fills it."""
    state = GameDetailState(game_id=game_id, width=width, height=height)
    return Transition(state, (FetchGameDetail(game_id),))


def next_quarter(period: int) -> int:
    """1Q -> 2Q -> 3Q -> 4Q -> 1Q."""
    return period % len(QUARTERS) + 1


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, max(0, upper)))


def clamp_offsets(state: GameDetailState) -> GameDetailState:
    """Pull every offset back inside the current data."""
    search = state.search
    if search.matches:
        search = replace(search, cursor=_clamp(search.cursor, len(search.matches) - 1))
    else:
        search = replace(search, cursor=0)
    return replace(
        state,
        box_offset=_clamp(state.box_offset, len(state.roster) - 1),
        box_scroll_x=_clamp(state.box_scroll_x, state.max_box_scroll),
        log_offset=_clamp(state.log_offset, len(state.visible_actions) - 1),
        search=search,
    )


def _reset_log(state: GameDetailState) -> GameDetailState:
    """Team or quarter changed: old offsets and matches no longer apply."""
    return replace(state, log_offset=0, search=replace(state.search, query="", matches=(), cursor=0))


def _run_search(state: GameDetailState, query: str) -> GameDetailState:
    matches = tuple(search_actions(state.visible_actions, query))
    search = replace(state.search, active=False, draft="", query=query, matches=matches, cursor=0)
    if not matches:
        return replace(state, search=search)
    return replace(state, search=search, log_offset=matches[0], focus=Focus.GAME_LOG)


def _jump_to_match(state: GameDetailState, step: int) -> GameDetailState:
    matches = state.search.matches
    if not matches:
        return state
    cursor = (state.search.cursor + step) % len(matches)
    return replace(
        state,
        search=replace(state.search, cursor=cursor),
        log_offset=matches[cursor],
        focus=Focus.GAME_LOG,
    )


def _handle_search_key(state: GameDetailState, event: KeyPressed) -> GameDetailState:
    search = state.search
    if event.key == KEY_ENTER:
        return _run_search(state, search.draft)
    if event.key == KEY_ESCAPE:
        return replace(state, search=replace(search, active=False, draft=""))
    if event.key == KEY_BACKSPACE:
        return replace(state, search=replace(search, draft=search.draft[:-1]))
    if event.is_printable and len(search.draft) < SEARCH_CHAR_LIMIT:
        return replace(state, search=replace(search, draft=search.draft + event.character))
    return state


def _scroll(state: GameDetailState, step: int) -> GameDetailState:
    if state.focus is Focus.BOX_SCORE:
        return replace(state, box_offset=_clamp(state.box_offset + step, len(state.roster) - 1))
    return replace(state, log_offset=_clamp(state.log_offset + step, len(state.visible_actions) - 1))


def handle_key(state: GameDetailState, event: KeyPressed) -> Transition:
    key = event.key
    if key == KEY_QUIT:
        return Transition(state, (Quit(),))
    if state.search.active:
        return Transition(_handle_search_key(state, event))

    if key in KEYS_SEARCH or event.character == SEARCH_PROMPT:
        return Transition(replace(state, search=replace(state.search, active=True, draft="")))
    if key in KEYS_NEXT_MATCH:
        return Transition(_jump_to_match(state, 1))
    if key in KEYS_PREVIOUS_MATCH:
        return Transition(_jump_to_match(state, -1))
    if key == KEY_WATCH:
        return Transition(state, (OpenUrl(game_url(state.game_id)),))

    if key == KEY_SWITCH_TEAM:
        state = _reset_log(replace(state, showing_home=not state.showing_home))
    elif key == KEY_NEXT_QUARTER:
        state = _reset_log(replace(state, selected_period=next_quarter(state.selected_period)))
    elif key == KEY_FOCUS_BOX:
        state = replace(state, focus=Focus.BOX_SCORE)
    elif key == KEY_FOCUS_LOG:
        state = replace(state, focus=Focus.GAME_LOG)
    elif key in KEYS_LEFT:
        if state.focus is Focus.BOX_SCORE:
            state = replace(state, box_scroll_x=max(0, state.box_scroll_x - 1))
    elif key in KEYS_RIGHT:
        if state.focus is Focus.BOX_SCORE:
            state = replace(state, box_scroll_x=min(state.box_scroll_x + 1, state.max_box_scroll))
    elif key in KEYS_DOWN:
        state = _scroll(state, 1)
    elif key in KEYS_UP:
        state = _scroll(state, -1)
    else:
        return Transition(state)

    return Transition(clamp_offsets(state))


def handle_event(state: GameDetailState, event: UIEvent) -> Transition:
    """Apply one event to the detail state."""
    if isinstance(event, KeyPressed):
        return handle_key(state, event)

    if isinstance(event, Resized):
        return Transition(clamp_offsets(replace(state, width=event.width, height=event.height)))

    if isinstance(event, (BoxScoreLoaded, PlayByPlayLoaded, FetchFailed)) and event.game_id != state.game_id:
        logger.debug(f"Dropping result for {event.game_id}, showing {state.game_id}")
        return Transition(state)

    if isinstance(event, BoxScoreLoaded):
        state = replace(state, box_score=event.snapshot, error=None, last_updated=event.timestamp)
        return Transition(clamp_offsets(state))

    if isinstance(event, PlayByPlayLoaded):
        state = replace(state, play_by_play=event.snapshot, error=None, last_updated=event.timestamp)
        if state.search.query:
            matches = tuple(search_actions(state.visible_actions, state.search.query))
            state = replace(state, search=replace(state.search, matches=matches))
        return Transition(clamp_offsets(state))

    if isinstance(event, FetchFailed):
        logger.warning(f"Detail fetch failed for {event.game_id}: {event.error}")
        return Transition(replace(state, error=event.error))

    return Transition(state)
