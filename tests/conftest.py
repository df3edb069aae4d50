"""Shared pytest fixtures for courtside tests."""

from datetime import datetime

import pytest

from courtside.client.mock import LAKERS_ID, WARRIORS_ID, MockNbaClient
from courtside.core.models import (
    Action,
    BoxScoreSnapshot,
    Game,
    GameStatus,
    PlayByPlaySnapshot,
    Player,
    PlayerStatistics,
    TeamSnapshot,
    TeamStatistics,
)
from courtside.events.types import BoxScoreLoaded, PlayByPlayLoaded
from courtside.ui.state.game_detail import GameDetailState, handle_event
from courtside.ui.theme import DisplayOptions, Theme

GAME_ID = "0012300001"
REFRESHED_AT = datetime(2024, 1, 15, 20, 30, 45)


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def mock_client() -> MockNbaClient:
    return MockNbaClient()


@pytest.fixture
def games(mock_client) -> list[Game]:
    """Two scoreboard games: LAL-GSW live, BOS-MIA final."""
    return mock_client.get_scoreboard()


@pytest.fixture
def box_score(mock_client) -> BoxScoreSnapshot:
    """LAL 110 - GSW 100, one player per side, team totals present."""
    return mock_client.get_box_score(GAME_ID)


@pytest.fixture
def play_by_play(mock_client) -> PlayByPlaySnapshot:
    return mock_client.get_play_by_play(GAME_ID)


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def long_play_by_play() -> PlayByPlaySnapshot:
    """Ten LAL actions in the first quarter, two GSW actions, one LAL action in the second."""
    lakers = [
        Action(n, f"PT{11 - n:02d}M00.00S", 1, LAKERS_ID, f"James Jumper {n}" if n % 3 == 0 else f"Davis Layup {n}")
        for n in range(1, 11)
    ]
    others = [
        Action(11, "PT05M00.00S", 1, WARRIORS_ID, "Curry Jumper"),
        Action(12, "PT04M00.00S", 1, WARRIORS_ID, "Green Foul"),
        Action(13, "PT11M00.00S", 2, LAKERS_ID, "James Dunk"),
    ]
    return PlayByPlaySnapshot(game_id=GAME_ID, actions=tuple(lakers + others))


@pytest.fixture
def big_roster_box_score() -> BoxScoreSnapshot:
    """Home roster of twelve players, away roster of two."""
    home_players = tuple(
        Player(
            first_name=f"First{i}",
            family_name=f"Player{i}",
            person_id=i,
            statistics=PlayerStatistics(minutes="PT20M00.00S", points=i, rebounds=1, assists=1),
        )
        for i in range(12)
    )
    away_players = (
        Player(first_name="Stephen", family_name="Curry", person_id=201939, statistics=PlayerStatistics(points=30)),
        Player(first_name="Draymond", family_name="Green", person_id=203110),
    )
    return BoxScoreSnapshot(
        game=Game(
            game_id=GAME_ID,
            status=GameStatus.LIVE,
            period=2,
            clock="PT06M00.00S",
            home_team=TeamSnapshot(
                tricode="LAL",
                team_id=LAKERS_ID,
                score=55,
                players=home_players,
                statistics=TeamStatistics(minutes="PT120M00.00S", points=55),
            ),
            away_team=TeamSnapshot(tricode="GSW", team_id=WARRIORS_ID, score=50, players=away_players),
        )
    )


# =============================================================================
# UI Fixtures
# =============================================================================


@pytest.fixture
def theme() -> Theme:
    return Theme()


@pytest.fixture
def options() -> DisplayOptions:
    return DisplayOptions()


@pytest.fixture
def load_detail():
    """Build a detail state fed with the given snapshots through the state machine."""

    def _load(box_score, play_by_play=None, width=120, height=40) -> GameDetailState:
        state = GameDetailState(game_id=GAME_ID, width=width, height=height)
        state = handle_event(state, BoxScoreLoaded(game_id=GAME_ID, snapshot=box_score, timestamp=REFRESHED_AT)).state
        if play_by_play is not None:
            state = handle_event(state, PlayByPlayLoaded(game_id=GAME_ID, snapshot=play_by_play, timestamp=REFRESHED_AT)).state
        return state

    return _load


@pytest.fixture
def detail(load_detail, box_score, long_play_by_play) -> GameDetailState:
    """Wide detail screen showing LAL with ten first-quarter actions."""
    return load_detail(box_score, long_play_by_play)
