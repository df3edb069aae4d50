"""Tests for the scoreboard grid."""

from dataclasses import replace
from datetime import datetime

import pytest

from courtside.events.types import FetchFailed, KeyPressed, Resized, ScoreboardLoaded
from courtside.ui.constants import LOADING, SCOREBOARD_HELP
from courtside.ui.render.scoreboard import format_timestamp, render_scoreboard
from courtside.ui.state.commands import OpenUrl, Quit, SelectGame
from courtside.ui.state.scoreboard import ScoreboardState, calculate_columns, handle_event


@pytest.fixture
def four_games(games):
    return tuple(games) + tuple(replace(g, game_id=f"{g.game_id}x") for g in games)


def loaded(games, width=40):
    state = handle_event(ScoreboardState(), Resized(width=width, height=20)).state
    state = handle_event(state, ScoreboardLoaded(games=tuple(games))).state
    return replace(state, last_updated=None)


def press(state, *keys):
    for key in keys:
        state = handle_event(state, KeyPressed(key=key)).state
    return state


class TestColumns:
    """Tests for calculate_columns."""

    @pytest.mark.parametrize("width,expected", [(0, 1), (17, 1), (18, 1), (36, 2), (40, 2), (100, 5)])
    def test_columns(self, width, expected):
        assert calculate_columns(width) == expected

    def test_custom_card_width(self):
        assert calculate_columns(40, card_width=10) == 4


class TestNavigation:
    """Tests for moving the focus around the grid."""

    def test_walk_the_grid(self, four_games):
        state = loaded(four_games)
        assert state.columns == 2
        state = press(state, "l")
        assert state.focus == 1
        state = press(state, "j")
        assert state.focus == 3
        state = press(state, "k")
        assert state.focus == 1
        state = press(state, "h")
        assert state.focus == 0

    def test_left_right_clamped(self, four_games):
        state = loaded(four_games)
        assert press(state, "left").focus == 0
        assert press(state, *["right"] * 10).focus == 3

    def test_down_only_when_target_exists(self, games):
        three = tuple(games) + (replace(games[0], game_id="x"),)
        state = press(loaded(three), "l")
        assert press(state, "down").focus == 1

    def test_up_from_first_row(self, four_games):
        assert press(loaded(four_games), "up").focus == 0

    def test_refresh_with_fewer_games_clamps_focus(self, four_games, games):
        state = press(loaded(four_games), "l", "j")
        state = handle_event(state, ScoreboardLoaded(games=tuple(games[:1]))).state
        assert state.focus == 0


class TestCommands:
    """Tests for keys that leave the scoreboard."""

    def test_enter_selects(self, games):
        state = press(loaded(games), "l")
        assert handle_event(state, KeyPressed(key="enter")).commands == (SelectGame("0012300002"),)

    def test_enter_without_games(self):
        assert handle_event(ScoreboardState(), KeyPressed(key="enter")).commands == ()

    @pytest.mark.parametrize("key", ["q", "escape", "ctrl+c"])
    def test_quit(self, games, key):
        assert handle_event(loaded(games), KeyPressed(key=key)).commands == (Quit(),)

    def test_watch(self, games):
        commands = handle_event(loaded(games), KeyPressed(key="ctrl+w")).commands
        assert commands == (OpenUrl("https://www.nba.com/game/0012300001"),)


class TestErrors:
    """Tests for fetch failures."""

    def test_failure_then_success(self, games):
        state = handle_event(ScoreboardState(), FetchFailed(error="offline")).state
        assert state.error == "offline"
        state = handle_event(state, ScoreboardLoaded(games=tuple(games))).state
        assert state.error is None


class TestRender:
    """Tests for the card grid."""

    def test_loading(self, theme):
        assert [line.plain for line in render_scoreboard(ScoreboardState(), theme)] == [LOADING]

    def test_error(self, theme):
        lines = render_scoreboard(ScoreboardState(error="offline"), theme)
        assert [line.plain for line in lines] == ["Error: offline"]

    def test_cards_in_one_row(self, games, theme):
        lines = [line.plain for line in render_scoreboard(loaded(games), theme)]
        assert len(lines) == 7
        assert lines[0] == ("┌" + "─" * 16 + "┐") * 2
        assert "4Q (02:00)" in lines[1]
        assert "Final" in lines[1]
        assert "LAL | GSW" in lines[2]
        assert "BOS | MIA" in lines[2]
        assert "---------" in lines[3]
        assert "102 |  99" in lines[4]
        assert "110 | 105" in lines[4]

    def test_narrow_terminal_stacks_cards(self, games, theme):
        lines = render_scoreboard(loaded(games, width=20), theme)
        assert len(lines) == 13

    def test_help_truncated(self, games, theme):
        assert render_scoreboard(loaded(games), theme)[-1].plain == SCOREBOARD_HELP[:37] + "..."

    def test_last_updated_line(self, games, theme):
        state = replace(loaded(games, width=200), last_updated=datetime(2024, 1, 15, 12, 0))
        lines = [line.plain for line in render_scoreboard(state, theme)]
        assert lines[-2].startswith("Last updated: Mon, 15 Jan 2024")
        assert lines[-1] == SCOREBOARD_HELP

    def test_leader_bold(self, games, theme):
        line = render_scoreboard(loaded(games), theme)[2]
        bold = [line.plain[s.start : s.end] for s in line.spans if s.style == theme.bold]
        assert bold == ["LAL", "BOS"]

    def test_focused_card_border(self, games, theme):
        top = render_scoreboard(press(loaded(games), "l"), theme)[0]
        assert [s.start for s in top.spans if s.style == theme.active_border] == [18]


class TestTimestamp:
    def test_format(self):
        stamp = format_timestamp(datetime(2024, 1, 15, 12, 0))
        assert "15 Jan 2024" in stamp
