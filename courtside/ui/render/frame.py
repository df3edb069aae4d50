"""Whole-screen frame for the root state."""

from rich.text import Text

from courtside.ui.render.game_detail import render_game_detail
from courtside.ui.render.scoreboard import render_scoreboard
from courtside.ui.render.text import join_lines
from courtside.ui.state.root import ActiveScreen, RootState
from courtside.ui.theme import DisplayOptions, Theme


def render_frame(state: RootState, theme: Theme, options: DisplayOptions) -> Text:
    if state.active is ActiveScreen.DETAIL and state.detail is not None:
        lines = render_game_detail(state.detail, theme, options)
    else:
        lines = render_scoreboard(state.scoreboard, theme)
    return join_lines(lines)
