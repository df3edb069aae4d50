"""Scoreboard grid of game cards."""

from datetime import datetime
from typing import Optional

from rich.text import Text

from courtside.core.formatting import center, format_score, render_game_status
from courtside.core.models import Game
from courtside.ui.constants import CARD_STATUS_WIDTH, LOADING, SCOREBOARD_HELP
from courtside.ui.render.text import boxed, join_horizontal, truncate_line
from courtside.ui.state.scoreboard import ScoreboardState
from courtside.ui.theme import Theme

CARD_CONTENT_LINES = 4


def format_timestamp(moment: datetime) -> str:
    """RFC 1123 style timestamp in local time, e.g. ``Mon, 02 Jan 2006 15:04:05 PST``."""
    return moment.astimezone().strftime("%a, %d %b %Y %H:%M:%S %Z")


def card_lines(game: Game, theme: Theme) -> list[Text]:
    """Status, tricodes, rule and scores; the leading side is bold."""
    home, away = game.home_team, game.away_team
    leader = game.leader
    home_style = theme.bold if leader is home else ""
    away_style = theme.bold if leader is away else ""
    return [
        Text(center(render_game_status(game), CARD_STATUS_WIDTH)),
        Text.assemble((home.tricode, home_style), " | ", (away.tricode, away_style)),
        Text(" ---------"),
        Text.assemble(
            (format_score(home.score), home_style),
            " | ",
            (format_score(away.score), away_style),
        ),
    ]


def render_card(game: Game, width: int, focused: bool, theme: Theme) -> list[Text]:
    border = theme.active_border if focused else theme.border
    return boxed(card_lines(game, theme), width, CARD_CONTENT_LINES + 2, border, horizontal_center=True)


def help_lines(width: int, help_text: str, last_updated: Optional[datetime], theme: Theme) -> list[Text]:
    lines = []
    if last_updated is not None:
        lines.append(truncate_line(f"Last updated: {format_timestamp(last_updated)}", width, theme.dim))
    lines.append(truncate_line(help_text, width, theme.dim))
    return lines


def render_scoreboard(state: ScoreboardState, theme: Theme) -> list[Text]:
    """All cards in rows of ``state.columns``, followed by the help lines."""
    if state.error:
        return [Text(f"Error: {state.error}", style=theme.error)]
    if not state.games:
        return [Text(LOADING)]

    columns = state.columns
    lines: list[Text] = []
    for row_start in range(0, len(state.games), columns):
        row = state.games[row_start : row_start + columns]
        cards = [
            render_card(game, state.card_width, row_start + index == state.focus, theme)
            for index, game in enumerate(row)
        ]
        lines.extend(join_horizontal(cards))

    lines.extend(help_lines(state.width, SCOREBOARD_HELP, state.last_updated, theme))
    return lines
