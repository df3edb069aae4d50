"""
Detail screen layout.

Top to bottom: team banner, header box with status and score, the box
score and game log panes (side by side on wide terminals, stacked
otherwise), and the footer with help text or the search prompt.
"""

from rich.text import Text

from courtside.core.formatting import render_game_status
from courtside.core.models import Game
from courtside.ui.constants import (
    DETAIL_HELP,
    LOADING,
    MIN_HEIGHT,
    MIN_SIDE_BY_SIDE_HEIGHT,
    MIN_STACKED_HEIGHT,
    MIN_WIDTH,
    SEARCH_PLACEHOLDER,
    SEARCH_PROMPT,
    TOO_SMALL,
)
from courtside.ui.layout import is_wide, split_widths
from courtside.ui.render.box_score import render_box_score
from courtside.ui.render.game_log import render_game_log
from courtside.ui.render.scoreboard import format_timestamp
from courtside.ui.render.text import boxed, join_horizontal, truncate_line
from courtside.ui.state.game_detail import Focus, GameDetailState
from courtside.ui.theme import DisplayOptions, Theme

HEADER_MIN_HEIGHT = 4
HEADER_SHARE = 9


def header_heights(available: int) -> tuple[int, int]:
    """Split the space between banner and footer into header box and main area."""
    unit = max(1, available // HEADER_SHARE)
    header = max(HEADER_MIN_HEIGHT, unit)
    if header > available - 2:
        header = max(2, available - 2)
    return header, max(0, available - header)


def header_lines(game: Game, theme: Theme) -> list[Text]:
    """Game status over ``HOME (score) | AWAY (score)``, leader in bold."""
    status = render_game_status(game, not_started="not started", final=game.status_text or None)
    home, away = game.home_team, game.away_team
    leader = game.leader
    return [
        Text(status),
        Text.assemble(
            (f"{home.tricode} ({home.score})", theme.bold if leader is home else ""),
            " | ",
            (f"{away.tricode} ({away.score})", theme.bold if leader is away else ""),
        ),
    ]


def footer_lines(state: GameDetailState, theme: Theme) -> list[Text]:
    width = state.width
    if state.search.active:
        prompt = Text(SEARCH_PROMPT)
        if state.search.draft:
            prompt.append(state.search.draft)
        else:
            prompt.append(SEARCH_PLACEHOLDER, style=theme.dim)
        return [prompt]

    lines = []
    if state.error:
        lines.append(truncate_line(f"Error: {state.error}", width, theme.error))
    elif state.last_updated is not None:
        lines.append(truncate_line(f"Last updated: {format_timestamp(state.last_updated)}", width, theme.dim))
    lines.append(truncate_line(DETAIL_HELP, width, theme.dim))
    return lines


def _box_score_pane(
    state: GameDetailState, width: int, height: int, theme: Theme, options: DisplayOptions
) -> list[Text]:
    border = theme.active_border if state.focus is Focus.BOX_SCORE else theme.border
    content = render_box_score(
        state.current_team, width - 2, height - 2, state.box_offset, state.box_scroll_x, theme, options
    )
    return boxed(content, width, height, border)


def _game_log_pane(state: GameDetailState, width: int, height: int, theme: Theme) -> list[Text]:
    border = theme.active_border if state.focus is Focus.GAME_LOG else theme.border
    search = state.search
    content = render_game_log(
        state.visible_actions,
        width - 2,
        height - 2,
        state.selected_period,
        state.log_offset,
        search.matches,
        search.cursor,
        theme,
    )
    return boxed(content, width, height, border)


def main_lines(state: GameDetailState, height: int, theme: Theme, options: DisplayOptions) -> list[Text]:
    """Box score and game log panes, or nothing when there is no room."""
    width = state.width
    box_width, log_width = split_widths(width)
    if is_wide(width):
        if height < MIN_SIDE_BY_SIDE_HEIGHT:
            return []
        return join_horizontal(
            [
                _box_score_pane(state, box_width, height, theme, options),
                _game_log_pane(state, log_width, height, theme),
            ]
        )

    if height < MIN_STACKED_HEIGHT:
        return []
    box_height = height // 2
    return _box_score_pane(state, width, box_height, theme, options) + _game_log_pane(
        state, width, height - box_height, theme
    )


def render_game_detail(state: GameDetailState, theme: Theme, options: DisplayOptions) -> list[Text]:
    if state.box_score is None:
        if state.error:
            return [Text(f"Error: {state.error}", style=theme.error)]
        return [Text(LOADING)]
    if state.width < MIN_WIDTH or state.height < MIN_HEIGHT:
        return [Text(TOO_SMALL)]

    game = state.box_score.game
    banner = Text(f"Selected Team: {state.current_team.tricode}", style=theme.banner)
    if state.last_updated is not None:
        banner.append(f" (Last Updated: {state.last_updated:%H:%M:%S})")
    footer = footer_lines(state, theme)

    available = state.height - 1 - len(footer)
    header_height, main_height = header_heights(available)
    header = boxed(
        header_lines(game, theme),
        state.width,
        header_height,
        theme.border,
        vertical_center=True,
        horizontal_center=True,
    )
    return [banner] + header + main_lines(state, main_height, theme, options) + footer
