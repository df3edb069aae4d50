"""Play-by-play pane."""

from typing import Sequence

from rich.text import Text

from courtside.core.formatting import CLOCK_WIDTH, format_clock, truncate
from courtside.core.models import Action
from courtside.ui.constants import QUARTERS
from courtside.ui.theme import Theme

TITLE = "gamelog"
HEADER_LINES = 2


def period_selector(selected_period: int, theme: Theme) -> Text:
    """``1Q | 2Q | 3Q | 4Q`` with the selected quarter underlined."""
    labels = [
        Text(f"{quarter}Q", style=theme.underline if quarter == selected_period else theme.dim)
        for quarter in QUARTERS
    ]
    return Text(" | ").join(labels)


def log_line(action: Action, width: int) -> str:
    """``clock|description``, with the description cut to fit ``width``."""
    clock = format_clock(action.clock)[:CLOCK_WIDTH]
    description = action.description
    limit = width - 6
    if limit > 3:
        description = truncate(description, limit)
    return f"{clock:<{CLOCK_WIDTH}}|{description}"


def render_game_log(
    actions: Sequence[Action],
    width: int,
    height: int,
    selected_period: int,
    offset: int,
    matches: Sequence[int],
    match_cursor: int,
    theme: Theme,
) -> list[Text]:
    """
    Render the already-filtered ``actions`` starting at ``offset``.

    Rows listed in ``matches`` are highlighted and the one under
    ``match_cursor`` is bold as well.
    """
    if height < 3:
        return []

    title = Text(TITLE, style=theme.bold)
    title.align("center", width)
    selector = period_selector(selected_period, theme)
    selector.align("center", width)
    lines = [title, selector]

    matched = set(matches)
    current = matches[match_cursor] if 0 <= match_cursor < len(matches) else None
    start = min(max(0, offset), max(0, len(actions) - 1))
    for index in range(start, min(len(actions), start + height - HEADER_LINES)):
        line = Text(log_line(actions[index], width))
        if index in matched:
            line.stylize(theme.highlight)
            if index == current:
                line.stylize(theme.bold)
        lines.append(line)
    return lines
