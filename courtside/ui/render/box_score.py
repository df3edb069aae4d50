"""Box score table for one team."""

from typing import NamedTuple, Optional

from rich.text import Text

from courtside.core.badges import badge_prefix, should_emphasize
from courtside.core.formatting import (
    CLOCK_WIDTH,
    NO_TIME,
    format_clock,
    format_float,
    format_int,
    format_minutes,
    format_pct,
)
from courtside.core.models import Player, StatLine, TeamSnapshot
from courtside.ui.constants import PINNED_WIDTH
from courtside.ui.render.text import cut, scroll_line
from courtside.ui.theme import DisplayOptions, Theme

NO_PLAYER_DATA = "No player data"
HEADER_LINES = 2
TOTALS_LINES = 2


class Column(NamedTuple):
    title: str
    width: int
    align: str = "right"


COLUMNS: tuple[Column, ...] = (
    Column("PLAYER", 15, "left"),
    Column("MIN", 5, "left"),
    Column("FGM", 3),
    Column("FGA", 3),
    Column("FG%", 5),
    Column("3PM", 3),
    Column("3PA", 3),
    Column("3P%", 5),
    Column("FTM", 3),
    Column("FTA", 3),
    Column("FT%", 5),
    Column("OREB", 4),
    Column("DREB", 4),
    Column("REB", 3),
    Column("AST", 3),
    Column("STL", 3),
    Column("BLK", 3),
    Column("TO", 3),
    Column("PF", 3),
    Column("PTS", 3),
    Column("+/-", 4),
)

# Single space between columns
TABLE_WIDTH = sum(column.width for column in COLUMNS) + len(COLUMNS) - 1


class Leaders(NamedTuple):
    points: int
    rebounds: int
    assists: int


def _row(cells: list[Text]) -> Text:
    padded = []
    for column, cell in zip(COLUMNS, cells):
        cell = cut(cell, 0, column.width)
        cell.align(column.align, column.width)
        padded.append(cell)
    return Text(" ").join(padded)


def _leaders(players: tuple[Player, ...]) -> Leaders:
    stats = [p.statistics for p in players if p.statistics is not None]
    return Leaders(
        points=max((s.points or 0 for s in stats), default=0),
        rebounds=max((s.rebounds or 0 for s in stats), default=0),
        assists=max((s.assists or 0 for s in stats), default=0),
    )


def _header_row() -> Text:
    return _row([Text(column.title) for column in COLUMNS])


def _player_row(player: Player, leaders: Leaders, theme: Theme, options: DisplayOptions) -> Text:
    stats = player.statistics
    name = player.display_name
    if stats is None:
        return _row([Text(name), Text(NO_TIME)] + [Text() for _ in COLUMNS[2:]])
    if options.badges:
        name = badge_prefix(stats, options.badge_limit) + name

    def stat(title: str, value: Optional[int], leader: Optional[int] = None) -> Text:
        cell = Text(format_int(value))
        if options.decoration and leader and value == leader:
            cell.stylize(theme.bold)
        if options.badges and should_emphasize(title, value):
            cell.stylize(theme.underline)
        return cell

    plus_minus = Text(format_float(stats.plus_minus))
    if options.decoration and stats.plus_minus is not None:
        if stats.plus_minus > 0:
            plus_minus.stylize(theme.positive)
        elif stats.plus_minus < 0:
            plus_minus.stylize(theme.negative)

    return _row(
        [Text(name), Text(format_minutes(stats.minutes))]
        + _shooting_cells(stats)
        + [
            Text(format_int(stats.rebounds_offensive)),
            Text(format_int(stats.rebounds_defensive)),
            stat("REB", stats.rebounds, leaders.rebounds),
            stat("AST", stats.assists, leaders.assists),
            stat("STL", stats.steals),
            stat("BLK", stats.blocks),
            Text(format_int(stats.turnovers)),
            Text(format_int(stats.fouls_personal)),
            stat("PTS", stats.points, leaders.points),
            plus_minus,
        ]
    )


def _shooting_cells(stats: StatLine) -> list[Text]:
    return [
        Text(format_int(stats.field_goals_made)),
        Text(format_int(stats.field_goals_attempted)),
        Text(format_pct(stats.field_goals_percentage)),
        Text(format_int(stats.three_pointers_made)),
        Text(format_int(stats.three_pointers_attempted)),
        Text(format_pct(stats.three_pointers_percentage)),
        Text(format_int(stats.free_throws_made)),
        Text(format_int(stats.free_throws_attempted)),
        Text(format_pct(stats.free_throws_percentage)),
    ]


def _total_row(team: TeamSnapshot) -> Text:
    stats = team.statistics
    minutes = format_clock(stats.minutes)[:CLOCK_WIDTH] if stats.minutes else NO_TIME
    return _row(
        [Text("TOTAL"), Text(minutes)]
        + _shooting_cells(stats)
        + [
            Text(format_int(stats.rebounds_offensive)),
            Text(format_int(stats.rebounds_defensive)),
            Text(format_int(stats.rebounds)),
            Text(format_int(stats.assists)),
            Text(format_int(stats.steals)),
            Text(format_int(stats.blocks)),
            Text(format_int(stats.turnovers)),
            Text(format_int(stats.fouls_personal)),
            Text(format_int(stats.points)),
            Text(NO_TIME),
        ]
    )


def render_box_score(
    team: TeamSnapshot,
    width: int,
    height: int,
    roster_offset: int,
    scroll_offset: int,
    theme: Theme,
    options: DisplayOptions,
) -> list[Text]:
    """
    Render the box score for ``team`` into at most ``height`` lines.

    Args:
        team: Team whose roster is shown
        width: Content width in cells
        height: Content height in lines
        roster_offset: First player row to show
        scroll_offset: Horizontal offset of the columns right of the name
        theme: Styles
        options: Decoration and badge switches
    """
    if team.players is None:
        return [Text(NO_PLAYER_DATA)]

    def scrolled(line: Text) -> Text:
        return scroll_line(line, width, scroll_offset, PINNED_WIDTH)

    header = scrolled(_header_row())
    header.stylize(theme.table_header)
    lines = [header, Text("─" * width, style=theme.rule)]

    reserved = TOTALS_LINES if team.statistics is not None else 0
    body_height = max(0, height - HEADER_LINES - reserved)

    players = team.players
    start = min(max(0, roster_offset), max(0, len(players) - 1))
    leaders = _leaders(players)
    body = [scrolled(_player_row(p, leaders, theme, options)) for p in players[start : start + body_height]]
    lines.extend(body)

    if team.statistics is not None:
        lines.extend(Text() for _ in range(body_height - len(body)))
        if height >= HEADER_LINES + TOTALS_LINES:
            lines.append(Text("─" * width, style=theme.rule))
        lines.append(scrolled(_total_row(team)))

    return lines
