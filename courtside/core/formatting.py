"""Display formatting for optional statistics, clocks and scores."""

import re
from typing import TYPE_CHECKING, Optional

from rich.cells import cell_len

if TYPE_CHECKING:
    from courtside.core.models.game import Game

# Sentinel shown for minutes/clocks that carry no playing time
NO_TIME = "-"

CLOCK_WIDTH = 5

_DURATION_RE = re.compile(r"^PT(?:(\d+)M)?(?:(\d+)(\.\d+)?S)?$")


def format_int(value: Optional[int]) -> str:
    """Integer stat, with unreported values shown as ``0``."""
    if value is None:
        return "0"
    return f"{value}"


def format_float(value: Optional[float]) -> str:
    """Float stat rounded to a whole number (used for plus/minus)."""
    if value is None:
        return "0"
    return f"{value:.0f}"


def format_pct(value: Optional[float]) -> str:
    """0-1 fraction as a one-decimal percentage, ``0.0`` when unreported."""
    if value is None:
        return "0.0"
    return f"{value * 100:.1f}"


def format_clock(raw: str) -> str:
    """
    Convert an ISO-8601 style duration into ``MM:SS[.ff]``.

    ``PT36M10.01S`` becomes ``36:10.01`` and ``PT0M0S`` becomes ``00:00``.
    Strings that are not durations are returned unchanged.
    """
    match = _DURATION_RE.match(raw or "")
    if not match or raw == "PT":
        return raw or ""
    minutes, seconds, fraction = match.groups()
    return f"{int(minutes or 0):02d}:{int(seconds or 0):02d}{fraction or ''}"


def format_minutes(raw: str) -> str:
    """
    Clock string truncated to ``MM:SS``.

    The full clock is computed first; anything five characters or shorter
    means no fractional time was reported and renders as ``-``.
    """
    clock = format_clock(raw)
    if len(clock) > CLOCK_WIDTH:
        return clock[:CLOCK_WIDTH]
    return NO_TIME


def format_score(score: int) -> str:
    """Pad a score to three cells for the scoreboard cards."""
    text = f"{score}"
    if len(text) == 1:
        return f" {text} "
    if len(text) == 2:
        return f" {text}"
    return text


def period_label(game: "Game") -> str:
    """``3Q`` in regulation, ``2OT`` in overtime."""
    if game.is_overtime:
        return f"{game.overtime_number}OT"
    return f"{game.period}Q"


def render_game_status(game: "Game", not_started: str = "Not Started", final: Optional[str] = None) -> str:
    """
    One-line game status.

    Args:
        game: Game to describe
        not_started: Text used before tip-off
        final: Text used once finished; defaults to ``Final``
    """
    if not game.is_started:
        return not_started
    if game.is_finished:
        return final or "Final"
    return f"{period_label(game)} ({format_minutes(game.clock)})"


def center(text: str, width: int) -> str:
    """Center ``text`` in ``width`` cells, leaving it untouched if it is wider."""
    padding = width - cell_len(text)
    if padding <= 0:
        return text
    left = padding // 2
    return " " * left + text + " " * (padding - left)


def truncate(text: str, width: int, ellipsis: str = "...") -> str:
    """Cut ``text`` to ``width`` characters, ending with an ellipsis when cut."""
    if len(text) <= width:
        return text
    if width <= len(ellipsis):
        return text[:width]
    return text[: width - len(ellipsis)] + ellipsis
