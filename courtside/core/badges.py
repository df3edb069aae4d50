"""
Badge classification for standout stat lines.

A player earns at most ``limit`` badges, taken from a fixed priority
order. Unreported statistics never satisfy a threshold.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from courtside.core.models.player import StatLine

# Thresholds
DOUBLE_DIGITS = 10
FIVE_BY_FIVE = 5
SNIPER_THREES_MADE = 8
SNIPER_THREE_PCT = 0.5
STEALS = 5
BLOCKS = 7
POINTS = 50
ASSISTS = 20
REBOUNDS = 20

EMPHASIS_HIGH = 10
EMPHASIS_LOW = 3

DEFAULT_BADGE_LIMIT = 1


def _at_least(value: Optional[float], threshold: float) -> bool:
    return value is not None and value >= threshold


def _core_stats(stats: StatLine) -> tuple[Optional[int], ...]:
    return (stats.points, stats.rebounds, stats.assists, stats.steals, stats.blocks)


def is_triple_double(stats: StatLine) -> bool:
    return sum(_at_least(v, DOUBLE_DIGITS) for v in _core_stats(stats)) >= 3


def is_five_by_five(stats: StatLine) -> bool:
    return all(_at_least(v, FIVE_BY_FIVE) for v in _core_stats(stats))


def is_sniper(stats: StatLine) -> bool:
    return _at_least(stats.three_pointers_made, SNIPER_THREES_MADE) and _at_least(
        stats.three_pointers_percentage, SNIPER_THREE_PCT
    )


def is_ninja(stats: StatLine) -> bool:
    return _at_least(stats.steals, STEALS)


def is_blocker(stats: StatLine) -> bool:
    return _at_least(stats.blocks, BLOCKS)


def is_scorer(stats: StatLine) -> bool:
    return _at_least(stats.points, POINTS)


def is_playmaker(stats: StatLine) -> bool:
    return _at_least(stats.assists, ASSISTS)


def is_rebounder(stats: StatLine) -> bool:
    return _at_least(stats.rebounds, REBOUNDS)


@dataclass(frozen=True)
class Badge:
    """A named badge and the predicate that earns it."""

    name: str
    symbol: str
    earned: Callable[[StatLine], bool]


# Highest priority first
BADGES: tuple[Badge, ...] = (
    Badge("triple_double", "👑", is_triple_double),
    Badge("five_by_five", "💯", is_five_by_five),
    Badge("sniper", "🎯", is_sniper),
    Badge("ninja", "🥷", is_ninja),
    Badge("blocker", "🔒", is_blocker),
    Badge("scorer", "👽", is_scorer),
    Badge("playmaker", "🤝", is_playmaker),
    Badge("rebounder", "💪", is_rebounder),
)


def classify(stats: StatLine, limit: int = DEFAULT_BADGE_LIMIT) -> tuple[Badge, ...]:
    """Return up to ``limit`` badges in priority order."""
    earned: list[Badge] = []
    for badge in BADGES:
        if len(earned) >= limit:
            break
        if badge.earned(stats):
            earned.append(badge)
    return tuple(earned)


def badge_prefix(stats: StatLine, limit: int = DEFAULT_BADGE_LIMIT) -> str:
    """Badge symbols to prepend to a player's name, or an empty string."""
    return "".join(badge.symbol for badge in classify(stats, limit))


def should_emphasize(stat: str, value: Optional[int]) -> bool:
    """Whether a single stat cell deserves an underline."""
    if value is None:
        return False
    if stat in ("PTS", "REB", "AST"):
        return value >= EMPHASIS_HIGH
    if stat in ("STL", "BLK"):
        return value > EMPHASIS_LOW
    return False
