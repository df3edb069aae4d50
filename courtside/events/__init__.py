"""Events driving the view-state machines."""

from courtside.events.types import (
    SOURCE_BOX_SCORE,
    SOURCE_PLAY_BY_PLAY,
    SOURCE_SCOREBOARD,
    BoxScoreLoaded,
    FetchFailed,
    KeyPressed,
    PlayByPlayLoaded,
    RefreshTick,
    Resized,
    ScoreboardLoaded,
    UIEvent,
)

__all__ = [
    "SOURCE_BOX_SCORE",
    "SOURCE_PLAY_BY_PLAY",
    "SOURCE_SCOREBOARD",
    "BoxScoreLoaded",
    "FetchFailed",
    "KeyPressed",
    "PlayByPlayLoaded",
    "RefreshTick",
    "Resized",
    "ScoreboardLoaded",
    "UIEvent",
]
