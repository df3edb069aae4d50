"""Events consumed by the view-state machines."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from courtside.core.models import BoxScoreSnapshot, Game, PlayByPlaySnapshot

# FetchFailed sources
SOURCE_SCOREBOARD = "scoreboard"
SOURCE_BOX_SCORE = "box_score"
SOURCE_PLAY_BY_PLAY = "play_by_play"


@dataclass(frozen=True)
class UIEvent:
    """Base class for all events."""

    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class KeyPressed(UIEvent):
    """A key press. ``key`` is the Textual key name, e.g. ``ctrl+s`` or ``left``."""

    key: str = ""
    character: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()


@dataclass(frozen=True)
class Resized(UIEvent):
    """Terminal size in character cells."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class RefreshTick(UIEvent):
    """Fired by the refresh timer."""


@dataclass(frozen=True)
class ScoreboardLoaded(UIEvent):
    """Scoreboard fetch succeeded."""

    games: tuple[Game, ...] = ()


@dataclass(frozen=True)
class BoxScoreLoaded(UIEvent):
    """Box score fetch succeeded."""

    game_id: str = ""
    snapshot: Optional[BoxScoreSnapshot] = None


@dataclass(frozen=True)
class PlayByPlayLoaded(UIEvent):
    """Play-by-play fetch succeeded."""

    game_id: str = ""
    snapshot: Optional[PlayByPlaySnapshot] = None


@dataclass(frozen=True)
class FetchFailed(UIEvent):
    """A fetch raised. ``game_id`` is empty for scoreboard fetches."""

    source: str = SOURCE_SCOREBOARD
    error: str = ""
    game_id: str = ""
