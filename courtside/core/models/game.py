"""Game and team snapshot models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from courtside.core.formatting import format_clock
from courtside.core.models.player import Player, TeamStatistics


class GameStatus(Enum):
    """Game status codes used by the live-data feed."""

    NOT_STARTED = 1
    LIVE = 2
    FINAL = 3

    @classmethod
    def from_code(cls, code) -> "GameStatus":
        """Map a wire status code to a status, defaulting to NOT_STARTED."""
        try:
            return cls(int(code))
        except (TypeError, ValueError):
            return cls.NOT_STARTED


@dataclass(frozen=True)
class TeamSnapshot:
    """
    One side of a game.

    ``players`` and ``statistics`` are only present in box score
    responses; scoreboard responses leave them as None.
    """

    tricode: str = ""
    team_id: int = 0
    score: int = 0
    name: str = ""
    players: Optional[tuple[Player, ...]] = None
    statistics: Optional[TeamStatistics] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TeamSnapshot":
        """Create from a live-data ``homeTeam``/``awayTeam`` object."""
        players = data.get("players")
        stats = data.get("statistics")
        return cls(
            tricode=data.get("teamTricode") or "",
            team_id=int(data.get("teamId") or 0),
            score=int(data.get("score") or 0),
            name=data.get("teamName") or "",
            players=tuple(Player.from_dict(p) for p in players) if players is not None else None,
            statistics=TeamStatistics.from_dict(stats) if stats is not None else None,
        )


@dataclass(frozen=True)
class Game:
    """A game as received from the feed. Replaced wholesale on every fetch."""

    game_id: str = ""
    status: GameStatus = GameStatus.NOT_STARTED
    status_text: str = ""
    period: int = 0
    clock: str = ""
    home_team: TeamSnapshot = TeamSnapshot()
    away_team: TeamSnapshot = TeamSnapshot()

    @property
    def is_started(self) -> bool:
        return self.status is not GameStatus.NOT_STARTED

    @property
    def is_finished(self) -> bool:
        return self.status is GameStatus.FINAL

    @property
    def is_overtime(self) -> bool:
        return self.period > 4

    @property
    def overtime_number(self) -> int:
        """Overtime period number (1 for the first OT), 0 in regulation."""
        return self.period - 4 if self.is_overtime else 0

    @property
    def clock_display(self) -> str:
        return format_clock(self.clock)

    @property
    def leader(self) -> Optional[TeamSnapshot]:
        """The team currently ahead, or None on a tie."""
        if self.home_team.score > self.away_team.score:
            return self.home_team
        if self.away_team.score > self.home_team.score:
            return self.away_team
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        """Create from a live-data game object."""
        return cls(
            game_id=data.get("gameId") or "",
            status=GameStatus.from_code(data.get("gameStatus")),
            status_text=(data.get("gameStatusText") or "").strip(),
            period=int(data.get("period") or 0),
            clock=data.get("gameClock") or "",
            home_team=TeamSnapshot.from_dict(data.get("homeTeam") or {}),
            away_team=TeamSnapshot.from_dict(data.get("awayTeam") or {}),
        )


@dataclass(frozen=True)
class BoxScoreSnapshot:
    """A full box score response for a single game."""

    game: Game

    @property
    def game_id(self) -> str:
        return self.game.game_id

    @classmethod
    def from_dict(cls, data: dict) -> "BoxScoreSnapshot":
        """Create from the top-level box score document."""
        return cls(game=Game.from_dict(data.get("game") or {}))
