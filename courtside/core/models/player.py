"""Player and team statistics models."""

from dataclasses import dataclass
from typing import Any, Optional


def _opt_int(data: dict, key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _opt_float(data: dict, key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class StatLine:
    """
    Counting statistics shared by players and teams.

    Every field is optional: None means the feed has not reported the
    value yet, which is not the same thing as zero.
    """

    minutes: str = ""
    points: Optional[int] = None
    rebounds: Optional[int] = None
    assists: Optional[int] = None
    steals: Optional[int] = None
    blocks: Optional[int] = None

    field_goals_made: Optional[int] = None
    field_goals_attempted: Optional[int] = None
    field_goals_percentage: Optional[float] = None
    three_pointers_made: Optional[int] = None
    three_pointers_attempted: Optional[int] = None
    three_pointers_percentage: Optional[float] = None
    free_throws_made: Optional[int] = None
    free_throws_attempted: Optional[int] = None
    free_throws_percentage: Optional[float] = None

    rebounds_offensive: Optional[int] = None
    rebounds_defensive: Optional[int] = None
    turnovers: Optional[int] = None
    fouls_personal: Optional[int] = None

    @staticmethod
    def _fields_from_dict(data: dict) -> dict[str, Any]:
        return {
            "minutes": data.get("minutes") or "",
            "points": _opt_int(data, "points"),
            "rebounds": _opt_int(data, "reboundsTotal"),
            "assists": _opt_int(data, "assists"),
            "steals": _opt_int(data, "steals"),
            "blocks": _opt_int(data, "blocks"),
            "field_goals_made": _opt_int(data, "fieldGoalsMade"),
            "field_goals_attempted": _opt_int(data, "fieldGoalsAttempted"),
            "field_goals_percentage": _opt_float(data, "fieldGoalsPercentage"),
            "three_pointers_made": _opt_int(data, "threePointersMade"),
            "three_pointers_attempted": _opt_int(data, "threePointersAttempted"),
            "three_pointers_percentage": _opt_float(data, "threePointersPercentage"),
            "free_throws_made": _opt_int(data, "freeThrowsMade"),
            "free_throws_attempted": _opt_int(data, "freeThrowsAttempted"),
            "free_throws_percentage": _opt_float(data, "freeThrowsPercentage"),
            "rebounds_offensive": _opt_int(data, "reboundsOffensive"),
            "rebounds_defensive": _opt_int(data, "reboundsDefensive"),
            "turnovers": _opt_int(data, "turnovers"),
            "fouls_personal": _opt_int(data, "foulsPersonal"),
        }


@dataclass(frozen=True)
class PlayerStatistics(StatLine):
    """A single player's box score line."""

    plus_minus: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerStatistics":
        """Create from a live-data ``statistics`` object."""
        return cls(
            plus_minus=_opt_float(data, "plusMinusPoints"),
            **cls._fields_from_dict(data),
        )


@dataclass(frozen=True)
class TeamStatistics(StatLine):
    """Aggregated team totals."""

    @classmethod
    def from_dict(cls, data: dict) -> "TeamStatistics":
        """Create from a live-data team ``statistics`` object."""
        return cls(**cls._fields_from_dict(data))


@dataclass(frozen=True)
class Player:
    """A rostered player as reported in a box score."""

    first_name: str = ""
    family_name: str = ""
    person_id: int = 0
    statistics: Optional[PlayerStatistics] = None

    @property
    def display_name(self) -> str:
        """Short name, e.g. ``L.James``."""
        if self.first_name:
            return f"{self.first_name[0]}.{self.family_name}"
        return self.family_name

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Create from a live-data player object."""
        stats = data.get("statistics")
        return cls(
            first_name=data.get("firstName") or "",
            family_name=data.get("familyName") or "",
            person_id=_opt_int(data, "personId") or 0,
            statistics=PlayerStatistics.from_dict(stats) if stats is not None else None,
        )
