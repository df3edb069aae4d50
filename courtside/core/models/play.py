"""Play-by-play models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Action:
    """A single play-by-play event."""

    action_number: int = 0
    clock: str = ""
    period: int = 0
    team_id: int = 0
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Action":
        """Create from a live-data action object."""
        return cls(
            action_number=int(data.get("actionNumber") or 0),
            clock=data.get("clock") or "",
            period=int(data.get("period") or 0),
            team_id=int(data.get("teamId") or 0),
            description=data.get("description") or "",
        )


@dataclass(frozen=True)
class PlayByPlaySnapshot:
    """
    Full play-by-play for one game.

    Actions keep the feed's order; consumers filter but never reorder.
    """

    game_id: str = ""
    actions: tuple[Action, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "PlayByPlaySnapshot":
        """Create from the top-level play-by-play document."""
        game = data.get("game") or {}
        return cls(
            game_id=game.get("gameId") or "",
            actions=tuple(Action.from_dict(a) for a in game.get("actions") or ()),
        )
