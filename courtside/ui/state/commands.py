"""Commands returned by the state machines for the app to execute."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class Quit(Command):
    pass


@dataclass(frozen=True)
class OpenUrl(Command):
    url: str


@dataclass(frozen=True)
class FetchScoreboard(Command):
    pass


@dataclass(frozen=True)
class FetchGameDetail(Command):
    """Fetch box score and play-by-play for one game."""

    game_id: str


@dataclass(frozen=True)
class ScheduleRefresh(Command):
    """Replace the pending refresh timer."""

    delay: float


@dataclass(frozen=True)
class SelectGame(Command):
    """Raised by the scoreboard; consumed by the root state machine."""

    game_id: str


class Transition(NamedTuple):
    state: object
    commands: tuple[Command, ...] = ()
