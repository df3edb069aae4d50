"""Data client interface and errors."""

from abc import ABC, abstractmethod
from typing import Optional

from courtside.core.models import BoxScoreSnapshot, Game, PlayByPlaySnapshot


class NbaClientError(Exception):
    """Base exception for data client errors."""
    pass


class NbaAPIError(NbaClientError):
    """Raised when the feed answers with an error status."""
    def __init__(self, message: str, status_code: int, response_body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class NbaDecodeError(NbaClientError):
    """Raised when a response cannot be decoded."""
    pass


class NbaClient(ABC):
    """
    Blocking data source for the UI.

    Every call either returns a full snapshot or raises NbaClientError.
    Implementations hold no view state and never retry.
    """

    @abstractmethod
    def get_scoreboard(self) -> list[Game]:
        """Today's games."""

    @abstractmethod
    def get_box_score(self, game_id: str) -> BoxScoreSnapshot:
        """Box score for one game."""

    @abstractmethod
    def get_play_by_play(self, game_id: str) -> PlayByPlaySnapshot:
        """Play-by-play for one game."""

    def close(self) -> None:
        """Release any held resources."""
