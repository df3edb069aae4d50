"""Core data models."""

from courtside.core.models.game import BoxScoreSnapshot, Game, GameStatus, TeamSnapshot
from courtside.core.models.play import Action, PlayByPlaySnapshot
from courtside.core.models.player import Player, PlayerStatistics, StatLine, TeamStatistics

__all__ = [
    "Action",
    "BoxScoreSnapshot",
    "Game",
    "GameStatus",
    "PlayByPlaySnapshot",
    "Player",
    "PlayerStatistics",
    "StatLine",
    "TeamSnapshot",
    "TeamStatistics",
]
