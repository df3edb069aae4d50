"""Data sources for the UI."""

from courtside.client.base import NbaAPIError, NbaClient, NbaClientError, NbaDecodeError
from courtside.client.browser import game_url, open_url
from courtside.client.live import LiveNbaClient
from courtside.client.mock import MockNbaClient

__all__ = [
    "LiveNbaClient",
    "MockNbaClient",
    "NbaAPIError",
    "NbaClient",
    "NbaClientError",
    "NbaDecodeError",
    "game_url",
    "open_url",
]
