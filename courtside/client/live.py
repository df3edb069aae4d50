"""
NBA live-data client

Thin blocking wrapper around the public live-data CDN. Calls are made from
Textual thread workers, so a synchronous httpx client is used.
"""

import logging
import threading
from typing import Optional

import httpx

from courtside.client.base import NbaAPIError, NbaClient, NbaClientError, NbaDecodeError
from courtside.core.models import BoxScoreSnapshot, Game, PlayByPlaySnapshot

logger = logging.getLogger(__name__)


class LiveNbaClient(NbaClient):
    """
    Client for cdn.nba.com live data.

    Usage:
        with LiveNbaClient() as client:
            games = client.get_scoreboard()
    """

    BASE_URL = "https://cdn.nba.com/static/json/liveData"

    # The CDN rejects requests that do not look like a browser
    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        "Referer": "https://www.nba.com/",
        "Accept": "application/json",
    }

    def __init__(
        self,
        timeout: float = 10.0,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            base_url: Override for the live-data root URL.
            transport: Custom httpx transport (used by tests).
        """
        self.timeout = timeout
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=httpx.Timeout(self.timeout),
                    headers=self.HEADERS,
                    transport=self._transport,
                )
            return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _get_json(self, path: str) -> dict:
        url = f"{self.base_url}/{path}"
        try:
            response = self._get_client().get(url)
        except httpx.TimeoutException as e:
            raise NbaClientError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise NbaClientError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise NbaAPIError(
                f"Feed error {response.status_code} for {url}",
                status_code=response.status_code,
                response_body=response.text[:500],
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NbaDecodeError(f"Invalid JSON from {url}") from e
        if not isinstance(data, dict):
            raise NbaDecodeError(f"Unexpected payload from {url}")

        logger.debug(f"Fetched {url}")
        return data

    @staticmethod
    def _require_game_id(game_id: str) -> None:
        if not game_id:
            raise NbaClientError("game_id is required")

    def get_scoreboard(self) -> list[Game]:
        data = self._get_json("scoreboard/todaysScoreboard_00.json")
        games = (data.get("scoreboard") or {}).get("games") or []
        return [Game.from_dict(g) for g in games]

    def get_box_score(self, game_id: str) -> BoxScoreSnapshot:
        self._require_game_id(game_id)
        return BoxScoreSnapshot.from_dict(self._get_json(f"boxscore/boxscore_{game_id}.json"))

    def get_play_by_play(self, game_id: str) -> PlayByPlaySnapshot:
        self._require_game_id(game_id)
        return PlayByPlaySnapshot.from_dict(self._get_json(f"playbyplay/playbyplay_{game_id}.json"))
