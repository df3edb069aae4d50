"""Tests for the httpx-backed live client."""

import json

import httpx
import pytest

from courtside.client.base import NbaAPIError, NbaClientError, NbaDecodeError
from courtside.client.live import LiveNbaClient
from courtside.core.models import GameStatus

SCOREBOARD = {
    "scoreboard": {
        "games": [
            {
                "gameId": "0022300500",
                "gameStatus": 3,
                "gameStatusText": "Final",
                "period": 4,
                "homeTeam": {"teamId": 1, "teamTricode": "NYK", "score": 101},
                "awayTeam": {"teamId": 2, "teamTricode": "BKN", "score": 99},
            }
        ]
    }
}


def make_client(handler) -> LiveNbaClient:
    return LiveNbaClient(base_url="https://feed.test/liveData", transport=httpx.MockTransport(handler))


class TestEndpoints:
    """Tests for URL construction and decoding."""

    def test_scoreboard(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=SCOREBOARD)

        with make_client(handler) as client:
            games = client.get_scoreboard()

        assert str(seen[0].url) == "https://feed.test/liveData/scoreboard/todaysScoreboard_00.json"
        assert "Mozilla" in seen[0].headers["User-Agent"]
        assert len(games) == 1
        assert games[0].status is GameStatus.FINAL
        assert games[0].home_team.tricode == "NYK"

    def test_box_score_url(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"game": {"gameId": "0022300500"}})

        with make_client(handler) as client:
            snapshot = client.get_box_score("0022300500")

        assert seen == ["https://feed.test/liveData/boxscore/boxscore_0022300500.json"]
        assert snapshot.game_id == "0022300500"

    def test_play_by_play_url(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"game": {"gameId": "0022300500", "actions": []}})

        with make_client(handler) as client:
            snapshot = client.get_play_by_play("0022300500")

        assert seen == ["https://feed.test/liveData/playbyplay/playbyplay_0022300500.json"]
        assert snapshot.actions == ()

    def test_empty_scoreboard(self):
        with make_client(lambda request: httpx.Response(200, json={"scoreboard": {}})) as client:
            assert client.get_scoreboard() == []


class TestErrors:
    """Every failure surfaces as NbaClientError."""

    def test_status_error(self):
        with make_client(lambda request: httpx.Response(403, text="denied")) as client:
            with pytest.raises(NbaAPIError) as exc_info:
                client.get_scoreboard()
        assert exc_info.value.status_code == 403
        assert exc_info.value.response_body == "denied"

    def test_invalid_json(self):
        with make_client(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(NbaDecodeError):
                client.get_scoreboard()

    def test_non_object_payload(self):
        with make_client(lambda request: httpx.Response(200, text=json.dumps([1, 2]))) as client:
            with pytest.raises(NbaDecodeError):
                client.get_box_score("0022300500")

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(NbaClientError):
                client.get_play_by_play("0022300500")

    def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with make_client(handler) as client:
            with pytest.raises(NbaClientError, match="timed out"):
                client.get_scoreboard()

    def test_missing_game_id(self):
        with make_client(lambda request: httpx.Response(200, json={})) as client:
            with pytest.raises(NbaClientError):
                client.get_box_score("")

    def test_api_error_is_client_error(self):
        assert issubclass(NbaAPIError, NbaClientError)
        assert issubclass(NbaDecodeError, NbaClientError)


class TestLifecycle:
    """Tests for the lazily created httpx client."""

    def test_close_is_idempotent(self):
        client = make_client(lambda request: httpx.Response(200, json=SCOREBOARD))
        client.get_scoreboard()
        client.close()
        client.close()
        assert client._client is None

    def test_concurrent_first_use_shares_one_client(self):
        """Box score and play-by-play workers start together; only one httpx client is created."""
        from concurrent.futures import ThreadPoolExecutor

        client = make_client(lambda request: httpx.Response(200, json=SCOREBOARD))
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda _: client._get_client(), range(32)))
        assert all(c is created[0] for c in created)
        client.close()
