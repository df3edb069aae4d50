"""Fire-and-forget browser launcher."""

import logging
import threading
import webbrowser

logger = logging.getLogger(__name__)

GAME_URL = "https://www.nba.com/game/{game_id}"


def game_url(game_id: str) -> str:
    """Public game page for ``game_id``."""
    return GAME_URL.format(game_id=game_id)


def _open(url: str) -> None:
    try:
        if not webbrowser.open(url):
            logger.debug(f"No browser available for {url}")
    except webbrowser.Error as e:
        logger.debug(f"Could not open {url}: {e}")


def open_url(url: str) -> None:
    """Open ``url`` in a background thread. Never raises, never blocks."""
    threading.Thread(target=_open, args=(url,), name="open-url", daemon=True).start()
