"""Main courtside TUI application."""

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.timer import Timer
from textual.widgets import Static

from courtside.client.base import NbaClient, NbaClientError
from courtside.client.browser import open_url
from courtside.config import AppConfig
from courtside.events.types import (
    SOURCE_BOX_SCORE,
    SOURCE_PLAY_BY_PLAY,
    SOURCE_SCOREBOARD,
    BoxScoreLoaded,
    FetchFailed,
    KeyPressed,
    PlayByPlayLoaded,
    RefreshTick,
    Resized,
    ScoreboardLoaded,
    UIEvent,
)
from courtside.ui.messages import FetchCompleted
from courtside.ui.render.frame import render_frame
from courtside.ui.state import root
from courtside.ui.state.commands import (
    Command,
    FetchGameDetail,
    FetchScoreboard,
    OpenUrl,
    Quit,
    ScheduleRefresh,
    Transition,
)
from courtside.ui.theme import DisplayOptions, Theme

logger = logging.getLogger(__name__)


class CourtsideApp(App, inherit_bindings=False):
    """
    Textual application driving the root state machine.

    Keys, resizes, timer ticks and fetch results are turned into events and
    fed to ``root.handle_event``. The returned commands are executed here:
    fetches run in thread workers that post ``FetchCompleted`` back to this
    loop, and exactly one refresh timer is pending at any time.
    """

    TITLE = "courtside"

    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"

    # Every key, ctrl+c and ctrl+q included, belongs to the state machines
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        client: NbaClient,
        config: Optional[AppConfig] = None,
        browser: Callable[[str], None] = open_url,
        theme: Optional[Theme] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.nba_client = client
        self.app_config = config or AppConfig()
        self.open_browser = browser
        self.frame_theme = theme or Theme()
        self.display_options = DisplayOptions(
            decoration=not self.app_config.no_decoration,
            badges=self.app_config.badges,
            badge_limit=self.app_config.badge_limit,
        )
        self.view_state = root.RootState()
        self._refresh_timer: Optional[Timer] = None
        self._frame: Optional[Static] = None

    def compose(self) -> ComposeResult:
        self._frame = Static(id="frame")
        yield self._frame

    def on_mount(self) -> None:
        """Start the refresh cycle."""
        self._apply(root.start(self.app_config.reload_seconds, self.app_config.card_width))
        self.handle_ui_event(Resized(width=self.size.width, height=self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        self.handle_ui_event(Resized(width=event.size.width, height=event.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.handle_ui_event(KeyPressed(key=event.key, character=event.character))

    def on_fetch_completed(self, message: FetchCompleted) -> None:
        self.handle_ui_event(message.event)

    def handle_ui_event(self, event: UIEvent) -> None:
        """Feed one event to the root state machine and act on the result."""
        self._apply(root.handle_event(self.view_state, event))

    def _apply(self, transition: Transition) -> None:
        self.view_state = transition.state
        for command in transition.commands:
            self._execute(command)
        self._render_frame()

    def _render_frame(self) -> None:
        if self._frame is None or not self._frame.is_mounted:
            return
        self._frame.update(render_frame(self.view_state, self.frame_theme, self.display_options))

    def _execute(self, command: Command) -> None:
        if isinstance(command, Quit):
            self.exit()
        elif isinstance(command, OpenUrl):
            try:
                self.open_browser(command.url)
            except Exception as e:
                logger.debug(f"Could not open {command.url}: {e}")
        elif isinstance(command, FetchScoreboard):
            self.run_worker(self._fetch_scoreboard, thread=True, group="scoreboard", exit_on_error=False)
        elif isinstance(command, FetchGameDetail):
            self.run_worker(
                partial(self._fetch_box_score, command.game_id), thread=True, group="detail", exit_on_error=False
            )
            self.run_worker(
                partial(self._fetch_play_by_play, command.game_id), thread=True, group="detail", exit_on_error=False
            )
        elif isinstance(command, ScheduleRefresh):
            self._schedule_refresh(command.delay)
        else:
            logger.warning(f"Unhandled command: {command!r}")

    # ------------------------------------------------------------------ timer

    def _schedule_refresh(self, delay: float) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
        self._refresh_timer = self.set_timer(delay, self._on_refresh_timer)
        logger.debug(f"Next refresh in {delay}s")

    def _on_refresh_timer(self) -> None:
        self._refresh_timer = None
        self.handle_ui_event(RefreshTick())

    # ---------------------------------------------------------------- workers

    def _run_fetch(self, source: str, fetch: Callable[[], UIEvent], game_id: str = "") -> None:
        """Worker body: run ``fetch`` and post its event, or a FetchFailed."""
        try:
            event = fetch()
        except NbaClientError as e:
            event = FetchFailed(source=source, error=str(e), game_id=game_id)
        except Exception as e:
            logger.exception(f"Unexpected error fetching {source} {game_id}".rstrip())
            event = FetchFailed(source=source, error=str(e), game_id=game_id)
        self.post_message(FetchCompleted(event))

    def _fetch_scoreboard(self) -> None:
        self._run_fetch(
            SOURCE_SCOREBOARD,
            lambda: ScoreboardLoaded(games=tuple(self.nba_client.get_scoreboard())),
        )

    def _fetch_box_score(self, game_id: str) -> None:
        self._run_fetch(
            SOURCE_BOX_SCORE,
            lambda: BoxScoreLoaded(game_id=game_id, snapshot=self.nba_client.get_box_score(game_id)),
            game_id,
        )

    def _fetch_play_by_play(self, game_id: str) -> None:
        self._run_fetch(
            SOURCE_PLAY_BY_PLAY,
            lambda: PlayByPlayLoaded(game_id=game_id, snapshot=self.nba_client.get_play_by_play(game_id)),
            game_id,
        )


def run_app(client: NbaClient, config: Optional[AppConfig] = None) -> int:
    """Run the courtside TUI application and return its exit code."""
    app = CourtsideApp(client=client, config=config)
    app.run()
    return app.return_code or 0
