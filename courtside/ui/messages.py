"""Textual messages carrying fetch results back to the app."""

from typing import TYPE_CHECKING

from textual.message import Message

if TYPE_CHECKING:
    from courtside.events.types import UIEvent


class FetchCompleted(Message):
    """Posted from a fetch worker with the resulting event."""

    def __init__(self, event: "UIEvent") -> None:
        self.event = event
        super().__init__()
