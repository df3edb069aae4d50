"""Play-by-play search."""

from typing import Sequence

from courtside.core.models.play import Action


def search_actions(actions: Sequence[Action], query: str) -> list[int]:
    """
    Find actions whose description contains ``query``, ignoring case.

    Callers filter by quarter and team first; the returned indices point
    into the sequence passed in. An empty query matches nothing.
    """
    if not query:
        return []

    needle = query.lower()
    return [i for i, action in enumerate(actions) if needle in action.description.lower()]
