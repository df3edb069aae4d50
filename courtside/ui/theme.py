"""Styles and display switches handed to the render functions."""

from dataclasses import dataclass

from rich.style import Style

from courtside.core.badges import DEFAULT_BADGE_LIMIT


@dataclass(frozen=True)
class Theme:
    """Rich styles used across the screens."""

    border: Style = Style(color="grey39")
    active_border: Style = Style(color="green")
    table_header: Style = Style(bold=True)
    rule: Style = Style(color="grey39")
    bold: Style = Style(bold=True)
    dim: Style = Style(dim=True)
    underline: Style = Style(underline=True)
    banner: Style = Style(color="green", underline=True)
    positive: Style = Style(color="green")
    negative: Style = Style(color="red")
    highlight: Style = Style(color="black", bgcolor="yellow")
    error: Style = Style(color="red", bold=True)


@dataclass(frozen=True)
class DisplayOptions:
    """
    Display switches.

    ``decoration`` controls leader bolding and plus/minus colors in the box
    score. ``badges`` turns on badge prefixes and stat emphasis.
    """

    decoration: bool = True
    badges: bool = False
    badge_limit: int = DEFAULT_BADGE_LIMIT
