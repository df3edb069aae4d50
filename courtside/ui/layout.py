"""Size arithmetic shared by the detail state machine and its renderer."""

from courtside.ui.constants import BOX_SCORE_SHARE, WIDE_LAYOUT_MIN_WIDTH


def is_wide(width: int) -> bool:
    return width >= WIDE_LAYOUT_MIN_WIDTH


def split_widths(width: int) -> tuple[int, int]:
    """Outer widths of the box score and game log panes."""
    if not is_wide(width):
        return width, width
    numerator, denominator = BOX_SCORE_SHARE
    box_width = width * numerator // denominator
    return box_width, width - box_width


def box_content_width(width: int) -> int:
    """Width available to box score rows inside the pane border."""
    box_width, _ = split_widths(width)
    return max(0, box_width - 2)
