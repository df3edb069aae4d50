"""
Line primitives for the frame renderer.

Every screen is rendered as a list of Rich ``Text`` lines. Styles live in
spans rather than inline escape codes, so cutting a line by visual column
can never split a style sequence; the only hazard left is double-width
glyphs, which are dropped when they straddle a cut.
"""

from typing import Optional, Sequence

from rich.cells import get_character_cell_size
from rich.style import Style
from rich.text import Text

from courtside.core.formatting import truncate
from courtside.ui.constants import PINNED_WIDTH

BOX_TOP_LEFT, BOX_TOP_RIGHT = "┌", "┐"
BOX_BOTTOM_LEFT, BOX_BOTTOM_RIGHT = "└", "┘"
BOX_HORIZONTAL, BOX_VERTICAL = "─", "│"


def cut(text: Text, start: int, end: int) -> Text:
    """
    Return the part of ``text`` between visual columns ``start`` and ``end``.

    A wide glyph crossing either boundary is left out, so the result is
    never wider than ``end - start`` cells.
    """
    start = max(0, start)
    plain = text.plain
    if end <= start:
        return text.blank_copy()

    column = 0
    begin: Optional[int] = None
    stop = len(plain)
    for index, char in enumerate(plain):
        char_width = get_character_cell_size(char)
        if begin is None and column >= start:
            begin = index
        if begin is not None and column + char_width > end:
            stop = index
            break
        column += char_width

    if begin is None:
        return text.blank_copy()
    return text[begin:stop]


def max_scroll(line_width: int, width: int, fixed_width: int = PINNED_WIDTH) -> int:
    """Largest horizontal offset that still brings the end of the line into view."""
    visible = max(0, width - fixed_width)
    return max(0, line_width - fixed_width - visible)


def scroll_line(line: Text, width: int, offset: int, fixed_width: int = PINNED_WIDTH) -> Text:
    """Keep the first ``fixed_width`` cells in place and scroll the rest by ``offset``."""
    pinned = cut(line, 0, fixed_width)
    if width <= fixed_width:
        return pinned
    start = fixed_width + max(0, offset)
    return Text.assemble(pinned, cut(line, start, start + width - fixed_width))


def fit(line: Text, width: int) -> Text:
    """Cut or pad ``line`` to exactly ``width`` cells."""
    fitted = cut(line, 0, width)
    fitted.pad_right(max(0, width - fitted.cell_len))
    return fitted


def truncate_line(line: str, width: int, style: Optional[Style] = None) -> Text:
    """Plain line ending in ``...`` when wider than ``width``."""
    return Text(truncate(line, width), style=style or "")


def boxed(
    lines: Sequence[Text],
    width: int,
    height: int,
    border: Style,
    vertical_center: bool = False,
    horizontal_center: bool = False,
) -> list[Text]:
    """
    Draw ``lines`` inside a single-line border.

    ``width`` and ``height`` are the outer size; content is cut to
    ``width - 2`` by ``height - 2`` and missing rows are left blank.
    """
    if width < 2 or height < 2:
        return []
    inner_width = width - 2
    inner_height = height - 2

    content = list(lines)[:inner_height]
    if vertical_center and len(content) < inner_height:
        top = (inner_height - len(content)) // 2
        content = [Text()] * top + content

    rows = [Text(BOX_TOP_LEFT + BOX_HORIZONTAL * inner_width + BOX_TOP_RIGHT, style=border)]
    for index in range(inner_height):
        line = content[index].copy() if index < len(content) else Text()
        if horizontal_center:
            line = cut(line, 0, inner_width)
            line.align("center", inner_width)
        rows.append(
            Text.assemble(
                Text(BOX_VERTICAL, style=border),
                fit(line, inner_width),
                Text(BOX_VERTICAL, style=border),
            )
        )
    rows.append(Text(BOX_BOTTOM_LEFT + BOX_HORIZONTAL * inner_width + BOX_BOTTOM_RIGHT, style=border))
    return rows


def join_horizontal(blocks: Sequence[Sequence[Text]]) -> list[Text]:
    """Place blocks of lines side by side, padding shorter blocks with blanks."""
    if not blocks:
        return []
    widths = [max((line.cell_len for line in block), default=0) for block in blocks]
    height = max(len(block) for block in blocks)
    rows = []
    for index in range(height):
        row = Text()
        for block, block_width in zip(blocks, widths):
            line = block[index] if index < len(block) else Text()
            row.append_text(fit(line, block_width))
        rows.append(row)
    return rows


def join_lines(lines: Sequence[Text]) -> Text:
    """One frame from a list of lines."""
    frame = Text("\n").join(lines)
    frame.no_wrap = True
    frame.overflow = "crop"
    return frame
