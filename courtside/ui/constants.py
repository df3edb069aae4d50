"""Constants for the courtside TUI."""

# Minimum terminal size for the detail screen
MIN_WIDTH = 30
MIN_HEIGHT = 10

# Width at which the detail screen puts box score and game log side by side
WIDE_LAYOUT_MIN_WIDTH = 100

# Box score share of the width in the side-by-side layout
BOX_SCORE_SHARE = (6, 10)

# Pane height below which the split layouts are dropped
MIN_SIDE_BY_SIDE_HEIGHT = 4
MIN_STACKED_HEIGHT = 6

# Scoreboard cards
DEFAULT_CARD_WIDTH = 18
CARD_STATUS_WIDTH = 11

# Player name column stays in place while the box score scrolls
PINNED_WIDTH = 16

QUARTERS = (1, 2, 3, 4)
SEARCH_PROMPT = "/"
SEARCH_PLACEHOLDER = "Search..."
SEARCH_CHAR_LIMIT = 156

LOADING = "Loading..."
TOO_SMALL = "Terminal too small. Please enlarge."

SCOREBOARD_HELP = "<hjkli←↓↑→ >: move, <enter>: detail, <ctrl+w>: watch (browser), <q/esc>: quit"
DETAIL_HELP = (
    "<hjkli←↓↑→ >: move, <ctrl+s>: switch team, <ctrl+b>: box, <ctrl+l>: log, "
    "<ctrl+q>: period, <ctrl+w>: watch, <ctrl+c>: quit"
)

# Key names as reported by Textual
KEYS_LEFT = frozenset({"h", "left"})
KEYS_RIGHT = frozenset({"l", "right"})
KEYS_UP = frozenset({"k", "up"})
KEYS_DOWN = frozenset({"j", "down"})
KEYS_BACK = frozenset({"escape", "backspace"})
KEYS_SCOREBOARD_QUIT = frozenset({"q", "escape", "ctrl+c"})
KEYS_NEXT_MATCH = frozenset({"n"})
KEYS_PREVIOUS_MATCH = frozenset({"N", "shift+n"})
KEYS_SEARCH = frozenset({"slash"})
KEY_QUIT = "ctrl+c"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_WATCH = "ctrl+w"
KEY_SWITCH_TEAM = "ctrl+s"
KEY_NEXT_QUARTER = "ctrl+q"
KEY_FOCUS_BOX = "ctrl+b"
KEY_FOCUS_LOG = "ctrl+l"
