# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic Tac Toe"
BOARD_MIN_SIZE = 150          # px, board stays square
STATUS_FONT_SIZE = 12

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "#f0e68c"
MARK_WIDTH = 4
GRID_WIDTH = 2
WIN_LINE_WIDTH = 6
MARK_SCALE = 0.7              # mark radius as a share of half a cell

# status label styles, keyed by what the label is showing
STATUS_STYLES = {
    "turn": "color: #8acaff; font-weight: bold;",
    "win": "color: lime; font-weight: bold;",
    "tie": "color: #eee; font-weight: bold;",
}

# -----------------------------------------------------------------------------
# DARK PALETTE
# -----------------------------------------------------------------------------

WINDOW_COLOR = "#353535"
WINDOW_TEXT_COLOR = "white"
BASE_COLOR = "#232323"
ALT_BASE_COLOR = "#353535"
TOOLTIP_BASE_COLOR = "white"
TOOLTIP_TEXT_COLOR = "black"
TEXT_COLOR = "white"
BUTTON_COLOR = "#424242"
BUTTON_TEXT_COLOR = "white"
BRIGHT_TEXT_COLOR = "red"
HIGHLIGHT_COLOR = "#2a82da"
HIGHLIGHTED_TEXT_COLOR = "white"

DISABLED_TEXT_COLOR = "#7f7f7f"
