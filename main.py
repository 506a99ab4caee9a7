import argparse
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor

from tictactoe import config
from tictactoe.log import setup_logging
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette from the config colors.
    """
    palette = QPalette()
    # Standard roles
    for role, color in (
        (QPalette.Window, config.WINDOW_COLOR),
        (QPalette.WindowText, config.WINDOW_TEXT_COLOR),
        (QPalette.Base, config.BASE_COLOR),
        (QPalette.AlternateBase, config.ALT_BASE_COLOR),
        (QPalette.ToolTipBase, config.TOOLTIP_BASE_COLOR),
        (QPalette.ToolTipText, config.TOOLTIP_TEXT_COLOR),
        (QPalette.Text, config.TEXT_COLOR),
        (QPalette.Button, config.BUTTON_COLOR),
        (QPalette.ButtonText, config.BUTTON_TEXT_COLOR),
        (QPalette.BrightText, config.BRIGHT_TEXT_COLOR),
        (QPalette.Highlight, config.HIGHLIGHT_COLOR),
        (QPalette.HighlightedText, config.HIGHLIGHTED_TEXT_COLOR),
    ):
        palette.setColor(role, QColor(color))
    # Disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, QColor(config.DISABLED_TEXT_COLOR))
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Tic Tac Toe")
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s)"
    )
    # Qt consumes its own flags (-style, -platform ...) from the rest
    return parser.parse_known_args(argv)


def main(argv=None):
    args, qt_args = parse_args(argv)
    setup_logging(args.log_level)

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
