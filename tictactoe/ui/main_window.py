from ..config import STATUS_FONT_SIZE, STATUS_STYLES, WINDOW_TITLE
from ..game_logic import GameEngine, MoveResult
from ..log import get_logger
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = get_logger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, reset button
    """
    def __init__(self, engine=None):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        # one engine per window, no shared game state
        self.engine = engine if engine is not None else GameEngine()
        self.board_widget = BoardWidget(self.engine, parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(STATUS_FONT_SIZE); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    def _refresh(self):
        # re-read engine state into the widgets
        status = self.engine.status()
        self.message_label.setStyleSheet(STATUS_STYLES[status.kind.value])
        self.message_label.setText(status.message)
        game_over = self.engine.winner() is not None or self.engine.is_tie()
        self.board_widget.set_accept_clicks(not game_over)
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        res = self.engine.play_move(r, c)
        if res is MoveResult.INVALID:
            return  # occupied cell or finished game, nothing to redraw
        self._refresh()

    @Slot()
    def reset_game(self):
        # fresh board, X to move
        self.engine.reset()
        logger.info("new game")
        self._refresh()
