from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_BACKGROUND, BOARD_MIN_SIZE, GRID_COLOR, GRID_WIDTH,
    MARK_SCALE, MARK_WIDTH, O_COLOR, WIN_LINE_COLOR, WIN_LINE_WIDTH,
    X_COLOR,
)
from ..game_logic import BOARD_SIZE, Cell


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    reads the engine, never changes it
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine  # read-only view of game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(BOARD_MIN_SIZE, BOARD_MIN_SIZE))
        self.setMouseTracking(True)
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept
        if not accept:
            self.unsetCursor()

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _grid_geometry(self):
        # square grid centered in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        ox, oy, side = self._grid_geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp float edge cases
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row, col

    def _cell_center(self, row, col):
        ox, oy, side = self._grid_geometry()
        cell = side / BOARD_SIZE
        return QPointF(ox + col * cell + cell / 2, oy + row * cell + cell / 2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._grid_geometry()
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), GRID_WIDTH))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
                y = oy + i * cell_size
                painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))
            # marks
            rad = cell_size / 2 * MARK_SCALE
            for r, row in enumerate(self.engine.board):
                for c, mark in enumerate(row):
                    if mark is Cell.EMPTY:
                        continue
                    center = self._cell_center(r, c)
                    cx, cy = center.x(), center.y()
                    if mark is Cell.X:
                        painter.setPen(QPen(QColor(X_COLOR), MARK_WIDTH))
                        painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                        painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                    else:
                        painter.setPen(QPen(QColor(O_COLOR), MARK_WIDTH))
                        painter.drawEllipse(center, rad, rad)
            # strike through the winning line
            line = self.engine.winning_line()
            if line is not None:
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), WIN_LINE_WIDTH,
                                    Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(self._cell_center(*line[0]), self._cell_center(*line[-1]))
        finally:
            painter.end()

    def mouseMoveEvent(self, event):
        # pointing hand over cells that would take a move
        pos = self.cell_at(event.position().x(), event.position().y())
        if self._accept_clicks and pos is not None and self.engine.is_cell_playable(*pos):
            self.setCursor(Qt.PointingHandCursor)
        else:
            self.unsetCursor()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or event.button() != Qt.LeftButton:
            return
        pos = self.cell_at(event.position().x(), event.position().y())
        if pos is None:
            return
        self.cell_clicked.emit(*pos)  # notify main window
