"""
Tests for BoardWidget: click mapping, signal emission and painting.
"""

import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from tictactoe.game_logic import Cell, GameEngine
from tictactoe.ui.board_widget import BoardWidget


@pytest.fixture
def widget(qapp, engine: GameEngine):
    """300x300 board over a fresh engine."""
    w = BoardWidget(engine)
    w.resize(300, 300)
    w.show()
    yield w
    w.close()
    w.deleteLater()


def collect_clicks(widget):
    clicks = []
    widget.cell_clicked.connect(lambda r, c: clicks.append((r, c)))
    return clicks


class TestCellAt:
    """Widget coordinates map onto the 3x3 grid."""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (10, 10, (0, 0)),
            (150, 10, (0, 1)),
            (290, 10, (0, 2)),
            (10, 150, (1, 0)),
            (150, 150, (1, 1)),
            (290, 290, (2, 2)),
            (299.9, 299.9, (2, 2)),
        ],
    )
    def test_inside_grid(self, widget: BoardWidget, x, y, expected) -> None:
        assert widget.cell_at(x, y) == expected

    @pytest.mark.parametrize("x, y", [(-1, 10), (10, -1), (300, 10), (10, 300)])
    def test_outside_grid(self, widget: BoardWidget, x, y) -> None:
        assert widget.cell_at(x, y) is None

    def test_wide_widget_centers_grid(self, widget: BoardWidget) -> None:
        widget.resize(500, 300)
        # grid is the 300px square from x=100 to x=400
        assert widget.cell_at(50, 150) is None
        assert widget.cell_at(110, 10) == (0, 0)
        assert widget.cell_at(390, 290) == (2, 2)
        assert widget.cell_at(450, 150) is None


class TestClicks:
    """Mouse releases become cell_clicked signals."""

    def test_click_emits_cell(self, widget: BoardWidget) -> None:
        clicks = collect_clicks(widget)
        QTest.mouseClick(widget, Qt.LeftButton, Qt.NoModifier, QPoint(250, 150))
        assert clicks == [(1, 2)]

    def test_right_click_ignored(self, widget: BoardWidget) -> None:
        clicks = collect_clicks(widget)
        QTest.mouseClick(widget, Qt.RightButton, Qt.NoModifier, QPoint(250, 150))
        assert clicks == []

    def test_no_emit_when_clicks_disabled(self, widget: BoardWidget) -> None:
        clicks = collect_clicks(widget)
        widget.set_accept_clicks(False)
        QTest.mouseClick(widget, Qt.LeftButton, Qt.NoModifier, QPoint(50, 50))
        assert clicks == []
        assert widget.accepts_clicks() is False

    def test_click_does_not_touch_engine(self, widget: BoardWidget, engine: GameEngine) -> None:
        QTest.mouseClick(widget, Qt.LeftButton, Qt.NoModifier, QPoint(50, 50))
        assert engine.started is False
        assert engine.board[0][0] is Cell.EMPTY


class TestPaint:
    """Painting reads the engine for every game phase."""

    def test_square_shape(self, widget: BoardWidget) -> None:
        assert widget.hasHeightForWidth()
        assert widget.heightForWidth(240) == 240

    def test_paint_empty_board(self, widget: BoardWidget) -> None:
        assert not widget.grab().isNull()

    def test_paint_marks_and_win_line(self, widget: BoardWidget, engine: GameEngine) -> None:
        for r, c in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            engine.play_move(r, c)
        assert engine.winning_line() is not None
        assert not widget.grab().isNull()
