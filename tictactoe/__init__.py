"""
Local two-player tic-tac-toe: game engine plus a PySide6 board.
"""

from .game_logic import (
    BOARD_SIZE, Cell, GameEngine, InvalidCoordinate, MoveResult, Status,
    StatusKind, WIN_LINES,
)

__version__ = "0.1.0"
__all__ = [
    "BOARD_SIZE",
    "Cell",
    "GameEngine",
    "InvalidCoordinate",
    "MoveResult",
    "Status",
    "StatusKind",
    "WIN_LINES",
]
