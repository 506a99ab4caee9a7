from dataclasses import dataclass
from enum import Enum

from .log import get_logger

logger = get_logger(__name__)

BOARD_SIZE = 3  # fixed 3x3 grid

# every winning line, in scan order: rows, cols, main diag, anti-diag
WIN_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Cell(str, Enum):
    """
    contents of one square
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    def opposite(self):
        # only meaningful for marks
        return Cell.O if self is Cell.X else Cell.X


class StatusKind(Enum):
    WIN = "win"
    TIE = "tie"
    TURN = "turn"


class MoveResult(str, Enum):
    """
    outcome of play_move, 'invalid' means nothing changed
    """
    WIN = "win"
    TIE = "tie"
    CONTINUE = "continue"
    INVALID = "invalid"


@dataclass(frozen=True)
class Status:
    """
    one-line summary of the game for the status label
    """
    kind: StatusKind
    player: Cell = None  # winner for WIN, side to move for TURN

    @classmethod
    def win(cls, player):
        return cls(StatusKind.WIN, player)

    @classmethod
    def tie(cls):
        return cls(StatusKind.TIE)

    @classmethod
    def turn(cls, player):
        return cls(StatusKind.TURN, player)

    @property
    def message(self):
        if self.kind is StatusKind.WIN:
            return f"Player {self.player.value} wins! \U0001F389"
        if self.kind is StatusKind.TIE:
            return "It's a tie!"
        return f"Player {self.player.value}'s turn"


class InvalidCoordinate(ValueError):
    """
    raised for a cell outside the 3x3 grid, a caller bug
    """
    def __init__(self, row, col):
        super().__init__(f"cell ({row!r}, {col!r}) is outside the "
                         f"{BOARD_SIZE}x{BOARD_SIZE} board")
        self.row = row
        self.col = col


def _check_coordinate(row, col):
    # bool is an int subclass but never a valid index here
    for v in (row, col):
        if isinstance(v, bool) or not isinstance(v, int) \
           or not 0 <= v < BOARD_SIZE:
            raise InvalidCoordinate(row, col)


class GameEngine:
    """
    tic-tac-toe rules and state for one local two-player game

    the engine owns the board; callers only read it back through
    board / current_player / status() and change it through
    play_move() and reset(). win and tie are recomputed from the
    board on every query, nothing derived is stored.
    """
    def __init__(self):
        """
        start with a fresh game
        """
        self._board = None
        self._current_player = Cell.X
        self._started = False
        self.reset()

    @property
    def board(self):
        # read-only snapshot, rows of cells
        return tuple(tuple(row) for row in self._board)

    @property
    def current_player(self):
        return self._current_player

    @property
    def started(self):
        return self._started

    def reset(self):
        """
        clear board, X to move, not started
        """
        self._board = [[Cell.EMPTY for _ in range(BOARD_SIZE)]
                       for _ in range(BOARD_SIZE)]
        self._current_player = Cell.X
        self._started = False
        logger.debug("board reset")

    def play_move(self, row, col):
        """
        place current player's mark at (row, col)
        returns a MoveResult; MoveResult.INVALID leaves state untouched
        raises InvalidCoordinate if row/col are not in 0..2
        """
        _check_coordinate(row, col)
        if not self._is_playable(row, col):
            logger.debug("rejected move (%d, %d) by %s", row, col,
                         self._current_player.value)
            return MoveResult.INVALID

        player = self._current_player
        self._board[row][col] = player
        self._started = True
        logger.debug("%s played (%d, %d)", player.value, row, col)

        if self.winner() is not None:
            logger.info("player %s wins", player.value)
            return MoveResult.WIN
        if self.is_tie():
            logger.info("game tied")
            return MoveResult.TIE
        # game goes on, hand over the turn
        self._current_player = player.opposite()
        return MoveResult.CONTINUE

    def is_cell_playable(self, row, col):
        """
        true if a move at (row, col) would be accepted right now
        """
        _check_coordinate(row, col)
        return self._is_playable(row, col)

    def _is_playable(self, row, col):
        return self._board[row][col] is Cell.EMPTY and self.winner() is None

    def winning_line(self):
        """
        first completed line in scan order, or None
        """
        b = self._board
        for line in WIN_LINES:
            (r0, c0), (r1, c1), (r2, c2) = line
            first = b[r0][c0]
            if first is not Cell.EMPTY and first is b[r1][c1] is b[r2][c2]:
                return line
        return None

    def winner(self):
        """
        mark owning the first completed line, or None
        """
        line = self.winning_line()
        if line is None:
            return None
        row, col = line[0]
        return self._board[row][col]

    def is_full(self):
        return all(cell is not Cell.EMPTY for row in self._board for cell in row)

    def is_tie(self):
        """
        full board with no winner; a game that never started is never a tie
        """
        return self.winner() is None and self._started and self.is_full()

    def status(self):
        """
        Status.win / Status.tie / Status.turn for the current position
        """
        winner = self.winner()
        if winner is not None:
            return Status.win(winner)
        if self.is_tie():
            return Status.tie()
        return Status.turn(self._current_player)
