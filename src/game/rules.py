"""
Vanishing Tic-Tac-Toe rules.
Includes the winning-line table, move validation and win detection.
"""

from typing import Optional

from .board import Board, EMPTY, X, O

# Marks allowed on the board at once; the oldest one vanishes beyond this
MAX_MARKS = 6

# Winning lines as (x, y) triples. Order matters: the first complete line wins.
LINES = (
    # Rows
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Columns
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((2, 0), (1, 1), (0, 2)),
)


class Rules:
    """Game rules for Vanishing Tic-Tac-Toe."""

    @staticmethod
    def opposite(mark: int) -> int:
        """Get the opposite player."""
        return O if mark == X else X

    @staticmethod
    def find_winning_line(board: Board) -> Optional[tuple]:
        """
        Scan LINES in order and return the first one held entirely by one player.
        Returns None if no line is complete.
        """
        for line in LINES:
            first = board.get(*line[0])
            if first == EMPTY:
                continue
            if all(board.get(x, y) == first for x, y in line[1:]):
                return line
        return None

    @staticmethod
    def is_valid_move(board: Board, x: int, y: int) -> bool:
        """Check if a mark can be placed at (x, y)."""
        return Board.is_valid_pos(x, y) and board.is_empty(x, y)

    @staticmethod
    def get_invalid_reason(state, x: int, y: int) -> Optional[str]:
        """
        Explain why a move would be rejected.
        Accepts a GameState (game-over is checked) or a bare Board.
        Returns None if the move is legal.
        """
        board = getattr(state, 'board', state)

        if hasattr(state, 'is_over') and state.is_over():
            return "Game is over"
        if not Board.is_valid_pos(x, y):
            return "Out of bounds"
        if not board.is_empty(x, y):
            return "Cell is occupied"
        return None

    @staticmethod
    def get_valid_moves(board: Board) -> list:
        """All empty cells in row-major order."""
        return board.empty_cells()
