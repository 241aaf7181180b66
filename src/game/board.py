"""
Board representation for Vanishing Tic-Tac-Toe.
3x3 grid of cells addressed as (x, y): x is the column, y is the row.
"""

EMPTY = 0
X = 1
O = 2

BOARD_SIZE = 3
TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

SYMBOLS = {EMPTY: '.', X: 'X', O: 'O'}


class Board:
    """
    Grid of marks stored row by row (cells[y][x]).
    """

    def __init__(self):
        self.cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def copy(self):
        """Create an independent copy of the board."""
        new_board = Board()
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    @staticmethod
    def is_valid_pos(x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def get(self, x: int, y: int) -> int:
        """Get mark at position. Returns EMPTY, X, or O."""
        if not self.is_valid_pos(x, y):
            return EMPTY
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        """Check if position is empty."""
        return self.get(x, y) == EMPTY

    def place_mark(self, x: int, y: int, mark: int) -> bool:
        """
        Place a mark on the board.
        Returns True if successful, False if position is occupied or invalid.
        """
        if not self.is_valid_pos(x, y):
            return False
        if not self.is_empty(x, y):
            return False

        self.cells[y][x] = mark
        return True

    def remove_mark(self, x: int, y: int) -> int:
        """
        Clear a cell.
        Returns the mark that was removed.
        """
        if not self.is_valid_pos(x, y):
            return EMPTY

        mark = self.cells[y][x]
        self.cells[y][x] = EMPTY
        return mark

    def count_marks(self, mark: int = None) -> int:
        """Count marks on the board, optionally for one player only."""
        if mark is None:
            return sum(1 for row in self.cells for cell in row if cell != EMPTY)
        return sum(1 for row in self.cells for cell in row if cell == mark)

    def empty_cells(self) -> list:
        """Empty positions in row-major order (y outer, x inner)."""
        return [
            (x, y)
            for y in range(BOARD_SIZE)
            for x in range(BOARD_SIZE)
            if self.cells[y][x] == EMPTY
        ]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        """String representation of the board."""
        lines = ['   ' + ' '.join(str(x) for x in range(BOARD_SIZE))]
        for y in range(BOARD_SIZE):
            lines.append(f'{y}  ' + ' '.join(SYMBOLS[cell] for cell in self.cells[y]))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'Board(cells={self.cells})'
