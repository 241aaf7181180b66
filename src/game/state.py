"""
Game state management for Vanishing Tic-Tac-Toe.
Tracks the board, whose turn it is, the order marks were placed in,
and the winning line once the game is decided.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from .board import Board, X, O, EMPTY, SYMBOLS
from .rules import Rules, MAX_MARKS


class GameMode(Enum):
    """Game modes."""
    PVP = "pvp"           # Player vs Player (hotseat)
    PVE = "pve"           # Player vs AI
    EVE = "eve"           # AI vs AI (demo)


class PlayerType(Enum):
    """Player types."""
    HUMAN = "human"
    AI = "ai"


@dataclass
class Player:
    """Player information."""
    mark: int
    player_type: PlayerType
    name: str = ""

    def __post_init__(self):
        if not self.name:
            type_name = "Human" if self.player_type == PlayerType.HUMAN else "AI"
            self.name = f"{SYMBOLS[self.mark]} ({type_name})"


class GameState:
    """
    Manages the complete state of a game.

    Two logical states: in progress and over. A game ends only when a move
    completes a line; since marks keep vanishing there is no draw.
    """

    def __init__(self, mode: GameMode = GameMode.PVE):
        self.mode = mode
        self.board = Board()
        self.current_player = X
        self.move_history: list[tuple] = []
        self.winning_line: Optional[tuple] = None
        self._setup_players(mode)

    def _setup_players(self, mode: GameMode):
        """Setup players based on game mode."""
        if mode == GameMode.PVP:
            self.players = {
                X: Player(X, PlayerType.HUMAN),
                O: Player(O, PlayerType.HUMAN),
            }
        elif mode == GameMode.PVE:
            self.players = {
                X: Player(X, PlayerType.HUMAN),
                O: Player(O, PlayerType.AI),
            }
        else:  # EVE
            self.players = {
                X: Player(X, PlayerType.AI),
                O: Player(O, PlayerType.AI),
            }

    def reset(self, mode: Optional[GameMode] = None):
        """Reset the game to initial state."""
        if mode is not None:
            self.mode = mode

        self.board = Board()
        self.current_player = X
        self.move_history = []
        self.winning_line = None
        self._setup_players(self.mode)

    def copy(self) -> 'GameState':
        """Independent copy used for simulating moves."""
        new_state = GameState.__new__(GameState)
        new_state.mode = self.mode
        new_state.board = self.board.copy()
        new_state.current_player = self.current_player
        new_state.move_history = list(self.move_history)
        new_state.winning_line = self.winning_line
        new_state.players = dict(self.players)
        return new_state

    def make_move(self, x: int, y: int) -> bool:
        """
        Place the current player's mark at (x, y).
        Returns True if the move was applied. A rejected move leaves the
        state untouched.
        """
        if self.is_over() or not Rules.is_valid_move(self.board, x, y):
            return False

        self.board.place_mark(x, y, self.current_player)
        self.move_history.append((x, y))

        # Oldest mark vanishes once the board would hold too many
        if len(self.move_history) > MAX_MARKS:
            old_x, old_y = self.move_history.pop(0)
            self.board.remove_mark(old_x, old_y)

        self.winning_line = Rules.find_winning_line(self.board)

        # Winner stays as current player
        if not self.is_over():
            self.switch_player()

        return True

    apply_move = make_move

    def switch_player(self):
        """Hand the turn to the other player."""
        self.current_player = Rules.opposite(self.current_player)

    def is_over(self) -> bool:
        """The game is over once a line has been completed."""
        return self.winning_line is not None

    def winner(self) -> int:
        """Mark on the winning line, or EMPTY while the game is running."""
        if self.winning_line is None:
            return EMPTY
        return self.board.get(*self.winning_line[0])

    def cell_at(self, x: int, y: int) -> int:
        return self.board.get(x, y)

    def get_current_player(self) -> Player:
        """Get the Player record for the side to move."""
        return self.players[self.current_player]

    def is_ai_turn(self) -> bool:
        """Check if it's AI's turn."""
        return (not self.is_over() and
                self.get_current_player().player_type == PlayerType.AI)

    def is_human_turn(self) -> bool:
        """Check if it's human's turn."""
        return (not self.is_over() and
                self.get_current_player().player_type == PlayerType.HUMAN)

    def next_to_vanish(self) -> Optional[tuple]:
        """Mark that disappears on the next successful move, if any."""
        if len(self.move_history) < MAX_MARKS:
            return None
        return self.move_history[0]

    def get_valid_moves(self) -> list:
        """Get all empty cells in row-major order."""
        return Rules.get_valid_moves(self.board)

    def get_move_count(self) -> int:
        """Number of marks currently on the board."""
        return len(self.move_history)

    def get_game_info(self) -> dict:
        """Get current game information."""
        winner = self.winner()
        return {
            'mode': self.mode.value,
            'turn': SYMBOLS[self.current_player],
            'marks_on_board': self.get_move_count(),
            'is_game_over': self.is_over(),
            'winner': SYMBOLS[winner] if winner != EMPTY else None,
            'winning_line': self.winning_line,
            'next_to_vanish': self.next_to_vanish(),
        }

    def __str__(self) -> str:
        info = self.get_game_info()
        lines = [
            f"Mode: {info['mode']}",
            f"Turn: {info['turn']} ({info['marks_on_board']} marks on board)",
            str(self.board),
        ]
        if info['is_game_over']:
            lines.append(f"Game Over! Winner: {info['winner']}")
        return '\n'.join(lines)


def new_game(mode: GameMode = GameMode.PVE) -> GameState:
    """Fresh game: empty board, X to move."""
    return GameState(mode)
