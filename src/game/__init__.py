from .board import Board, EMPTY, X, O
from .rules import Rules, LINES, MAX_MARKS
from .state import GameState, GameMode, new_game

__all__ = ['Board', 'Rules', 'GameState', 'GameMode', 'new_game',
           'LINES', 'MAX_MARKS', 'EMPTY', 'X', 'O']
