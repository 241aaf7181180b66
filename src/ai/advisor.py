"""
Move advisor for Vanishing Tic-Tac-Toe.

Greedy one-ply policy, tried in order:
1. Win now: a move that completes a line for the side to move.
2. Block: a move that would complete a line for the opponent.
3. Random: any empty cell.

Every candidate is tried on a copy of the state, so the vanish rule is
applied exactly as in a real move.
"""

import random
import time
from enum import IntEnum
from typing import Optional
from dataclasses import dataclass, field

from ..game.state import GameState


class Tier(IntEnum):
    """Stage of the heuristic that produced the move."""
    NONE = 0
    WIN = 1
    BLOCK = 2
    RANDOM = 3


@dataclass
class AdvisorDebugInfo:
    """Debug information from the last proposal."""
    tier: Tier = Tier.NONE
    move: Optional[tuple] = None
    thinking_time: float = 0.0
    candidates: list = field(default_factory=list)


class MoveAdvisor:
    """
    Proposes a move for the side to move. Stateless apart from debug info.

    rng: any object with a choice(seq) method; defaults to random.Random().
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.debug_info = AdvisorDebugInfo()

    def propose_move(self, state: GameState) -> Optional[tuple]:
        """
        Get a move for the current player.

        Returns:
            (x, y) tuple, or None if the board has no empty cell
        """
        start_time = time.time()
        self.debug_info = AdvisorDebugInfo()

        candidates = state.get_valid_moves()
        self.debug_info.candidates = candidates

        move = self._find_winning_move(state, candidates, as_opponent=False)
        tier = Tier.WIN

        if move is None:
            move = self._find_winning_move(state, candidates, as_opponent=True)
            tier = Tier.BLOCK

        if move is None and candidates:
            move = self.rng.choice(candidates)
            tier = Tier.RANDOM

        if move is None:
            tier = Tier.NONE

        self.debug_info.tier = tier
        self.debug_info.move = move
        self.debug_info.thinking_time = time.time() - start_time
        return move

    @staticmethod
    def _find_winning_move(state: GameState, candidates: list,
                           as_opponent: bool) -> Optional[tuple]:
        """First candidate (row-major) that ends the game when played."""
        for x, y in candidates:
            simulated = state.copy()
            if as_opponent:
                simulated.switch_player()
            simulated.make_move(x, y)
            if simulated.is_over():
                return (x, y)
        return None

    def get_debug_info(self) -> dict:
        """Get debug info for display."""
        info = self.debug_info
        return {
            'tier': info.tier.name.lower(),
            'move': info.move,
            'time_ms': info.thinking_time * 1000,
            'candidates': len(info.candidates),
        }


def propose_move(state: GameState, rng=None) -> Optional[tuple]:
    """One-off proposal without keeping an advisor around."""
    return MoveAdvisor(rng).propose_move(state)
