"""Tests for the move advisor."""

import sys
import random
sys.path.insert(0, '.')

from src.game.board import X, O
from src.game.state import GameState, new_game
from src.ai.advisor import MoveAdvisor, Tier, propose_move


class LastChoice:
    """Deterministic stand-in for random.Random: always picks the last item."""

    def __init__(self):
        self.seen = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[-1]


def play(moves: list) -> GameState:
    state = new_game()
    for x, y in moves:
        assert state.make_move(x, y)
    return state


class TestWinNow:
    """Tier 1: complete a line for the side to move."""

    def test_takes_winning_cell(self):
        # X holds (0, 1) and (1, 1); (2, 1) wins
        state = play([(0, 1), (0, 0), (1, 1), (2, 2)])
        advisor = MoveAdvisor()

        assert advisor.propose_move(state) == (2, 1)
        assert advisor.debug_info.tier == Tier.WIN

    def test_two_in_a_row_for_x(self):
        state = play([(0, 0), (1, 1), (1, 0), (2, 2)])
        assert state.current_player == X
        assert MoveAdvisor().propose_move(state) == (2, 0)

    def test_win_preferred_over_block(self):
        # X threatens (2, 0) but O can win at (2, 1)
        state = play([(0, 0), (0, 1), (1, 0), (1, 1), (2, 2)])
        assert state.current_player == O
        advisor = MoveAdvisor()

        assert advisor.propose_move(state) == (2, 1)
        assert advisor.debug_info.tier == Tier.WIN

    def test_first_win_in_row_major_order(self):
        # X can finish row 0 at (2, 0) or column 0 at (0, 2); (2, 0) comes first
        state = play([(0, 0), (1, 1), (1, 0), (2, 1), (0, 1)])
        state.switch_player()
        assert state.current_player == X

        assert MoveAdvisor().propose_move(state) == (2, 0)


class TestBlock:
    """Tier 2: occupy the cell the opponent would win on."""

    def test_blocks_opponent_line(self):
        state = play([(0, 0), (2, 2), (1, 0)])
        assert state.current_player == O
        advisor = MoveAdvisor()

        assert advisor.propose_move(state) == (2, 0)
        assert advisor.debug_info.tier == Tier.BLOCK

    def test_blocks_diagonal(self):
        # O threatens (2, 2) on the main diagonal; X has no line of its own
        state = play([(2, 0), (0, 0), (0, 2), (1, 1)])
        assert state.current_player == X
        advisor = MoveAdvisor()

        assert advisor.propose_move(state) == (2, 2)
        assert advisor.debug_info.tier == Tier.BLOCK


class TestRandomFallback:
    """Tier 3: any empty cell when nothing is forced."""

    def test_uses_injected_rng(self):
        rng = LastChoice()
        state = play([(1, 1)])
        advisor = MoveAdvisor(rng)

        move = advisor.propose_move(state)

        assert move == (2, 2)
        assert advisor.debug_info.tier == Tier.RANDOM
        assert rng.seen == [state.get_valid_moves()]

    def test_vanish_is_simulated(self):
        """A line that relies on the vanishing mark is not a threat."""
        state = play([(0, 0), (1, 1), (1, 0), (0, 1), (2, 1), (1, 2)])
        rng = LastChoice()
        advisor = MoveAdvisor(rng)

        move = advisor.propose_move(state)

        assert advisor.debug_info.tier == Tier.RANDOM
        assert rng.seen == [[(2, 0), (0, 2), (2, 2)]]
        assert move == (2, 2)

    def test_covers_several_cells(self):
        state = new_game()
        advisor = MoveAdvisor(random.Random(7))

        moves = {advisor.propose_move(state) for _ in range(100)}

        assert len(moves) > 1
        assert moves <= set(state.get_valid_moves())

    def test_full_board_returns_none(self):
        state = new_game()
        state.board.cells = [
            [X, O, X],
            [X, O, O],
            [O, X, X],
        ]
        advisor = MoveAdvisor(LastChoice())

        assert advisor.propose_move(state) is None
        assert advisor.debug_info.tier == Tier.NONE


class TestAdvisorContract:
    """The advisor never touches the real state."""

    def test_state_not_mutated(self):
        state = play([(0, 0), (1, 1), (1, 0), (0, 1), (2, 1), (1, 2)])
        cells = [row[:] for row in state.board.cells]
        history = list(state.move_history)
        player = state.current_player

        MoveAdvisor(random.Random(0)).propose_move(state)

        assert state.board.cells == cells
        assert state.move_history == history
        assert state.current_player == player
        assert state.winning_line is None

    def test_module_level_propose_move(self):
        state = play([(0, 0), (2, 2), (1, 0)])
        assert propose_move(state) == (2, 0)

        fresh = new_game()
        assert propose_move(fresh, random.Random(3)) in fresh.get_valid_moves()

    def test_debug_info(self):
        state = play([(0, 0), (2, 2), (1, 0)])
        advisor = MoveAdvisor()
        advisor.propose_move(state)

        info = advisor.get_debug_info()
        assert info['tier'] == 'block'
        assert info['move'] == (2, 0)
        assert info['candidates'] == 6
        assert info['time_ms'] >= 0


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
