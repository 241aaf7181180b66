#!/usr/bin/env python3
"""
Vanishing Tic-Tac-Toe - Human vs AI Board Game
Main entry point for the game.
"""

import sys
import pygame

from src.game.state import GameState, GameMode
from src.game.rules import Rules
from src.ai.advisor import MoveAdvisor
from src.ui.renderer import Renderer
from src.ui.input import InputHandler, InputAction

# Pause between computer moves so they can be followed on screen
AI_MOVE_DELAY_MS = 400


class VanishingGame:
    """Main game controller."""

    def __init__(self):
        self.renderer = Renderer()
        self.input_handler = InputHandler(self.renderer)
        self.advisor = MoveAdvisor()

        # Game state
        self.state = GameState(GameMode.PVE)

        # UI state
        self.show_debug = False
        self.running = True

        # Mode cycle
        self.modes = [GameMode.PVE, GameMode.PVP, GameMode.EVE]
        self.current_mode_idx = 0

        self.last_ai_move_ticks = 0

    def run(self):
        """Main game loop."""
        while self.running:
            self._handle_input()

            if self.state.is_ai_turn():
                now = pygame.time.get_ticks()
                if now - self.last_ai_move_ticks >= AI_MOVE_DELAY_MS:
                    self._run_ai_turn()
                    self.last_ai_move_ticks = now

            debug_info = self.advisor.get_debug_info() if self.show_debug else None
            self.renderer.render(self.state, debug_info=debug_info,
                                 show_debug=self.show_debug)

            # Frame rate control
            self.renderer.tick(60)

        self.renderer.quit()

    def _handle_input(self):
        """Process all input events."""
        for event in self.input_handler.process_events():
            if event.action == InputAction.QUIT:
                self.running = False

            elif event.action == InputAction.PLACE_MARK:
                if event.position and not self.state.is_ai_turn():
                    x, y = event.position
                    self._make_move(x, y)

            elif event.action == InputAction.NEW_GAME:
                self._new_game()

            elif event.action == InputAction.TOGGLE_MODE:
                self._toggle_mode()

            elif event.action == InputAction.TOGGLE_DEBUG:
                self.show_debug = not self.show_debug

    def _make_move(self, x: int, y: int):
        """Apply a move, reporting why it was refused if it was."""
        reason = Rules.get_invalid_reason(self.state, x, y)
        if reason:
            self.renderer.show_error(reason)
            return

        self.state.make_move(x, y)

    def _run_ai_turn(self):
        """Execute AI move. No available cell means the turn is skipped."""
        move = self.advisor.propose_move(self.state)
        if move:
            self.state.make_move(*move)

    def _new_game(self):
        """Start a new game."""
        self.state.reset()
        self.renderer.reset_animations()

    def _toggle_mode(self):
        """Cycle between game modes."""
        self.current_mode_idx = (self.current_mode_idx + 1) % len(self.modes)
        self.state.reset(self.modes[self.current_mode_idx])
        self.renderer.reset_animations()


def main():
    """Entry point."""
    try:
        game = VanishingGame()
        game.run()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
