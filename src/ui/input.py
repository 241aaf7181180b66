"""
Input handling for Vanishing Tic-Tac-Toe.
Processes mouse and keyboard events.
"""

import pygame
from enum import Enum, auto
from typing import Optional
from dataclasses import dataclass


class InputAction(Enum):
    """Types of input actions."""
    NONE = auto()
    QUIT = auto()
    PLACE_MARK = auto()
    NEW_GAME = auto()
    TOGGLE_MODE = auto()
    TOGGLE_DEBUG = auto()


KEY_MAP = {
    pygame.K_ESCAPE: InputAction.QUIT,
    pygame.K_r: InputAction.NEW_GAME,
    pygame.K_n: InputAction.NEW_GAME,
    pygame.K_m: InputAction.TOGGLE_MODE,
    pygame.K_d: InputAction.TOGGLE_DEBUG,
}


@dataclass
class InputEvent:
    """Represents a processed input event."""
    action: InputAction
    position: Optional[tuple] = None  # Cell (x, y) for PLACE_MARK
    mouse_pos: Optional[tuple] = None  # Screen position


class InputHandler:
    """Handles user input for the game."""

    def __init__(self, renderer):
        self.renderer = renderer

    def process_events(self) -> list[InputEvent]:
        """
        Process all pending pygame events.
        Returns list of InputEvents.
        """
        events = []

        for event in pygame.event.get():
            input_event = self._process_event(event)
            if input_event and input_event.action != InputAction.NONE:
                events.append(input_event)

        return events

    def _process_event(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Process a single pygame event."""
        if event.type == pygame.QUIT:
            return InputEvent(InputAction.QUIT)

        elif event.type == pygame.MOUSEMOTION:
            self.renderer.update_hover(event.pos)
            return None

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:  # Left click
                return self._handle_click(event.pos)

        elif event.type == pygame.KEYDOWN:
            return self._handle_keydown(event.key)

        return None

    def _handle_click(self, pos: tuple) -> InputEvent:
        """Handle mouse click."""
        board_pos = self.renderer.screen_to_board(pos[0], pos[1])
        if board_pos:
            return InputEvent(InputAction.PLACE_MARK, position=board_pos, mouse_pos=pos)

        return InputEvent(InputAction.NONE)

    def _handle_keydown(self, key: int) -> InputEvent:
        """Handle keyboard input."""
        return InputEvent(KEY_MAP.get(key, InputAction.NONE))
