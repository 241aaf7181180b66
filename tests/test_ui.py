"""Tests for pixel mapping and input translation (no window needed)."""

import sys
sys.path.insert(0, '.')

import pygame

from src.ui.renderer import (
    screen_to_board, board_to_screen, cell_center,
    CELL_SIZE, CELL_PADDING, BOARD_PIXELS,
)
from src.ui.input import InputHandler, InputAction


class StubRenderer:
    """Just enough of Renderer for InputHandler."""

    def __init__(self):
        self.hover = None

    def screen_to_board(self, px, py):
        return screen_to_board(px, py)

    def update_hover(self, pos):
        self.hover = pos


class TestScreenMapping:
    """Pixel <-> cell conversion."""

    def test_cell_centers_map_back(self):
        for y in range(3):
            for x in range(3):
                assert screen_to_board(*cell_center(x, y)) == (x, y)

    def test_cell_corners(self):
        left, top = board_to_screen(2, 1)
        assert (left, top) == (CELL_PADDING + 2 * CELL_SIZE, CELL_PADDING + CELL_SIZE)
        assert screen_to_board(left, top) == (2, 1)
        assert screen_to_board(left - 1, top) == (1, 1)

    def test_padding_is_outside(self):
        assert screen_to_board(CELL_PADDING - 1, 50) is None
        assert screen_to_board(50, CELL_PADDING - 1) is None
        assert screen_to_board(BOARD_PIXELS - CELL_PADDING, 50) is None
        assert screen_to_board(50, BOARD_PIXELS + 10) is None


class TestInputHandler:
    """Event translation."""

    def test_keys(self):
        handler = InputHandler(StubRenderer())
        assert handler._handle_keydown(pygame.K_r).action == InputAction.NEW_GAME
        assert handler._handle_keydown(pygame.K_n).action == InputAction.NEW_GAME
        assert handler._handle_keydown(pygame.K_m).action == InputAction.TOGGLE_MODE
        assert handler._handle_keydown(pygame.K_d).action == InputAction.TOGGLE_DEBUG
        assert handler._handle_keydown(pygame.K_ESCAPE).action == InputAction.QUIT
        assert handler._handle_keydown(pygame.K_q).action == InputAction.NONE

    def test_click_on_cell(self):
        handler = InputHandler(StubRenderer())
        event = handler._handle_click(cell_center(0, 2))
        assert event.action == InputAction.PLACE_MARK
        assert event.position == (0, 2)

    def test_click_outside_grid(self):
        handler = InputHandler(StubRenderer())
        assert handler._handle_click((1, 1)).action == InputAction.NONE

    def test_mouse_motion_updates_hover(self):
        renderer = StubRenderer()
        handler = InputHandler(renderer)
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(40, 40), rel=(0, 0), buttons=(0, 0, 0))

        assert handler._process_event(event) is None
        assert renderer.hover == (40, 40)

    def test_quit_event(self):
        handler = InputHandler(StubRenderer())
        event = pygame.event.Event(pygame.QUIT)
        assert handler._process_event(event).action == InputAction.QUIT


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
