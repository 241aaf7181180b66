"""
Pygame renderer for Vanishing Tic-Tac-Toe.
Handles all visual rendering of the game.
"""

import time
import pygame
from typing import Optional

from ..game.board import BOARD_SIZE, X, O, EMPTY, SYMBOLS
from ..game.state import GameState, GameMode

# Board settings
CELL_SIZE = 100
CELL_PADDING = int(0.15 * CELL_SIZE)
BOARD_PIXELS = BOARD_SIZE * CELL_SIZE + 2 * CELL_PADDING

# Window settings
STATUS_HEIGHT = 40
WINDOW_WIDTH = BOARD_PIXELS
WINDOW_HEIGHT = BOARD_PIXELS + STATUS_HEIGHT

# Stroke widths
GRID_LINE_WIDTH = CELL_SIZE // 20
WIN_LINE_WIDTH = CELL_SIZE // 10
SYMBOL_WIDTH = int(CELL_SIZE * 0.2)
SYMBOL_OFFSET = int(0.2 * CELL_SIZE)
O_RADIUS = int(0.3 * CELL_SIZE)

# Colors
COLOR_BG = (0xEF, 0xE6, 0xDD)
COLOR_GRID = (0x4F, 0x5D, 0x75)
COLOR_WIN_LINE = (0x23, 0x64, 0xAA)
COLOR_X = (0xBB, 0x44, 0x30)
COLOR_O = (0xFF, 0x9B, 0x71)
COLOR_TEXT = (0x4F, 0x5D, 0x75)
COLOR_ERROR = (180, 50, 50)

# Alpha for the mark that vanishes next
FADE_ALPHA = 90

MODE_LABELS = {
    GameMode.PVP: "PvP",
    GameMode.PVE: "PvE",
    GameMode.EVE: "EvE",
}


def board_to_screen(x: int, y: int) -> tuple:
    """Top-left pixel of cell (x, y)."""
    return (CELL_PADDING + x * CELL_SIZE, CELL_PADDING + y * CELL_SIZE)


def cell_center(x: int, y: int) -> tuple:
    """Centre pixel of cell (x, y)."""
    left, top = board_to_screen(x, y)
    return (left + CELL_SIZE // 2, top + CELL_SIZE // 2)


def screen_to_board(px: int, py: int) -> Optional[tuple]:
    """Convert screen coordinates to a cell, or None outside the grid."""
    if px < CELL_PADDING or py < CELL_PADDING:
        return None

    x = (px - CELL_PADDING) // CELL_SIZE
    y = (py - CELL_PADDING) // CELL_SIZE
    if 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE:
        return (x, y)
    return None


class Renderer:
    """Handles rendering of the game."""

    def __init__(self):
        pygame.init()
        pygame.display.set_caption("Vanishing Tic-Tac-Toe")

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.clock = pygame.time.Clock()

        # Fonts
        self.font_medium = pygame.font.Font(None, 32)
        self.font_small = pygame.font.Font(None, 22)

        # Hover state
        self.hover_pos: Optional[tuple] = None

        # Error message state
        self.error_message = ""
        self.error_message_time = 0

    def screen_to_board(self, px: int, py: int) -> Optional[tuple]:
        return screen_to_board(px, py)

    def show_error(self, message: str):
        """Show an error message temporarily."""
        self.error_message = message
        self.error_message_time = time.time()

    def reset_animations(self):
        self.error_message = ""
        self.error_message_time = 0

    def render(self, state: GameState, debug_info: Optional[dict] = None,
               show_debug: bool = False):
        """Render the complete game state."""
        self.screen.fill(COLOR_BG)

        self._render_grid()
        self._render_marks(state)

        if state.winning_line:
            self._render_winning_line(state.winning_line)

        self._render_hover(state)
        self._render_status(state)

        if show_debug and debug_info:
            self._render_debug_panel(debug_info)

        # Error message (temporary, fades after 2 seconds)
        if self.error_message and time.time() - self.error_message_time < 2.0:
            elapsed = time.time() - self.error_message_time
            alpha = int(255 * (1 - elapsed / 2.0))

            error_box = pygame.Surface((WINDOW_WIDTH - 40, 32), pygame.SRCALPHA)
            error_box.fill((*COLOR_ERROR, min(200, alpha)))
            box_y = BOARD_PIXELS // 2 - 16
            self.screen.blit(error_box, (20, box_y))

            error_text = self.font_small.render(self.error_message, True, (255, 255, 255))
            text_x = (WINDOW_WIDTH - error_text.get_width()) // 2
            self.screen.blit(error_text, (text_x, box_y + 9))

        pygame.display.flip()

    def _render_grid(self):
        """Draw the two inner vertical and horizontal lines."""
        for i in range(1, BOARD_SIZE):
            offset = CELL_PADDING + i * CELL_SIZE

            # Vertical line
            pygame.draw.line(self.screen, COLOR_GRID,
                             (offset, CELL_PADDING),
                             (offset, BOARD_PIXELS - CELL_PADDING), GRID_LINE_WIDTH)

            # Horizontal line
            pygame.draw.line(self.screen, COLOR_GRID,
                             (CELL_PADDING, offset),
                             (BOARD_PIXELS - CELL_PADDING, offset), GRID_LINE_WIDTH)

    def _render_marks(self, state: GameState):
        """Draw every mark, fading the one that vanishes next."""
        fading = None if state.is_over() else state.next_to_vanish()

        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                mark = state.cell_at(x, y)
                if mark == EMPTY:
                    continue
                alpha = FADE_ALPHA if (x, y) == fading else 255
                self._render_mark(x, y, mark, alpha)

    def _render_mark(self, x: int, y: int, mark: int, alpha: int = 255):
        """Render a single X or O, optionally translucent."""
        s = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)

        if mark == X:
            near, far = SYMBOL_OFFSET, CELL_SIZE - SYMBOL_OFFSET
            pygame.draw.line(s, (*COLOR_X, alpha), (near, near), (far, far), SYMBOL_WIDTH)
            pygame.draw.line(s, (*COLOR_X, alpha), (far, near), (near, far), SYMBOL_WIDTH)
        elif mark == O:
            pygame.draw.circle(s, (*COLOR_O, alpha),
                               (CELL_SIZE // 2, CELL_SIZE // 2), O_RADIUS, SYMBOL_WIDTH)

        self.screen.blit(s, board_to_screen(x, y))

    def _render_winning_line(self, line: tuple):
        """Connect the centres of the first and last cell of the line."""
        start = cell_center(*line[0])
        end = cell_center(*line[-1])
        pygame.draw.line(self.screen, COLOR_WIN_LINE, start, end, WIN_LINE_WIDTH)

        # Round caps
        for point in (start, end):
            pygame.draw.circle(self.screen, COLOR_WIN_LINE, point, WIN_LINE_WIDTH // 2)

    def _render_hover(self, state: GameState):
        """Preview the current player's mark under the cursor."""
        if not self.hover_pos or not state.is_human_turn():
            return

        x, y = self.hover_pos
        if state.cell_at(x, y) == EMPTY:
            self._render_mark(x, y, state.current_player, alpha=50)

    def _render_status(self, state: GameState):
        """Bottom status line."""
        if state.is_over():
            text = f"{SYMBOLS[state.winner()]} wins!  [R] new game"
        else:
            player = state.get_current_player()
            text = f"{player.name} to move"

        label = self.font_medium.render(text, True, COLOR_TEXT)
        self.screen.blit(label, (CELL_PADDING, BOARD_PIXELS + 8))

        mode = self.font_small.render(MODE_LABELS.get(state.mode, "?"), True, COLOR_GRID)
        self.screen.blit(mode, (WINDOW_WIDTH - mode.get_width() - CELL_PADDING,
                                BOARD_PIXELS + 14))

    def _render_debug_panel(self, debug_info: dict):
        """Small overlay with the advisor's last decision."""
        lines = [
            f"Tier: {debug_info.get('tier', '-')}",
            f"Move: {debug_info.get('move')}",
            f"Candidates: {debug_info.get('candidates', 0)}",
            f"Time: {debug_info.get('time_ms', 0):.2f}ms",
        ]

        panel_height = 10 + 20 * len(lines)
        s = pygame.Surface((170, panel_height), pygame.SRCALPHA)
        s.fill((30, 30, 40, 200))
        self.screen.blit(s, (CELL_PADDING, CELL_PADDING))

        y = CELL_PADDING + 6
        for line in lines:
            text = self.font_small.render(line, True, (220, 220, 220))
            self.screen.blit(text, (CELL_PADDING + 8, y))
            y += 20

    def update_hover(self, pos: tuple):
        """Update hover position for move preview."""
        self.hover_pos = self.screen_to_board(pos[0], pos[1])

    def tick(self, fps: int = 60):
        """Control frame rate."""
        self.clock.tick(fps)

    def quit(self):
        """Clean up pygame."""
        pygame.quit()
