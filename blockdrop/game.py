"""Game state: the field, the falling piece, the next piece and the piece bag."""

import random
from enum import Enum, auto

import pygame

from .block import Block
from .blocks import all_blocks
from .colors import TEXT
from .grid import Grid

WELCOME_TEXT = "Welcome to Tetris!"
WELCOME_POSITION = (50, 200)


class Action(Enum):
    """A player command."""

    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    ROTATE = auto()


class Game:
    """One round of play on a single grid."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.grid = Grid()
        self._bag: list[Block] = all_blocks()
        self.current_block = self.random_block()
        self.next_block = self.random_block()
        self.game_over = False

    def random_block(self) -> Block:
        """Take a random piece out of the bag, refilling it when empty."""
        if not self._bag:
            self._bag = all_blocks()
        return self._bag.pop(self._rng.randrange(len(self._bag)))

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Paint the field, the greeting and the falling piece."""
        self.grid.draw(surface)
        surface.blit(font.render(WELCOME_TEXT, True, TEXT), WELCOME_POSITION)
        self.current_block.draw(surface)

    def handle_action(self, action: Action) -> None:
        """Apply a player command to the falling piece."""
        handlers = {
            Action.LEFT: self.move_block_left,
            Action.RIGHT: self.move_block_right,
            Action.DOWN: self.move_block_down,
            Action.ROTATE: self.rotate_block,
        }
        handlers[action]()

    def move_block_left(self) -> None:
        """Shift the piece one column left if there is room."""
        self._try_shift(0, -1)

    def move_block_right(self) -> None:
        """Shift the piece one column right if there is room."""
        self._try_shift(0, 1)

    def move_block_down(self) -> None:
        """Drop the piece one row, locking it in place when it cannot fall."""
        if self.game_over:
            return
        self.current_block.move(1, 0)
        if not self._block_placeable():
            self.current_block.move(-1, 0)
            self._lock_block()

    def rotate_block(self) -> None:
        """Rotate the piece if the new orientation has room."""
        if self.game_over:
            return
        self.current_block.rotate()
        if not self._block_placeable():
            self.current_block.undo_rotation()

    def _try_shift(self, rows: int, columns: int) -> None:
        if self.game_over:
            return
        self.current_block.move(rows, columns)
        if not self._block_placeable():
            self.current_block.move(-rows, -columns)

    def _block_placeable(self) -> bool:
        return not self._is_block_outside() and self._block_fits()

    def _is_block_outside(self) -> bool:
        return any(
            self.grid.is_cell_outside(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def _block_fits(self) -> bool:
        return all(
            self.grid.is_cell_empty(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def _lock_block(self) -> None:
        for cell in self.current_block.cell_positions():
            self.grid.cells[cell.row][cell.column] = self.current_block.id
        self.current_block = self.next_block
        if not self._block_placeable():
            self.game_over = True
        self.next_block = self.random_block()
        self.grid.clear_full_rows()