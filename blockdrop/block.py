"""A falling piece: its rotations, its offset on the field and its drawing."""

from collections.abc import Iterable, Mapping

import pygame

from .colors import cell_colors
from .position import Position

CELL_SIZE = 30
SPAWN_COLUMN = 3


class Block:
    """A piece made of cells, with one cell layout per rotation state."""

    def __init__(self, block_id: int, cells: Mapping[int, Iterable[Position]]):
        if not cells:
            raise ValueError("a block needs at least one rotation state")
        self.id = block_id
        self.cells: dict[int, tuple[Position, ...]] = {
            state: tuple(layout) for state, layout in cells.items()
        }
        self.cell_size = CELL_SIZE
        self.rotation_state = 0
        self.row_offset = 0
        self.column_offset = SPAWN_COLUMN
        self._colors = cell_colors()

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping to the first."""
        self.rotation_state = (self.rotation_state + 1) % len(self.cells)

    def undo_rotation(self) -> None:
        """Go back to the previous rotation state, wrapping to the last."""
        self.rotation_state = (self.rotation_state - 1) % len(self.cells)

    def cell_positions(self) -> list[Position]:
        """Return the field coordinates of the cells in the current rotation."""
        return [
            cell.shifted(self.row_offset, self.column_offset)
            for cell in self.cells[self.rotation_state]
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the block's cells onto the surface."""
        size = self.cell_size
        color = self._colors[self.id]
        for cell in self.cell_positions():
            rect = pygame.Rect(cell.column * size + 1, cell.row * size + 1, size - 1, size - 1)
            pygame.draw.rect(surface, color, rect)