"""The playing field: a fixed grid of cell values."""

import pygame

from .colors import cell_colors


class Grid:
    """A 20 by 10 field of cells; 0 is empty, other values are piece ids."""

    def __init__(self, rows: int = 20, columns: int = 10, cell_size: int = 30):
        self.rows = rows
        self.columns = columns
        self.cell_size = cell_size
        self.cells: list[list[int]] = []
        self._colors = cell_colors()
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.columns for _ in range(self.rows)]

    def render(self) -> str:
        """Return the grid as text, one line per row, each value followed by a space."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.cells
        )

    def __str__(self) -> str:
        return self.render()

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every cell onto the surface."""
        size = self.cell_size
        for row_index, row in enumerate(self.cells):
            for column_index, value in enumerate(row):
                rect = pygame.Rect(
                    column_index * size + 1, row_index * size + 1, size - 1, size - 1
                )
                pygame.draw.rect(surface, self._colors[value], rect)

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Tell whether the coordinate lies off the field."""
        return not (0 <= row < self.rows and 0 <= column < self.columns)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Tell whether the cell holds no piece."""
        if self.is_cell_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return self.cells[row][column] == 0

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many were removed."""
        completed = 0
        for row in reversed(range(self.rows)):
            if self._is_row_full(row):
                self._clear_row(row)
                completed += 1
            elif completed:
                self._move_row_down(row, completed)
        return completed

    def _is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def _clear_row(self, row: int) -> None:
        self.cells[row] = [0] * self.columns

    def _move_row_down(self, row: int, count: int) -> None:
        self.cells[row + count] = self.cells[row]
        self.cells[row] = [0] * self.columns