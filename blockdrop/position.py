"""Row and column coordinates of a single cell."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the playing field."""

    row: int
    column: int

    def shifted(self, rows: int, columns: int) -> "Position":
        """Return this position moved by the given number of rows and columns."""
        return Position(self.row + rows, self.column + columns)