"""Palette used to paint grid cells and falling blocks."""

Color = tuple[int, int, int, int]

DARK_GREY: Color = (80, 80, 80, 255)
GREEN: Color = (0, 228, 48, 255)
RED: Color = (230, 41, 55, 255)
BLUE: Color = (0, 121, 241, 255)
YELLOW: Color = (253, 249, 0, 255)
PURPLE: Color = (200, 122, 255, 255)
ORANGE: Color = (255, 161, 0, 255)
CYAN: Color = (21, 204, 209, 255)

BACKGROUND: Color = (0, 82, 172, 255)
TEXT: Color = (200, 200, 200, 255)


def cell_colors() -> list[Color]:
    """Return the cell palette, indexed by cell value (0 is an empty cell)."""
    return [DARK_GREY, GREEN, RED, BLUE, YELLOW, PURPLE, ORANGE, CYAN]