"""The seven standard pieces."""

from .block import Block
from .position import Position


def _layout(*cells: tuple[int, int]) -> list[Position]:
    return [Position(row, column) for row, column in cells]


class LBlock(Block):
    """The L piece."""

    def __init__(self) -> None:
        super().__init__(
            1,
            {
                0: _layout((0, 2), (1, 0), (1, 1), (1, 2)),
                1: _layout((0, 1), (1, 1), (2, 1), (2, 2)),
                2: _layout((1, 0), (1, 1), (1, 2), (2, 0)),
                3: _layout((0, 0), (0, 1), (1, 1), (2, 1)),
            },
        )


class JBlock(Block):
    """The J piece."""

    def __init__(self) -> None:
        super().__init__(
            2,
            {
                0: _layout((0, 0), (1, 0), (1, 1), (1, 2)),
                1: _layout((0, 1), (0, 2), (1, 1), (2, 1)),
                2: _layout((1, 0), (1, 1), (1, 2), (2, 2)),
                3: _layout((0, 1), (1, 1), (2, 1), (2, 0)),
            },
        )


class IBlock(Block):
    """The I piece."""

    def __init__(self) -> None:
        super().__init__(
            3,
            {
                0: _layout((1, 0), (1, 1), (1, 2), (1, 3)),
                1: _layout((0, 2), (1, 2), (2, 2), (3, 2)),
                2: _layout((2, 0), (2, 1), (2, 2), (2, 3)),
                3: _layout((0, 1), (1, 1), (2, 1), (3, 1)),
            },
        )
        self.move(-1, 0)


class OBlock(Block):
    """The O piece."""

    def __init__(self) -> None:
        super().__init__(4, {0: _layout((0, 0), (1, 0), (0, 1), (1, 1))})
        self.move(0, 1)


class SBlock(Block):
    """The S piece."""

    def __init__(self) -> None:
        super().__init__(
            5,
            {
                0: _layout((0, 1), (0, 2), (1, 0), (1, 1)),
                1: _layout((0, 1), (1, 1), (1, 2), (2, 2)),
                2: _layout((1, 1), (1, 2), (2, 0), (2, 1)),
                3: _layout((0, 0), (1, 0), (1, 1), (2, 1)),
            },
        )


class TBlock(Block):
    """The T piece."""

    def __init__(self) -> None:
        super().__init__(
            6,
            {
                0: _layout((0, 1), (1, 0), (1, 1), (1, 2)),
                1: _layout((0, 1), (1, 1), (1, 2), (2, 1)),
                2: _layout((1, 0), (1, 1), (1, 2), (2, 1)),
                3: _layout((0, 1), (1, 0), (1, 1), (2, 1)),
            },
        )


class ZBlock(Block):
    """The Z piece."""

    def __init__(self) -> None:
        super().__init__(
            7,
            {
                0: _layout((0, 0), (0, 1), (1, 1), (1, 2)),
                1: _layout((0, 2), (1, 1), (1, 2), (2, 1)),
                2: _layout((1, 0), (1, 1), (2, 1), (2, 2)),
                3: _layout((0, 1), (1, 0), (1, 1), (2, 0)),
            },
        )


def all_blocks() -> list[Block]:
    """Return a fresh instance of every piece, in bag order."""
    return [IBlock(), LBlock(), JBlock(), ZBlock(), SBlock(), OBlock(), TBlock()]