import random

import pygame
import pytest

from blockdrop.blocks import IBlock, OBlock, TBlock
from blockdrop.colors import cell_colors
from blockdrop.game import Action, Game


def _game(seed=0):
    return Game(random.Random(seed))


def _filled(game):
    return [
        (r, c)
        for r, row in enumerate(game.grid.cells)
        for c, value in enumerate(row)
        if value
    ]


def test_new_game_state():
    game = _game()
    assert game.game_over is False
    assert _filled(game) == []
    assert type(game.current_block) is not type(game.next_block)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_bag_yields_every_piece_once(seed):
    game = _game(seed)
    ids = [game.current_block.id, game.next_block.id]
    ids += [game.random_block().id for _ in range(5)]
    assert sorted(ids) == [1, 2, 3, 4, 5, 6, 7]
    refill = [game.random_block().id for _ in range(7)]
    assert sorted(refill) == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_move_left_stops_at_wall(seed):
    game = _game(seed)
    for _ in range(15):
        game.move_block_left()
    assert min(c.column for c in game.current_block.cell_positions()) == 0


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_move_right_stops_at_wall(seed):
    game = _game(seed)
    for _ in range(15):
        game.move_block_right()
    assert max(c.column for c in game.current_block.cell_positions()) == game.grid.columns - 1


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_drop_locks_piece_at_bottom(seed):
    game = _game(seed)
    first = game.current_block
    upcoming = game.next_block
    for _ in range(25):
        game.move_block_down()
    filled = _filled(game)
    assert len(filled) == len(first.cell_positions())
    assert max(r for r, _ in filled) == game.grid.rows - 1
    assert all(game.grid.cells[r][c] == first.id for r, c in filled)
    assert game.current_block is upcoming


def test_rotate_changes_state():
    game = _game()
    game.current_block = TBlock()
    game.rotate_block()
    assert game.current_block.rotation_state == 1


def test_rotate_reverted_when_off_field():
    game = _game()
    game.current_block = IBlock()
    game.rotate_block()
    assert game.current_block.rotation_state == 0
    game.move_block_down()
    game.rotate_block()
    assert game.current_block.rotation_state == 1


def test_rotate_blocked_by_filled_cell():
    game = _game()
    block = TBlock()
    game.current_block = block
    target = block.cells[1][-1].shifted(block.row_offset, block.column_offset)
    game.grid.cells[target.row][target.column] = 2
    game.rotate_block()
    assert block.rotation_state == 0


def test_move_blocked_by_filled_cell():
    game = _game()
    block = OBlock()
    game.current_block = block
    left = min(c.column for c in block.cell_positions())
    game.grid.cells[0][left - 1] = 3
    before = block.cell_positions()
    game.move_block_left()
    assert block.cell_positions() == before


def test_full_rows_cleared_on_lock():
    game = _game()
    block = OBlock()
    game.current_block = block
    columns = {c.column for c in block.cell_positions()}
    for r in (game.grid.rows - 2, game.grid.rows - 1):
        game.grid.cells[r] = [0 if c in columns else 1 for c in range(game.grid.columns)]
    for _ in range(30):
        game.move_block_down()
        if game.current_block is not block:
            break
    assert game.current_block is not block
    assert _filled(game) == []
    assert game.game_over is False


def test_game_over_when_spawn_blocked():
    game = _game()
    for r in range(2, game.grid.rows):
        game.grid.cells[r] = [0] + [1] * (game.grid.columns - 1)
    game.current_block = OBlock()
    game.next_block = TBlock()
    game.move_block_down()
    assert game.game_over is True
    current = game.current_block
    before = current.cell_positions()
    game.move_block_left()
    game.move_block_right()
    game.move_block_down()
    game.rotate_block()
    assert current.cell_positions() == before
    assert current.rotation_state == 0


@pytest.mark.parametrize(
    "action, rows, columns",
    [(Action.LEFT, 0, -1), (Action.RIGHT, 0, 1), (Action.DOWN, 1, 0)],
)
def test_handle_action_moves(action, rows, columns):
    game = _game()
    game.current_block = TBlock()
    before = game.current_block.cell_positions()
    game.handle_action(action)
    assert game.current_block.cell_positions() == [p.shifted(rows, columns) for p in before]


def test_handle_action_rotate():
    game = _game()
    game.current_block = TBlock()
    game.handle_action(Action.ROTATE)
    assert game.current_block.rotation_state == 1


def test_draw_paints_grid_and_block():
    pygame.font.init()
    try:
        font = pygame.font.Font(None, 20)
        surface = pygame.Surface((300, 600))
        game = _game()
        game.current_block = OBlock()
        game.draw(surface, font)
        colors = cell_colors()
        cell = game.current_block.cell_positions()[0]
        x = cell.column * 30 + 5
        y = cell.row * 30 + 5
        assert tuple(surface.get_at((x, y))) == colors[game.current_block.id]
        assert tuple(surface.get_at((5, 595))) == colors[0]
    finally:
        pygame.font.quit()