# blockdrop

This is a small falling-block puzzle game. Seven kinds of four-cell pieces fall
onto a grid that is 10 cells wide and 20 cells tall. A piece that can fall no
further locks into place. A row that fills up completely is cleared, and the
rows above it drop down. The game is over when a new piece has no room where it
appears.

## Installing

```
pip install .
```

This also installs `pygame`. The game uses it to draw the window and to read
the keyboard.

## Playing

```
blockdrop
```

This opens a window of 300 by 600 pixels.

| Key         | Action                      |
|-------------|-----------------------------|
| Left arrow  | Move the piece left         |
| Right arrow | Move the piece right        |
| Down arrow  | Move the piece down one row |
| Up arrow    | Rotate the piece            |
| Escape      | Quit                        |

Closing the window also quits. Pieces also fall on their own at a fixed
interval.

Pieces come from a bag that holds one of each kind. Each new piece is taken from
the bag at random, and the bag is refilled when it is empty. So every kind
appears once before any kind repeats.

## What it does not do

- There is no score or line count on screen. Cleared rows are not tallied.
- The next piece is not shown.
- After the game is over, the last piece stays on the board and input has no
  effect. There is no restart. Close the window and run `blockdrop` again.

## Using it as a library

You can drive the game logic without opening a window:

```python
import random

from blockdrop.game import Action, Game

game = Game(rng=random.Random(1))
game.handle_action(Action.LEFT)
game.handle_action(Action.ROTATE)
game.move_block_down()
print(game.grid.render())
print(game.game_over)
```

`Game` takes an optional `random.Random`. Pass one with a fixed seed to get a
repeatable order of pieces.

These are the main names:

- `blockdrop.grid.Grid` holds the board in `cells`, a list of rows. A value of 0
  is an empty cell. Any other value is the id of the piece that locked there.
  - `is_cell_outside` and `is_cell_empty` check a single cell. `is_cell_empty`
    raises `IndexError` for a cell outside the grid.
  - `clear_full_rows` removes full rows and returns how many it removed.
  - `render` returns the board as text.
- `blockdrop.blocks` defines the seven pieces: `LBlock`, `JBlock`, `IBlock`,
  `OBlock`, `SBlock`, `TBlock` and `ZBlock`. `all_blocks()` returns one of each.
- `blockdrop.block.Block` is the base class of the pieces. It has `move`,
  `rotate`, `undo_rotation` and `cell_positions()`. `cell_positions()` returns
  `blockdrop.position.Position` values on the board.
- `blockdrop.game.Game` ties these together. It has `move_block_left`,
  `move_block_right`, `move_block_down`, `rotate_block` and
  `handle_action(Action)`. A move or rotation that would leave the board or
  overlap a locked cell is undone. When a piece cannot drop, it is locked into
  the grid. `game_over` tells whether play has ended.
- `blockdrop.app.main` runs the windowed game. `action_for_key` maps a pygame
  key code to an `Action`.

## Running the tests

```
pip install ".[test]"
pytest
```