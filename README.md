# tetrust

A compact falling-block puzzle game played on a 10 × 20 board. Pieces come
from a shuffled seven-piece bag. A ghost preview shows where the current piece
will land. You can hold one piece, and an autoplay mode drops pieces at random
placements by itself.

## Installing

```
pip install .
```

## Playing

```
tetrust
```

Options:

- `--seed N` seeds the random piece order (and autoplay choices)
- `--width W`, `--height H` set the starting window size (default 500 × 800);
  the window can be resized and the board is scaled to fit

Controls:

| Key          | Action                                |
|--------------|---------------------------------------|
| Left / Right | move the piece one column             |
| Up / Down    | rotate the piece a quarter turn either way |
| Space        | hard drop                             |
| Left Shift   | soft drop while held                  |
| H            | hold the current piece (once per piece) |
| P            | pause                                 |
| A            | toggle autoplay                       |
| Escape       | quit                                  |

A piece falls one row per second; holding Shift makes it fall every 80 ms.
Full rows are cleared. The board is emptied and play starts again when a new
piece cannot be placed. There is no score, level or next-piece preview.

## Using the engine

The game rules in `tetrust.game` can be driven without a window:

```python
import random

from tetrust.game import Tetris
from tetrust.actions import Move, Rotate, HardDrop, Hold

game = Tetris(rng=random.Random(1))
game.process_action(Move(-1))
game.process_action(HardDrop())
print(game)
```

`Tetris` also accepts a `clock` callable returning seconds, used by
`Tetris.update(soft)` for gravity and autoplay timing.
`Tetris.full_board()` returns the board as rows of colours (or `None` for
empty cells) with the current piece and its ghost drawn in.

`tetrust.render` turns such a board into drawing geometry:
`board_vertices(board, width, height)` gives four `Vertex` corners per cell in
normalised device coordinates, `quad_indices(cells)` gives matching
triangle-list indices, and `quad_rects(board, width, height)` gives pixel
rectangles with their colours.

`tetrust.pieces` holds `TetrominoKind`, `Tetromino` and `Point`;
`tetrust.bag.Bag` is an endless iterator over shuffled bags of the seven kinds.

## Tests

```
pip install .[test]
pytest
```