# pixelchess

A small two-player chess game drawn in pixel art on a perspective board.
Both players share one window (860 x 810 pixels) and take turns with the mouse.

## Installing

```
pip install .
```

This pulls in `pygame`, which handles the window, images, fonts and input.

## Playing

```
pixelchess
```

The command takes no options. It logs clicks, selections and turn changes
at INFO level to standard error.

The game looks for its artwork in an `assets/` directory under the current
working directory:

- `assets/images/chess/BlackPieces-Sheet.png` (Player One's pieces)
- `assets/images/chess/WhitePieces-Sheet.png` (Player Two's pieces)
- `assets/images/chess/Board-Perspective.png`
- `assets/fonts/atari-full.ttf`
- `assets/json/board_pieces.json` (optional, read when **L** is pressed)

A missing image or font is logged and simply not drawn; the game still runs.

### Controls

- **Left click** on one of your pieces to select it. Its cell is highlighted
  in yellow and the cells it may legally move to are shaded green.
- **Left click** on a green cell to move there. Clicking any other cell of
  the board deselects the piece. Clicks outside the board are ignored.
- **R** resets the board to the starting position and gives the turn to
  Player One.
- **L** places the pieces as listed in `assets/json/board_pieces.json`.
- Closing the window quits.

Player One ("Black") starts on the top two rows and moves first; Player Two
("Gray") starts on the bottom two rows. The message at the bottom of the
window shows whose turn it is and warns about check, checkmate and
stalemate. After a checkmate or stalemate, press **R** to start again.

### Rules supported

Pawns move one cell, or two on their first move, and capture diagonally.
Rooks, knights, bishops, queens and kings move as usual. A move that would
leave your own king in check is not offered.

## What the game does not do

There is no castling, no en passant and no pawn promotion (a pawn on the
last row simply has no moves). There is no computer opponent, no clock, no
move history or undo, and no way to save a game; the layout file can only
be read.

## Board layout file

The layout file is a JSON object with a `pieces` list. Entry *i* gives the
cell index (0 to 63, row by row from the top-left) for piece *i*, or `null`
to leave that piece off the board. Pieces not listed stay off the board, and
a list longer than 32 entries is rejected with a `ValueError`.

Pieces 0 to 15 belong to Player One: 0 to 7 are its back rank
(rook, knight, bishop, king, queen, bishop, knight, rook) and 8 to 15 its
pawns. Pieces 16 to 31 belong to Player Two: 16 to 23 are its pawns and
24 to 31 its back rank (rook, knight, bishop, queen, king, bishop, knight,
rook).

```json
{"pieces": [0, null, null, 3, 4]}
```

Loading moves the pieces only: whose turn it is stays the same, and pieces
keep their owners, types and move counts.

## Using the chess logic in code

The chess logic works without a window:

```python
from pixelchess.board import Board
from pixelchess.turn_manager import TurnManager
from pixelchess.piece_manager import PieceManager
from pixelchess.movement_factory import MovementFactory
from pixelchess.chess_rules import ChessRules
from pixelchess.game_controller import GameController
from pixelchess.vec2 import Vec2

board = Board()
turns = TurnManager()
pieces = PieceManager()
pieces.initialize(board, turns)
rules = ChessRules(board, MovementFactory(board), pieces)
controller = GameController(board, pieces, turns, rules)

controller.select_or_move_piece(Vec2(3, 1))
print(controller.highlighted_moves)   # (Vec2(x=3, y=2), Vec2(x=3, y=3))
controller.select_or_move_piece(Vec2(3, 3))
print(controller.message)             # Gray's Player Turn
```

`ChessRules` also offers `get_legal_moves`, `is_move_legal`, `is_check`,
`is_checkmate`, `is_stalemate` and `has_any_legal_move`, and
`pixelchess.board_loader.load_from_json(path, board, piece_manager)` reads a
layout file.

The package also contains small helpers not used by the game itself:
`pixelchess.game_timer.GameTimer`, the progress-bar values in
`pixelchess.bar_logic` (`IncreasingBarLogic`, `DecreasingBarLogic`) and
their drawing in `pixelchess.bar` (`BarRenderer`, `BarComponent`).

## Running the tests

```
pip install .[test]
pytest
```