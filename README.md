# quarto-game

Quarto for two players, played in the terminal.

Quarto has 16 pieces. Each piece has four traits:

| Trait | Values |
| --- | --- |
| Height | tall (`G`) or short (`P`) |
| Shape | round (`R`) or square (`C`) |
| Colour | yellow (`J`) or brown (`B`) |
| Fill | solid (`E`) or hollow (`T`) |

On each turn, one player picks the piece that the other player must place on the 4×4 board. A player wins by completing a row or a column of four pieces that share at least one trait. If the pieces run out before anyone wins, the game is a draw. The prompts and messages are in French.

## Installation

```
pip install .
```

## Playing

```
quarto
```

The main menu offers three choices: start a game (`1`), read the rules (`2`) or quit (`0`). After the rules are shown, press Enter twice to go back to the menu.

During a game:

- Pick a piece from the list by typing its letter. Upper or lower case both work.
- Give the row (`1`–`4`) where the piece goes.
- Give the column (`1`–`4`) where the piece goes. If that square is taken, you are asked for the row and column again.

Each answer must be a single character in the allowed range. Otherwise the prompt is repeated with an error message. The game stops with exit status 1 if you type `0` at the main menu or if input runs out. After a game ends, the program exits with status 0.

## Using the library

You can use the game logic without the console interface:

```python
import random

from quarto_game.board import Board
from quarto_game.pieces import make_pawn_set, shuffle_pawns, take_pawn

pawns = shuffle_pawns(make_pawn_set(), random.Random(0))

board = Board(4)
pawn = take_pawn(pawns, 0)
board.place(0, 0, pawn)
print(board.render())
print(board.is_occupied(0, 0))   # True
print(board.is_win(0, 0))        # False
```

- `make_pawn_set()` returns the 16 distinct pieces.
- `shuffle_pawns()` returns a shuffled copy. It does not change the list you pass in.
- `take_pawn()` removes a piece from the list and returns it.
- `Pawn.code()` gives a piece's four-letter code, such as `GRJE`.
- `Board.place()` raises `ValueError` if the square is occupied. It raises `IndexError` if the row or column is outside the board.
- `quarto_game.console.play_game()` runs a whole game with a given list of pieces and board. You can pass it an input function and an output stream, so it can be driven from code. It returns the winner's name, or `None` for a draw.

## What it does not do

- Both players share one terminal. There is no computer opponent and no network play.
- Each run plays a single game. A game cannot be saved or resumed.

## Running the tests

```
pip install .[test]
pytest
```