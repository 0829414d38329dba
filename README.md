# fillerbot

A player for the Filler board game. The game master starts the player as a
separate process and writes the board and the piece to place on the player's
standard input. The player writes its move to standard output.

## Installation

```
pip install .
```

## Running

```
fillerbot
```

The command takes no options apart from `--help`. The first line it reads
gives its seat, as in `$$$ exec p1 : [fillerbot]` or
`$$$ exec p2 : [fillerbot]`. Player 1 plays `O` and player 2 plays `X`, and a
lower-case letter also counts as that player's cell. Each turn then sends a
board and a piece:

```
Plateau 3 5:
    01234
000 .....
001 ..O..
002 ...X.
Piece 2 2:
**
*.
```

For each turn the player writes one line, `row column`, which gives where the
top-left corner of the piece goes. The player tries every placement that sets
one cell of the piece on one of its own cells. A placement qualifies when the
piece stays on the board and covers no other occupied cell. Each qualifying
placement gets a score: for every empty cell the piece would fill, the
Manhattan distance to the nearest opponent cell, summed. The player picks the
placement with the lowest score above zero. When two placements tie, it keeps
the first one it found. When no placement qualifies it answers `0 0`.

The program keeps playing turns until its input ends or turns out to be
malformed, and then exits with status 1.

## Library use

One turn can also be played from Python:

```python
from fillerbot.cli import play_turn

turn = [
    "Plateau 3 5:",
    "    01234",
    "000 .....",
    "001 ..O..",
    "002 ...X.",
    "Piece 2 2:",
    "**",
    "*.",
]
print(play_turn(iter(turn), 1))  # (1, 2)
```

The modules:

- `fillerbot.cli`: `play_turn` plays one turn from an iterator of lines.
  `run(stream, out)` plays a whole game over a pair of streams. `main` is the
  entry point of the command.
- `fillerbot.parsing`: `parse_player`, `parse_dimensions`, `read_board` and
  `read_token` read the game master's messages.
- `fillerbot.board`: `Board`, `Token` (with its `points`), `Position`,
  `player_signs` and `define_points` describe the game state. Bad or truncated
  input raises `InvalidInput`, which is a subclass of `ValueError`.
- `fillerbot.strategy`: `fits`, `score` and `choose_placement` do the
  placement search.
- `fillerbot.lines`: `LineReader` splits text or binary streams into lines. It
  reads them in chunks and keeps any unread text for each stream separately.

The package also contains some general helpers:

- `fillerbot.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`) and case conversion
  (`to_upper`, `to_lower`).
- `fillerbot.numbers`: `abs_value`, `max_value`, `min_value`, and
  `newton_sqrt`, which finds a square root by Newton's method.
- `fillerbot.output`: `format_nbr`, `put_char`, `put_str`, `put_endl` and
  `put_nbr` write to a text stream, which is standard output unless another
  stream is given.
- `fillerbot.text`: `atoi`, `itoa`, searching (`find_char`, `find_last_char`,
  `find`, `find_bounded`), comparison (`compare`, `compare_n`, `equal`,
  `equal_n`), and `split`, `trim`, `substring` and `join`.
- `fillerbot.cstring`: operations on NUL-terminated `bytearray` buffers,
  such as `str_len`, `str_copy`, `str_cat`, `str_lcat`, `str_dup` and
  `str_map`.
- `fillerbot.memory`: byte-buffer operations such as `mem_set`, `zero`,
  `mem_copy`, `mem_move`, `mem_chr`, `mem_cmp` and `mem_alloc`.
- `fillerbot.linked`: `LinkedList`, a singly linked list with `push_front`,
  `pop_front`, `clear`, `for_each` and `map`.

## Tests

```
pip install .[test]
pytest
```