"""Game board and piece structures, and classification of their cells."""

from __future__ import annotations

from dataclasses import dataclass, field

Cell = tuple[int, int]

EMPTY = "."
FILLED = "*"


class InvalidInput(ValueError):
    """Raised when game input is malformed or ends too early."""


@dataclass(frozen=True)
class _Grid:
    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if not rows or not rows[0]:
            raise InvalidInput("a grid needs at least one row and one column")
        if any(len(row) != len(rows[0]) for row in rows):
            raise InvalidInput("all rows of a grid must have the same length")
        object.__setattr__(self, "rows", rows)

    @property
    def lines(self) -> int:
        return len(self.rows)

    @property
    def columns(self) -> int:
        return len(self.rows[0])


@dataclass(frozen=True)
class Board(_Grid):
    """The playing field, one string per row."""


@dataclass(frozen=True)
class Token(_Grid):
    """The piece to place, with ``*`` for filled cells and ``.`` for empty ones."""

    @property
    def points(self) -> list[Cell]:
        """Filled cells in row-major order."""
        return [
            (i, j)
            for i, row in enumerate(self.rows)
            for j, ch in enumerate(row)
            if ch == FILLED
        ]


@dataclass(frozen=True)
class Position:
    """A board with the cells of each player, in row-major order."""

    board: Board
    my_points: tuple[Cell, ...] = field(default_factory=tuple)
    opp_points: tuple[Cell, ...] = field(default_factory=tuple)


def player_signs(player: int) -> tuple[str, str]:
    """Return the (own, opponent) board letters for player 1 or 2."""
    if player == 1:
        return "O", "X"
    if player == 2:
        return "X", "O"
    raise ValueError(f"player must be 1 or 2, got {player!r}")


def define_points(board: Board, token: Token, player: int) -> Position:
    """Classify the board's cells for ``player`` and validate the piece.

    Upper- and lower-case letters both count as a player's cells. Any
    other character on the board than the two letters and ``.``, or on
    the piece than ``*`` and ``.``, raises :class:`InvalidInput`.
    """
    mine, theirs = player_signs(player)
    my_signs = {mine, mine.lower()}
    opp_signs = {theirs, theirs.lower()}
    my_points: list[Cell] = []
    opp_points: list[Cell] = []
    for i, row in enumerate(board.rows):
        for j, ch in enumerate(row):
            if ch in my_signs:
                my_points.append((i, j))
            elif ch in opp_signs:
                opp_points.append((i, j))
            elif ch != EMPTY:
                raise InvalidInput(f"unexpected board character {ch!r} at ({i}, {j})")
    for i, row in enumerate(token.rows):
        for j, ch in enumerate(row):
            if ch not in (FILLED, EMPTY):
                raise InvalidInput(f"unexpected piece character {ch!r} at ({i}, {j})")
    return Position(board, tuple(my_points), tuple(opp_points))