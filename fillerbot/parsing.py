"""Reading the game protocol: player line, board and piece."""

from __future__ import annotations

from typing import Iterable, Iterator

from fillerbot.board import Board, InvalidInput, Token
from fillerbot.chars import is_digit
from fillerbot.text import atoi

PLAYER_PREFIX = "$$$ exec p"
BOARD_OFFSET = 8
TOKEN_OFFSET = 6
ROW_PREFIX = 4


def parse_dimensions(line: str, offset: int) -> tuple[int, int]:
    """Read "<lines> <columns>" starting at ``offset`` of a header line."""
    if len(line) <= offset:
        raise InvalidInput(f"dimension line too short: {line!r}")
    lines = atoi(line[offset:])
    pos = offset
    while pos < len(line) and is_digit(line[pos]):
        pos += 1
    columns = atoi(line[pos + 1:])
    if lines <= 0 or columns <= 0:
        raise InvalidInput(f"invalid dimensions in {line!r}")
    return lines, columns


def parse_player(line: str) -> int:
    """Return the player number, 1 or 2, announced by the first input line."""
    if line.startswith(PLAYER_PREFIX) and len(line) > len(PLAYER_PREFIX):
        number = line[len(PLAYER_PREFIX)]
        if number in ("1", "2"):
            return int(number)
    raise InvalidInput(f"not a player line: {line!r}")


def _next_line(lines: Iterator[str], what: str) -> str:
    line = next(lines, None)
    if line is None:
        raise InvalidInput(f"input ended before {what}")
    return line


def _read_rows(lines: Iterator[str], count: int, columns: int, offset: int) -> list[str]:
    rows = []
    for _ in range(count):
        line = _next_line(lines, "all rows were read")
        if len(line) != columns + offset:
            raise InvalidInput(f"row {line!r} does not have {columns} cells")
        rows.append(line[offset:])
    return rows


def read_board(lines: Iterable[str]) -> Board:
    """Read a board: its size line, a column header, then numbered rows.

    Pass an iterator to read several items from the same input.
    """
    it = iter(lines)
    count, columns = parse_dimensions(_next_line(it, "the board size"), BOARD_OFFSET)
    _next_line(it, "the board header")
    return Board(tuple(_read_rows(it, count, columns, ROW_PREFIX)))


def read_token(lines: Iterable[str]) -> Token:
    """Read a piece: its size line, then its rows."""
    it = iter(lines)
    count, columns = parse_dimensions(_next_line(it, "the piece size"), TOKEN_OFFSET)
    return Token(tuple(_read_rows(it, count, columns, 0)))