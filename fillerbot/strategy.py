"""Choosing where to place a piece: as close to the opponent as possible."""

from __future__ import annotations

from typing import Sequence

from fillerbot.board import EMPTY, Board, Cell, Position, Token

DEFAULT_LIMIT = 10_000_000
_NO_OPPONENT = 1_000_000


def fits(board: Board, piece_points: Sequence[Cell], i: int, j: int) -> bool:
    """Return True when the piece at offset (i, j) stays on the board and
    covers at most one occupied cell."""
    overlaps = 0
    for di, dj in piece_points:
        r, c = i + di, j + dj
        if not (0 <= r < board.lines and 0 <= c < board.columns):
            return False
        if board.rows[r][c] != EMPTY:
            overlaps += 1
            if overlaps > 1:
                return False
    return True


def score(
    board: Board,
    opp_points: Sequence[Cell],
    piece_points: Sequence[Cell],
    i: int,
    j: int,
) -> int:
    """Sum, over the empty cells the piece would fill, of the Manhattan
    distance to the nearest opponent cell."""
    total = 0
    for di, dj in piece_points:
        r, c = i + di, j + dj
        if board.rows[r][c] == EMPTY:
            total += min(
                (abs(oi - r) + abs(oj - c) for oi, oj in opp_points),
                default=_NO_OPPONENT,
            )
    return total


def choose_placement(position: Position, token: Token, limit: int = DEFAULT_LIMIT) -> Cell:
    """Return the offset of the best placement, or (0, 0) when none qualifies.

    Each placement anchors one piece cell on one of the player's cells.
    A placement qualifies when it fits and scores above zero but below
    the best so far (starting at ``limit``); the first best one wins.
    """
    board = position.board
    piece = token.points
    best = limit
    answer: Cell = (0, 0)
    for mi, mj in position.my_points:
        for di, dj in piece:
            i, j = mi - di, mj - dj
            if (
                i >= 0
                and j >= 0
                and i + token.lines <= board.lines
                and j + token.columns <= board.columns
                and fits(board, piece, i, j)
            ):
                value = score(board, position.opp_points, piece, i, j)
                if 0 < value < best:
                    best = value
                    answer = (i, j)
    return answer