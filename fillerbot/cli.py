"""Command-line player: reads turns from standard input, answers with moves."""

from __future__ import annotations

import argparse
import sys
from typing import IO, Any, Iterator, Optional, Sequence

from fillerbot.board import Cell, InvalidInput, define_points
from fillerbot.lines import LineReader
from fillerbot.output import put_char, put_nbr
from fillerbot.parsing import parse_player, read_board, read_token
from fillerbot.strategy import choose_placement


def play_turn(lines: Iterator[str], player: int) -> Cell:
    """Read one board and piece from ``lines`` and return the chosen offset."""
    board = read_board(lines)
    token = read_token(lines)
    position = define_points(board, token, player)
    return choose_placement(position, token)


def run(stream: IO[Any], out: IO[str]) -> int:
    """Play turns until the input ends or is malformed.

    Each answer is written as "<row> <column>" on its own line. The game
    only ends by running out of valid input, so the result is always 1.
    """
    lines = LineReader().lines(stream)
    first = next(lines, None)
    try:
        if first is None:
            raise InvalidInput("no player line")
        player = parse_player(first)
        while True:
            i, j = play_turn(lines, player)
            put_nbr(i, out)
            put_char(" ", out)
            put_nbr(j, out)
            put_char("\n", out)
            out.flush()
    except InvalidInput:
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the player program."""
    parser = argparse.ArgumentParser(
        prog="fillerbot",
        description="Play the filler game over standard input and output.",
    )
    parser.parse_args(argv)
    source = getattr(sys.stdin, "buffer", sys.stdin)
    return run(source, sys.stdout)