from __future__ import annotations

from typing import Iterator, Tuple

from .board import Board, Coord
from .side import Side


def line_start(board: Board, side: Side) -> Coord:
    """The corner cell where a sweep in the direction of SIDE begins."""
    edge = board.size() - 1
    return side.col0 * edge, side.row0 * edge


def next_line(col: int, row: int, side: Side) -> Coord:
    """Shifts a line's starting cell to the neighbouring parallel line."""
    if side.dcol == 0:
        return col + side.drow, row
    return col, row - side.dcol


def walk_pairs(board: Board, col: int, row: int, side: Side) -> Iterator[Tuple[Coord, Coord]]:
    """Yields ((c, r), (next_c, next_r)) for every adjacent pair from (COL, ROW) along SIDE."""
    nc, nr = col + side.dcol, row + side.drow
    while board.in_bounds(nc, nr):
        yield (col, row), (nc, nr)
        col, row = nc, nr
        nc, nr = col + side.dcol, row + side.drow


def remove_gaps(board: Board, col: int, row: int, side: Side) -> bool:
    """One compaction sweep: pull each tile into an empty cell just before it.

    Returns True if any tile moved; callers repeat until it returns False.
    """
    changed = False
    for (c, r), (nc, nr) in walk_pairs(board, col, row, side):
        nxt = board.tile(nc, nr)
        if board.tile(c, r) is None and nxt is not None:
            board.move(c, r, nxt)
            changed = True
    return changed


def merge_line(board: Board, col: int, row: int, side: Side) -> int:
    """Merge sweep over a compacted line. Returns the score gained.

    The first equal pair met from the edge merges into the nearer cell, the gap
    behind it is closed, and the scan moves on past the merged tile, so a tile
    created here never merges again in the same sweep.
    """
    gained = 0
    for (c, r), (nc, nr) in walk_pairs(board, col, row, side):
        cur = board.tile(c, r)
        nxt = board.tile(nc, nr)
        if cur is not None and nxt is not None and cur.value == nxt.value and board.move(c, r, nxt):
            remove_gaps(board, nc, nr, side)
            gained += board.tile(c, r).value
    return gained


def tilt_board(board: Board, side: Side) -> int:
    """Slides and merges every line of BOARD toward SIDE. Returns the score gained."""
    sweep = side.opposite()
    col, row = line_start(board, sweep)
    gained = 0
    for _ in range(board.size()):
        while remove_gaps(board, col, row, sweep):
            pass
        gained += merge_line(board, col, row, sweep)
        col, row = next_line(col, row, sweep)
    return gained
