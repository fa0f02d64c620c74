from __future__ import annotations

from .board import Board

# Largest piece value; reaching it ends the game.
MAX_PIECE = 2048


def empty_space_exists(b: Board) -> bool:
    """True if at least one cell of B is empty."""
    for i in range(b.size()):
        for j in range(b.size()):
            if b.tile(i, j) is None:
                return True
    return False


def max_tile_exists(b: Board) -> bool:
    """True if any tile on B has reached MAX_PIECE."""
    for i in range(b.size()):
        for j in range(b.size()):
            t = b.tile(i, j)
            if t is not None and t.value == MAX_PIECE:
                return True
    return False


def at_least_one_move_exists(b: Board) -> bool:
    """True if B has an empty cell or an equal adjacent pair.

    Pairs are found by comparing each cell with index >= 1 in both axes against
    its left and lower neighbours; pairs lying entirely in column 0 or row 0
    are not examined.
    """
    if empty_space_exists(b):
        return True
    for i in range(1, b.size()):
        for j in range(1, b.size()):
            value = b.tile(i, j).value
            if value == b.tile(i - 1, j).value:
                return True
            if value == b.tile(i, j - 1).value:
                return True
    return False


def check_game_over(b: Board) -> bool:
    return max_tile_exists(b) or not at_least_one_move_exists(b)
