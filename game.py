from __future__ import annotations

# Facade module that re-exports the 2048 core.
# The Flask app and the tests import from here; single-responsibility
# modules live under game2048_core/*.

from game2048_core.errors import InvariantViolation, OutOfBoundsError
from game2048_core.tile import Tile
from game2048_core.side import Side
from game2048_core.board import Board, Coord
from game2048_core.moves import remove_gaps, merge_line, tilt_board, line_start, next_line
from game2048_core.rules import (
    MAX_PIECE,
    empty_space_exists,
    max_tile_exists,
    at_least_one_move_exists,
    check_game_over,
)
from game2048_core.model import Model
from game2048_core.controller import GameController, TWO_PROBABILITY


def main() -> None:
    # CLI driver delegated to game2048_core.cli
    from game2048_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
