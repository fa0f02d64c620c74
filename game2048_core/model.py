from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .board import Board, Change, Coord
from .moves import tilt_board
from .rules import check_game_over
from .side import Side
from .tile import Tile

logger = logging.getLogger(__name__)

Observer = Callable[[], None]


class Model:
    """The state of one game of 2048: a board, the score and the best score so far.

    Coordinates follow the board: column COL, row ROW with (0, 0) at the
    lower-left corner, like (x, y). Observers registered with ``subscribe`` are
    called with no arguments after every mutating call and read state back
    through the query methods.
    """

    def __init__(self, size: int = 4) -> None:
        self._board = Board(size)
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._observers: List[Observer] = []

    @classmethod
    def from_values(
        cls,
        raw_values: Sequence[Sequence[int]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
    ) -> 'Model':
        """A game whose tiles come from RAW_VALUES[row][col] (0 if empty, [0][0] bottom-left)."""
        model = cls(max(len(raw_values), 1))
        model._board = Board.from_values(raw_values)
        model._score = score
        model._max_score = max_score
        model._game_over = game_over
        return model

    # ---------- observers ----------

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer()

    # ---------- queries ----------

    def tile(self, col: int, row: int) -> Optional[Tile]:
        """The tile at (COL, ROW), or None if that cell is empty."""
        return self._board.tile(col, row)

    def size(self) -> int:
        return self._board.size()

    def values(self) -> List[List[int]]:
        return self._board.values()

    def empty_cells(self) -> List[Coord]:
        return self._board.empty_cells()

    def changes(self) -> Tuple[Change, ...]:
        """Tile moves made by the most recent tilt, for animating them."""
        return self._board.changes()

    def score(self) -> int:
        return self._score

    def max_score(self) -> int:
        """Best score seen so far; only updated when a game is found to be over."""
        return self._max_score

    def game_over(self) -> bool:
        """True iff no move remains or some tile has reached MAX_PIECE.

        Not a pure query: when the answer is True the current score is folded
        into max_score.
        """
        self._check_game_over()
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
        return self._game_over

    # ---------- mutations ----------

    def clear(self) -> None:
        """Empties the board and resets the score for a new game."""
        self._score = 0
        self._game_over = False
        self._board.clear()
        self._notify()

    def hot_start_announce(self) -> None:
        """Lets observers draw a board that was set up before they subscribed."""
        self._notify()

    def add_tile(self, tile: Tile) -> None:
        """Adds TILE to the board. Its cell must be empty."""
        self._board.add_tile(tile)
        self._check_game_over()
        self._notify()

    def tilt(self, side: Side) -> bool:
        """Tilts the board toward SIDE. Returns True if any tile moved.

        Tiles slide as far as they can. Two equal tiles meeting in the
        direction of motion merge into one of twice the value, and that value
        is added to the score. A merged tile does not merge again in the same
        tilt, and of three equal tiles in a row the leading two merge.
        """
        self._board.reset_changes()
        gained = tilt_board(self._board, side)
        self._score += gained
        moved = bool(self._board.changes())
        logger.debug('tilt %s: moved=%s gained=%d score=%d', side.name, moved, gained, self._score)
        self._check_game_over()
        self._notify()
        return moved

    def _check_game_over(self) -> None:
        over = check_game_over(self._board)
        if over and not self._game_over:
            logger.debug('game over: score=%d', self._score)
        self._game_over = over

    # ---------- debugging ----------

    def __str__(self) -> str:
        over = 'over' if self.game_over() else 'not over'
        return (
            f'\n[\n{self._board.pretty()}\n] '
            f'{self._score} (max: {self._max_score}) (game is {over}) \n'
        )

    def __eq__(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
