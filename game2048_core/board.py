from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvariantViolation, OutOfBoundsError
from .tile import Tile

Coord = Tuple[int, int]  # (col, row), (0, 0) is the bottom-left corner
Change = Tuple[Tile, Tile]  # (tile before, tile after) for one move


class Board:
    """A SIZE x SIZE grid of optional tiles, addressed by (col, row)."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f'Board size must be positive, got {size}')
        self._size = size
        self._cells: List[List[Optional[Tile]]] = [[None] * size for _ in range(size)]
        self._changes: List[Change] = []

    @classmethod
    def from_values(cls, raw_values: Sequence[Sequence[int]]) -> 'Board':
        """Builds a board from RAW_VALUES[row][col] (0 means empty, [0][0] bottom-left)."""
        size = len(raw_values)
        board = cls(size)
        for row, line in enumerate(raw_values):
            if len(line) != size:
                raise InvariantViolation(f'Row {row} has {len(line)} values; expected {size}')
            for col, value in enumerate(line):
                if value:
                    board.add_tile(Tile.create(int(value), col, row))
        return board

    def size(self) -> int:
        return self._size

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._size and 0 <= row < self._size

    def _check(self, col: int, row: int) -> None:
        if not self.in_bounds(col, row):
            raise OutOfBoundsError(f'({col}, {row}) is outside a {self._size}x{self._size} board')

    def tile(self, col: int, row: int) -> Optional[Tile]:
        """Returns the tile at (COL, ROW), or None when the cell is empty."""
        self._check(col, row)
        return self._cells[col][row]

    def coords(self) -> Iterable[Coord]:
        for col in range(self._size):
            for row in range(self._size):
                yield (col, row)

    def empty_cells(self) -> List[Coord]:
        return [(c, r) for (c, r) in self.coords() if self._cells[c][r] is None]

    def values(self) -> List[List[int]]:
        """Snapshot as values[row][col], 0 for empty, row 0 at the bottom."""
        return [
            [0 if self._cells[c][r] is None else self._cells[c][r].value for c in range(self._size)]
            for r in range(self._size)
        ]

    def add_tile(self, tile: Tile) -> None:
        """Places TILE in its own (col, row), which must be empty."""
        self._check(tile.col, tile.row)
        if self._cells[tile.col][tile.row] is not None:
            raise InvariantViolation(f'Cell ({tile.col}, {tile.row}) is already occupied')
        self._cells[tile.col][tile.row] = tile

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """Moves TILE (currently on the board) to (COL, ROW).

        If another tile already sits there, the two merge into a new tile of
        twice the value. Returns True iff that merge happened.
        """
        self._check(col, row)
        current = self._cells[tile.col][tile.row]
        if current is None or current.uid != tile.uid:
            raise InvariantViolation(f'Tile {tile} is not on the board at ({tile.col}, {tile.row})')
        target = self._cells[col][row]
        if target is not None and target.uid == tile.uid:
            return False
        self._cells[tile.col][tile.row] = None
        if target is None:
            result = tile.moved(col, row)
        else:
            if target.value != tile.value:
                raise InvariantViolation(
                    f'Cannot merge {tile.value} into {target.value} at ({col}, {row})'
                )
            result = tile.merged(col, row)
        self._cells[col][row] = result
        self._changes.append((tile, result))
        return target is not None

    def changes(self) -> Tuple[Change, ...]:
        """Moves recorded since the last reset, oldest first."""
        return tuple(self._changes)

    def reset_changes(self) -> None:
        self._changes.clear()

    def clear(self) -> None:
        for col in self._cells:
            for row in range(self._size):
                col[row] = None
        self._changes.clear()

    def pretty(self) -> str:
        """Human-readable grid, top row first."""
        lines: List[str] = []
        for row in range(self._size - 1, -1, -1):
            cells: List[str] = []
            for col in range(self._size):
                t = self._cells[col][row]
                cells.append('    ' if t is None else f'{t.value:4d}')
            lines.append('|' + '|'.join(cells) + '|')
        return '\n'.join(lines)
