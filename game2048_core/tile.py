from __future__ import annotations

import itertools
from dataclasses import dataclass, field, replace
from typing import Tuple

_uids = itertools.count(1)


def _next_uid() -> int:
    return next(_uids)


@dataclass(frozen=True)
class Tile:
    """A numbered piece sitting at column COL, row ROW of a board.

    Tiles are immutable. Moving a tile yields a copy with the same uid at the new
    position; merging two tiles yields a brand new uid holding the doubled value.
    """
    value: int
    col: int
    row: int
    uid: int = field(default_factory=_next_uid)

    def __post_init__(self) -> None:
        v = self.value
        if not isinstance(v, int) or v < 2 or v & (v - 1):
            raise ValueError(f'Tile value must be a power of two >= 2, got {v!r}')

    @classmethod
    def create(cls, value: int, col: int, row: int) -> 'Tile':
        return cls(value, col, row)

    def moved(self, col: int, row: int) -> 'Tile':
        return replace(self, col=col, row=row)

    def merged(self, col: int, row: int) -> 'Tile':
        return Tile(2 * self.value, col, row)

    def position(self) -> Tuple[int, int]:
        return self.col, self.row
