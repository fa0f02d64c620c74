from __future__ import annotations

from enum import Enum


class Side(Enum):
    """The four board edges a tilt can push toward.

    Each member carries the corner a sweep starts from (COL0, ROW0, as 0 or 1
    multiples of size - 1) and the unit step (DCOL, DROW) taken along a line.
    """
    NORTH = (0, 0, 0, 1)
    EAST = (0, 1, 1, 0)
    SOUTH = (1, 1, 0, -1)
    WEST = (1, 0, -1, 0)

    def __init__(self, col0: int, row0: int, dcol: int, drow: int) -> None:
        self.col0 = col0
        self.row0 = row0
        self.dcol = dcol
        self.drow = drow

    def opposite(self) -> 'Side':
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, text: str) -> 'Side':
        """Resolve a direction name, arrow word or WASD key to a Side."""
        key = str(text).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f'Unknown direction: {text!r}') from None


_OPPOSITES = {
    Side.NORTH: Side.SOUTH,
    Side.SOUTH: Side.NORTH,
    Side.EAST: Side.WEST,
    Side.WEST: Side.EAST,
}

_ALIASES = {}
for _side, _names in (
    (Side.NORTH, ('north', 'up', 'w')),
    (Side.SOUTH, ('south', 'down', 's')),
    (Side.EAST, ('east', 'right', 'd')),
    (Side.WEST, ('west', 'left', 'a')),
):
    for _name in _names:
        _ALIASES[_name] = _side
