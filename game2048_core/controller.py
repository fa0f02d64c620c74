from __future__ import annotations

import logging
import random
from typing import Optional

from .model import Model
from .side import Side
from .tile import Tile

logger = logging.getLogger(__name__)

# Chance that a spawned tile is a 2 rather than a 4.
TWO_PROBABILITY = 0.9


class GameController:
    """Drives a Model: applies moves and decides where new tiles appear."""

    def __init__(
        self,
        model: Optional[Model] = None,
        size: int = 4,
        seed: Optional[int] = None,
        two_probability: float = TWO_PROBABILITY,
    ) -> None:
        self.model = model if model is not None else Model(size)
        self.rng = random.Random(seed)
        self.two_probability = two_probability

    def spawn_tile(self) -> Optional[Tile]:
        """Adds a random 2 or 4 on a random empty cell. Returns None if the board is full."""
        empty = self.model.empty_cells()
        if not empty:
            return None
        col, row = self.rng.choice(empty)
        value = 2 if self.rng.random() < self.two_probability else 4
        tile = Tile.create(value, col, row)
        self.model.add_tile(tile)
        logger.debug('spawned %d at (%d, %d)', value, col, row)
        return tile

    def new_game(self) -> Model:
        """Clears the board and deals the two starting tiles."""
        self.model.clear()
        self.spawn_tile()
        self.spawn_tile()
        return self.model

    def play(self, side: Side) -> bool:
        """Tilts toward SIDE and spawns one tile if anything moved.

        Returns False without touching the board once the game is over.
        """
        if self.model.game_over():
            return False
        moved = self.model.tilt(side)
        if moved:
            self.spawn_tile()
        return moved
