from __future__ import annotations


class InvariantViolation(RuntimeError):
    """A caller broke a board invariant (occupied cell, bad merge, bad matrix)."""


class OutOfBoundsError(InvariantViolation, IndexError):
    """A (col, row) coordinate outside the board was used."""
