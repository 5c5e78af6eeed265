"""Slide directions of the 2048 game."""

from enum import IntEnum


class Direction(IntEnum):
    """
    Direction of a move.

    Members are declared in the order a search must try them. The value of each member is the
    number of counter-clockwise quarter turns that turn the direction into a left slide, which
    is how ``game2048.core.slide`` applies it. Iteration follows declaration order, not values.
    """

    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 0

    @property
    def label(self) -> str:
        """Human readable name of the direction."""
        return self.name.capitalize()
