# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This package provides the `Board` class, which holds a game board and its score, and the
`Direction` enumeration of slide moves.
"""

from .board import BOARD_SIZE, TARGET_TILE, Board
from .direction import Direction

__all__ = ["Board", "Direction", "BOARD_SIZE", "TARGET_TILE"]
