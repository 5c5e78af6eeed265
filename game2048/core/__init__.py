# -*- coding: utf-8 -*-
"""
Grid-level functions of the 2048 game.

It includes functions for sliding and merging tiles, filling empty cells, checking if the game
is done and listing legal or illegal moves.
"""

from .gameboard import TILE_SPAWN_PROBS, fill_cells, is_done, merge_column, slide, slide_and_merge
from .gamemove import illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "TILE_SPAWN_PROBS",
    "legal_actions",
    "legal_actions_mask",
    "illegal_actions",
    "slide",
    "slide_and_merge",
    "fill_cells",
    "is_done",
    "merge_column",
]
