# -*- coding: utf-8 -*-
"""
Module containing the game-tree search agent for Game 2048.
"""
from .agent import MinimaxAgent, find_best_move
from .config import DEFAULT_CONFIG, DEFAULT_DEPTH, SearchConfig, SearchMode
from .search import Player, SearchResult, alphabeta, minimax

__all__ = [
    "MinimaxAgent",
    "find_best_move",
    "SearchConfig",
    "SearchMode",
    "DEFAULT_CONFIG",
    "DEFAULT_DEPTH",
    "Player",
    "SearchResult",
    "alphabeta",
    "minimax",
]
