# -*- coding: utf-8 -*-
"""
Move selection for 2048 with a depth-limited game-tree search.
"""
import logging
from typing import Optional

from game2048 import Board, Direction

from .config import DEFAULT_CONFIG, DEFAULT_DEPTH, SearchConfig, SearchMode
from .search import Player, SearchResult, alphabeta, minimax

# ##>: Module logger.
_logger = logging.getLogger(__name__)

SEARCHES = {
    SearchMode.MINIMAX: minimax,
    SearchMode.ALPHA_BETA: alphabeta,
}


def find_best_move(board: Board, depth: int) -> Optional[Direction]:
    """
    Find the best next move with the averaging search.

    Parameters
    ----------
    board : Board
        The current board. Never mutated.
    depth : int
        Number of plies to explore; a user move and a new tile each count as one.

    Returns
    -------
    Direction or None
        The chosen direction, or None when no direction changes the board.

    Raises
    ------
    ValueError
        If depth is negative.

    Notes
    -----
    Errors raised while cloning the board abort the search and propagate.
    """
    return MinimaxAgent(depth=depth).choose_action(board)


class MinimaxAgent:
    """
    An agent that plays 2048 by searching the game tree to a fixed depth.

    Methods
    -------
    choose_action(board: Board)
        Choose the best direction for the given board.
    """

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        mode: SearchMode = SearchMode.ALPHA_BETA,
        config: SearchConfig | None = None,
    ):
        """
        Initialize the minimax agent.

        Parameters
        ----------
        depth : int, optional
            Number of plies to explore (default is 7).
        mode : SearchMode, optional
            Search variant (default is the averaging search).
        config : SearchConfig, optional
            Heuristic weights and search limits (default is ``DEFAULT_CONFIG``).

        Raises
        ------
        ValueError
            If depth is negative.
        """
        if depth < 0:
            raise ValueError(f'Search depth must be >= 0, got {depth}')
        self._depth = depth
        self._mode = SearchMode(mode)
        self._config = config or DEFAULT_CONFIG

    @property
    def depth(self) -> int:
        """Number of plies explored per move."""
        return self._depth

    def search(self, board: Board) -> SearchResult:
        """
        Run the search from the user's point of view.

        Parameters
        ----------
        board : Board
            The current board.

        Returns
        -------
        SearchResult
            Score of the root and chosen direction.
        """
        return SEARCHES[self._mode](board, self._depth, Player.USER, self._config)

    def choose_action(self, board: Board) -> Optional[Direction]:
        """
        Choose the best direction for the given board.

        Parameters
        ----------
        board : Board
            The current board.

        Returns
        -------
        Direction or None
            The chosen direction, or None when every direction is a no-op.
        """
        result = self.search(board)
        if result.direction is None:
            _logger.debug('No move changes the board (score=%d)', board.score)
        else:
            _logger.debug(
                'Chose %s with %s search at depth %d (expected score=%d)',
                result.direction.label,
                self._mode.value,
                self._depth,
                result.score,
            )
        return result.direction
