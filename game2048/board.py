# -*- coding: utf-8 -*-
"""
Stateful 2048 board used by search agents.

A ``Board`` owns its grid and its cumulative score. Agents explore futures by cloning the
board and mutating the copy, so every copy must be fully independent of its origin.
"""

from __future__ import annotations

from numpy import array, array_equal, count_nonzero, flatnonzero, int64, ndarray, zeros

from .core import TILE_SPAWN_PROBS, fill_cells, is_done, legal_actions_mask, slide
from .direction import Direction

BOARD_SIZE = 4
TARGET_TILE = 2048


class Board:
    """
    2048 game board.

    Attributes
    ----------
    size : int
        Size of the square grid.
    target_tile : int
        Tile value that wins the game.
    """

    def __init__(
        self, state: ndarray | None = None, score: int = 0, size: int = BOARD_SIZE, target_tile: int = TARGET_TILE
    ):
        """
        Initialize the board.

        Parameters
        ----------
        state : ndarray, optional
            Initial grid; copied. An empty grid of the given size is used when omitted.
        score : int, optional
            Initial cumulative score (default is 0).
        size : int, optional
            Size of the square grid when no state is given (default is 4).
        target_tile : int, optional
            Tile value that wins the game (default is 2048).

        Raises
        ------
        ValueError
            If the given state is not a square 2D grid.
        """
        if state is None:
            state = zeros((size, size), dtype=int64)
        else:
            state = array(state, dtype=int64)
            if state.ndim != 2 or state.shape[0] != state.shape[1]:
                raise ValueError(f'Board state must be a square grid, got shape {state.shape}')

        self._state = state
        self._score = int(score)
        self.size = state.shape[0]
        self.target_tile = target_tile

    @classmethod
    def new_game(cls, seed: int | None = None, size: int = BOARD_SIZE) -> Board:
        """
        Create a board holding the two random tiles a new game starts with.

        Parameters
        ----------
        seed : int, optional
            Random number generator seed for reproducibility.
        size : int, optional
            Size of the square grid (default is 4).

        Returns
        -------
        Board
            The new board.
        """
        board = cls(size=size)
        fill_cells(board._state, number_tile=2, seed=seed)
        return board

    @property
    def score(self) -> int:
        """Cumulative points gained by merges."""
        return self._score

    @property
    def board_array(self) -> ndarray:
        """A copy of the grid."""
        return self._state.copy()

    @property
    def number_of_empty_cells(self) -> int:
        """Number of cells holding no tile."""
        return int(count_nonzero(self._state == 0))

    def empty_cell_ids(self) -> list[int]:
        """
        List the empty cells.

        Returns
        -------
        list[int]
            Row-major linear index of every empty cell, in increasing order.
            ``divmod(cell_id, size)`` gives back the ``(row, col)`` position.
        """
        return [int(cell_id) for cell_id in flatnonzero(self._state == 0)]

    def clone(self) -> Board:
        """Copy the board; the copy shares no mutable state with the original."""
        return type(self)(state=self._state, score=self._score, target_tile=self.target_tile)

    def move(self, direction: Direction) -> int:
        """
        Slide and merge the tiles in the given direction.

        No new tile is added; see ``add_random_tile``.

        Parameters
        ----------
        direction : Direction
            Direction of the slide.

        Returns
        -------
        int
            Points gained by merges, 0 if nothing merged.
        """
        self._state, points = slide(self._state, int(direction))
        self._score += points
        return points

    @staticmethod
    def is_equal(first: ndarray, second: ndarray) -> bool:
        """Check whether two grids hold the same tiles."""
        return bool(array_equal(first, second))

    def set_empty_cell(self, row: int, col: int, value: int) -> None:
        """
        Place a new tile on an empty cell.

        Parameters
        ----------
        row : int
            Row of the cell.
        col : int
            Column of the cell.
        value : int
            Value of the new tile, 2 or 4.

        Raises
        ------
        ValueError
            If the value is not a spawnable tile, or the cell is outside the grid or occupied.
        """
        if value not in TILE_SPAWN_PROBS:
            raise ValueError(f'Tile value must be one of {list(TILE_SPAWN_PROBS)}, got {value}')
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f'Cell ({row}, {col}) is outside a {self.size}x{self.size} board')
        if self._state[row, col] != 0:
            raise ValueError(f'Cell ({row}, {col}) is not empty')
        self._state[row, col] = value

    def add_random_tile(self, seed: int | None = None) -> None:
        """
        Place a 2 (90%) or a 4 (10%) on a random empty cell, if any.

        Parameters
        ----------
        seed : int, optional
            Random number generator seed for reproducibility.
        """
        fill_cells(self._state, number_tile=1, seed=seed)

    def has_won(self) -> bool:
        """Check whether a tile reached the target value."""
        return bool((self._state >= self.target_tile).any())

    def is_game_terminated(self) -> bool:
        """Check whether the game is won or no move can change the board."""
        return self.has_won() or is_done(self._state)

    def legal_directions(self) -> list[Direction]:
        """
        List the directions that change the board.

        Returns
        -------
        list[Direction]
            Legal directions, in declaration order.
        """
        mask = legal_actions_mask(self._state)
        return [direction for direction in Direction if mask[direction]]

    def __str__(self) -> str:
        return '\n'.join(' \t'.join(map(str, row)) for row in self._state.tolist())

    def __repr__(self) -> str:
        return f'Board(score={self._score}, state={self._state.tolist()})'
