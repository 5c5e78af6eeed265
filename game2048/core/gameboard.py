"""
Grid mechanics of the 2048 game: sliding, merging, spawning tiles and detecting the end of a game.

All functions work on square ``numpy`` grids of tile values, zero meaning an empty cell.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, ndarray, rot90, zeros_like
from numpy.random import PCG64DXSM, default_rng

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


def merge_column(column: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal values in a line of the grid and compute the points gained.

    Parameters
    ----------
    column : ndarray
        A 1D array representing one line of the game board.

    Returns
    -------
    score : int
        The total points obtained from merging.
    merged_column : ndarray
        The non-empty values of the line after merging, without padding.

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each value can only be merged once per function call.
    """
    # ##: Handle empty lines.
    non_zero = column[column != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    # ##: Walk the line and merge equal neighbours.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        result.append(non_zero[-1])

    return score, array(result, dtype=column.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the points gained.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total points obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_column(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def slide(state: ndarray, quarter_turns: int) -> tuple[ndarray, int]:
    """
    Slide the board in any direction, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    quarter_turns : int
        Number of counter-clockwise rotations that turn the wanted direction into a left slide
        (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    new_state : ndarray
        The new state of the board.
    points : int
        The points gained by merging.
    """
    points, updated_board = slide_and_merge(rot90(state, k=quarter_turns))
    return rot90(updated_board, k=-quarter_turns).copy(), points


def fill_cells(state: ndarray, number_tile: int, seed: int | None = None) -> ndarray:
    """
    Fill empty cells with new tiles (2 or 4).

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    seed : int, optional
        Random number generator seed for reproducibility.

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - If there are fewer empty cells than requested, it fills all available cells.
    """
    rng = default_rng(seed) if seed is not None else _GENERATOR

    # ##: Only if there are still available places.
    if not state.all():
        available_cells = argwhere(state == 0)
        number_tile = min(number_tile, len(available_cells))
        values = rng.choice(_TILE_VALUES, size=number_tile, p=_TILE_PROBS)

        # ##: Randomly choose cell positions in board.
        chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
        state[tuple(available_cells[chosen_indices].T)] = values
    return state


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )
