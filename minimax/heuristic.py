# -*- coding: utf-8 -*-
"""
Heuristic evaluation of 2048 boards at the leaves of the search tree.

The evaluation combines four signals: the game score, the number of empty cells, how
clustered the tiles are and how well the largest tiles follow a snake from the top-left corner.
"""

from numpy import abs as np_abs
from numpy import asarray, int64, ndarray, pad, where, zeros_like

from game2048 import BOARD_SIZE, Board

from .config import DEFAULT_CONFIG, SearchConfig

# ##>: Rows 0 and 2 left to right, row 1 right to left. The last row is never visited.
SNAKE_PATH: tuple[tuple[int, int], ...] = (
    tuple((0, col) for col in range(BOARD_SIZE))
    + tuple((1, col) for col in reversed(range(BOARD_SIZE)))
    + tuple((2, col) for col in range(BOARD_SIZE))
)


def heuristic_score(
    actual_score: int,
    number_of_empty_cells: int,
    clustering_score: int,
    corner_score: int,
    config: SearchConfig = DEFAULT_CONFIG,
) -> int:
    """
    Combine the board signals into a single score.

    Parameters
    ----------
    actual_score : int
        Cumulative game score.
    number_of_empty_cells : int
        Number of empty cells of the board.
    clustering_score : int
        Output of ``clustering_score``; lower is better.
    corner_score : int
        Output of ``corner_score``; higher is better.
    config : SearchConfig, optional
        Heuristic weights.

    Returns
    -------
    int
        The heuristic score, never below ``min(actual_score, 1)``.

    Notes
    -----
    The score is ``actual - penalty // (empty + 1) - clustering + weight * corner``. The floor
    keeps a board with positive score from ranking below a lost board, which scores 0.
    """
    score = (
        actual_score
        - config.empty_cell_penalty // (number_of_empty_cells + 1)
        - clustering_score
        + config.corner_weight * corner_score
    )
    return int(max(score, min(actual_score, 1)))


def clustering_score(board_array: ndarray) -> int:
    """
    Measure how scattered the tile values are.

    For every tile, the absolute differences with the non-empty cells of its 3x3 neighbourhood
    (the tile itself included, clipped at the edges) are averaged with an integer division.
    The score is the sum of these averages.

    Parameters
    ----------
    board_array : ndarray
        The game grid.

    Returns
    -------
    int
        The clustering score, 0 when all neighbouring tiles are equal.
    """
    grid = asarray(board_array, dtype=int64)
    size = grid.shape[0]

    # ##: Empty padding clips the neighbourhood at the edges.
    padded = pad(grid, 1)
    differences = zeros_like(grid)
    neighbours = zeros_like(grid)

    for row_offset in (-1, 0, 1):
        for col_offset in (-1, 0, 1):
            shifted = padded[1 + row_offset : 1 + row_offset + size, 1 + col_offset : 1 + col_offset + size]
            occupied = shifted > 0
            neighbours += occupied
            differences += where(occupied, np_abs(grid - shifted), 0)

    # ##: Only tiles with at least one non-empty neighbour contribute.
    scored = (grid != 0) & (neighbours > 0)
    return int((differences[scored] // neighbours[scored]).sum())


def corner_score(board_array: ndarray, limit: int = DEFAULT_CONFIG.corner_limit) -> int:
    """
    Reward tiles decreasing along a snake anchored at the top-left corner.

    Parameters
    ----------
    board_array : ndarray
        The game grid.
    limit : int, optional
        Initial ceiling; a first tile above it scores nothing.

    Returns
    -------
    int
        Sum of the values met along ``SNAKE_PATH`` until one exceeds the previous value.
    """
    score = 0
    for row, col in SNAKE_PATH:
        value = int(board_array[row][col])
        if value > limit:
            break
        score += value
        limit = value
    return score


def evaluate(board: Board, config: SearchConfig = DEFAULT_CONFIG) -> int:
    """
    Compute the heuristic score of a board.

    Parameters
    ----------
    board : Board
        The board to evaluate.
    config : SearchConfig, optional
        Heuristic weights.

    Returns
    -------
    int
        The heuristic score.
    """
    grid = board.board_array
    return heuristic_score(
        board.score,
        board.number_of_empty_cells,
        clustering_score(grid),
        corner_score(grid, limit=config.corner_limit),
        config=config,
    )
