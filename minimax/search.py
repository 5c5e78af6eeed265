# -*- coding: utf-8 -*-
"""
Game-tree search for 2048.

The tree alternates two kinds of plies: the user slides the tiles in one of the four
directions, then the computer places a new tile (2 or 4) on an empty cell. Each ply consumes
one unit of depth, and every branch works on its own clone of the board.

Two variants are provided:

- ``minimax`` explores every placement and assumes the computer picks the worst one.
- ``alphabeta`` replaces the computer's minimum with a weighted average over a capped,
  fixed-order sample of placements. Despite its name it performs no alpha-beta cut-off.
"""

from enum import Enum
from typing import NamedTuple, Optional

from game2048 import Board, Direction

from .config import DEFAULT_CONFIG, SCORE_CEILING, SCORE_FLOOR, SearchConfig
from .heuristic import evaluate


class Player(Enum):
    """Player to move at a node of the search tree."""

    USER = 'user'
    COMPUTER = 'computer'


class SearchResult(NamedTuple):
    """Score of a node and, at user nodes, the direction reaching it."""

    score: int
    direction: Optional[Direction] = None


def _apply(board: Board, direction: Direction) -> Optional[Board]:
    """Clone the board and move it, or return None if the move changes nothing."""
    new_board = board.clone()
    points = new_board.move(direction)
    if points == 0 and new_board.is_equal(board.board_array, new_board.board_array):
        return None
    return new_board


def _empty_cells(board: Board) -> list[tuple[int, int]]:
    return [divmod(cell_id, board.size) for cell_id in board.empty_cell_ids()]


def minimax(board: Board, depth: int, player: Player, config: SearchConfig = DEFAULT_CONFIG) -> SearchResult:
    """
    Exhaustive minimax search.

    Parameters
    ----------
    board : Board
        The board at this node. Never mutated.
    depth : int
        Remaining plies.
    player : Player
        Player to move.
    config : SearchConfig, optional
        Heuristic weights and spawnable tile values.

    Returns
    -------
    SearchResult
        Best score for the user and, at user nodes, the first direction reaching it.

    Notes
    -----
    - A user node where every move is a no-op scores ``SCORE_FLOOR`` and has no direction.
    - A computer node without empty cells scores 0.
    """
    if depth == 0 or board.is_game_terminated():
        return SearchResult(evaluate(board, config))

    if player is Player.USER:
        best_score, best_direction = SCORE_FLOOR, None
        for direction in Direction:
            new_board = _apply(board, direction)
            if new_board is None:
                continue

            # ##: Maximize; the first best direction is kept.
            score = minimax(new_board, depth - 1, Player.COMPUTER, config).score
            if score > best_score:
                best_score, best_direction = score, direction
        return SearchResult(best_score, best_direction)

    cells = _empty_cells(board)
    if not cells:
        return SearchResult(0)

    # ##: Minimize over every cell and every tile value.
    best_score = SCORE_CEILING
    for row, col in cells:
        for value in config.spawn_weights:
            new_board = board.clone()
            new_board.set_empty_cell(row, col, value)
            best_score = min(best_score, minimax(new_board, depth - 1, Player.USER, config).score)
    return SearchResult(best_score)


def alphabeta(board: Board, depth: int, player: Player, config: SearchConfig = DEFAULT_CONFIG) -> SearchResult:
    """
    Search where the computer places tiles at random rather than adversarially.

    Parameters
    ----------
    board : Board
        The board at this node. Never mutated.
    depth : int
        Remaining plies.
    player : Player
        Player to move.
    config : SearchConfig, optional
        Weights, branch cap and win score.

    Returns
    -------
    SearchResult
        Expected score for the user and, at user nodes, the direction reaching it.

    Notes
    -----
    - Terminal boards score ``config.win_score`` when won and 0 when lost, whatever the depth.
    - At user nodes ties go to the direction tried last.
    - At computer nodes the values are tried in ``config.spawn_weights`` order, each over the
      empty cells in row-major order, and the walk stops after ``config.max_branches``
      placements. The weighted sum is divided by ``empty cells * weight total``, so when the
      cap cuts the walk short the result underestimates the true expectation.
    """
    if board.is_game_terminated():
        return SearchResult(config.win_score if board.has_won() else 0)

    if depth == 0:
        return SearchResult(evaluate(board, config))

    if player is Player.USER:
        best_score, best_direction = 0, None
        for direction in Direction:
            new_board = _apply(board, direction)
            if new_board is None:
                continue

            score = alphabeta(new_board, depth - 1, Player.COMPUTER, config).score
            if score >= best_score:
                best_score, best_direction = score, direction
        return SearchResult(best_score, best_direction)

    cells = _empty_cells(board)
    if not cells:
        return SearchResult(0)

    score_sum, branches = 0, 0
    for value, weight in config.spawn_weights.items():
        for row, col in cells:
            new_board = board.clone()
            new_board.set_empty_cell(row, col, value)
            score_sum += weight * alphabeta(new_board, depth - 1, Player.USER, config).score

            branches += 1
            if branches >= config.max_branches:
                break
        if branches >= config.max_branches:
            break

    return SearchResult(score_sum // (board.number_of_empty_cells * config.weight_total))
