"""
Move legality for the 2048 game, computed with vectorized comparisons instead of trial moves.
"""

from numpy import ndarray


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    Horizontal and vertical adjacencies are computed only once, then all four directions
    are derived from them.
    """
    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_actions(state: ndarray) -> list[int]:
    """
    Determine the moves that change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[int]
        Quarter-turn codes of the legal moves (0: left, 1: up, 2: right, 3: down).
    """
    mask = legal_actions_mask(state)
    return [i for i in range(4) if mask[i]]


def illegal_actions(state: ndarray) -> list[int]:
    """
    Determine the moves that leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[int]
        Quarter-turn codes of the illegal moves (0: left, 1: up, 2: right, 3: down).
    """
    mask = legal_actions_mask(state)
    return [i for i in range(4) if not mask[i]]
