"""
Configuration of the 2048 game-tree search.

The defaults reproduce the reference weights of the heuristic and of the averaging search;
changing them changes which move gets picked.
"""

from dataclasses import dataclass, field
from enum import Enum

# ##>: Scores are kept inside the signed 32-bit range.
SCORE_FLOOR = -(2**31)
SCORE_CEILING = 2**31 - 1

DEFAULT_DEPTH = 7


class SearchMode(str, Enum):
    """
    Search variant used to pick a move.

    MINIMAX: exhaustive search, new tiles placed by a worst-case opponent.
    ALPHA_BETA: capped, weighted average over new tile placements.
    """

    MINIMAX = 'minimax'
    ALPHA_BETA = 'alpha_beta'


@dataclass(frozen=True)
class SearchConfig:
    """
    Weights and limits of the search.

    Attributes are organized by the component reading them.
    """

    # ##>: Heuristic evaluation.
    empty_cell_penalty: int = 300  # Divided by (empty cells + 1)
    corner_weight: int = 4  # Multiplier of the corner score
    corner_limit: int = 2048 * 8  # Initial ceiling of the snake walk

    # ##>: Averaging search.
    win_score: int = 4096 * 100  # Won terminal, far below SCORE_CEILING
    max_branches: int = 16  # New tile placements sampled per node
    spawn_weights: dict[int, int] = field(default_factory=lambda: {2: 9, 4: 1})  # Tried in this order

    @property
    def weight_total(self) -> int:
        """Sum of the spawn weights."""
        return sum(self.spawn_weights.values())


DEFAULT_CONFIG = SearchConfig()
