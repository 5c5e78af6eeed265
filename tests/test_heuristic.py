"""
Tests for the heuristic evaluation (score combination, clustering, corner snake).
"""

from unittest import TestCase, main

import numpy as np

from game2048 import Board
from minimax.config import SearchConfig
from minimax.heuristic import SNAKE_PATH, clustering_score, corner_score, evaluate, heuristic_score


class TestHeuristicScore(TestCase):
    """Test the combination of the four board signals."""

    def test_combination(self):
        """Score, empty cells, clustering and corner are combined with integer arithmetic."""
        # ##>: 1000 - 300 // 6 - 20 + 4 * 10.
        self.assertEqual(heuristic_score(1000, 5, 20, 10), 970)

    def test_floor_for_positive_score(self):
        """A negative combination is raised to 1 when the game score is positive."""
        self.assertEqual(heuristic_score(100, 0, 0, 0), 1)

    def test_floor_for_null_score(self):
        """A negative combination is raised to 0 when the game score is 0."""
        self.assertEqual(heuristic_score(0, 15, 0, 0), 0)

    def test_full_board_has_no_division_error(self):
        """Zero empty cells divides the penalty by one."""
        self.assertEqual(heuristic_score(500, 0, 0, 0), 200)

    def test_monotone_in_actual_score(self):
        """The score never decreases when the game score grows, and never goes below the floor."""
        previous = None
        for actual_score in range(0, 2000, 7):
            score = heuristic_score(actual_score, 3, 40, 12)
            self.assertGreaterEqual(score, min(actual_score, 1))
            if previous is not None:
                self.assertGreaterEqual(score, previous)
            previous = score

    def test_custom_weights(self):
        """Weights are read from the configuration."""
        config = SearchConfig(empty_cell_penalty=0, corner_weight=1)
        self.assertEqual(heuristic_score(10, 0, 2, 5, config=config), 13)


class TestClusteringScore(TestCase):
    """Test the neighbourhood differences."""

    def test_empty_board(self):
        """An empty board is not clustered."""
        self.assertEqual(clustering_score(np.zeros((4, 4), dtype=int)), 0)

    def test_equal_tiles(self):
        """Equal neighbours have no difference."""
        self.assertEqual(clustering_score(np.full((4, 4), 8)), 0)

    def test_isolated_tile(self):
        """A lone tile only neighbours itself."""
        board = np.zeros((4, 4), dtype=int)
        board[2, 2] = 64
        self.assertEqual(clustering_score(board), 0)

    def test_pair(self):
        """Each tile of a pair averages its difference over two non-empty cells."""
        board = np.array([[2, 8, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(clustering_score(board), 6)

    def test_integer_average(self):
        """Per-tile averages are truncated before being summed."""
        # ##>: 8 // 3 + 6 // 3 + 10 // 3.
        board = np.array([[2, 4, 0, 0], [8, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(clustering_score(board), 7)

    def test_accepts_nested_lists(self):
        """Plain lists are accepted as grids."""
        self.assertEqual(clustering_score([[2, 8, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]), 6)


class TestCornerScore(TestCase):
    """Test the snake walk from the top-left corner."""

    def test_snake_path(self):
        """The walk zigzags over the three first rows."""
        self.assertEqual(len(SNAKE_PATH), 12)
        self.assertEqual(SNAKE_PATH[3], (0, 3))
        self.assertEqual(SNAKE_PATH[4], (1, 3))
        self.assertEqual(SNAKE_PATH[7], (1, 0))
        self.assertEqual(SNAKE_PATH[8], (2, 0))

    def test_empty_board(self):
        """An empty board scores nothing."""
        self.assertEqual(corner_score(np.zeros((4, 4), dtype=int)), 0)

    def test_decreasing_snake(self):
        """A decreasing snake scores the sum of all its tiles."""
        board = np.array([[1024, 512, 256, 128], [8, 16, 32, 64], [4, 2, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(corner_score(board), int(board.sum()))

    def test_stops_at_first_increase(self):
        """The walk stops when a tile exceeds the previous one."""
        board = np.array([[2, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(corner_score(board), 2)

    def test_stops_after_empty_cell(self):
        """An empty cell lowers the ceiling to zero."""
        board = np.array([[8, 0, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(corner_score(board), 8)

    def test_tile_above_initial_limit(self):
        """A corner tile above the initial ceiling scores nothing."""
        board = np.array([[32768, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(corner_score(board), 0)

    def test_last_row_is_ignored(self):
        """Tiles on the last row never count."""
        board = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [2048, 1024, 0, 0]])
        self.assertEqual(corner_score(board), 0)


class TestEvaluate(TestCase):
    """Test the evaluation of a Board."""

    def test_evaluate_board(self):
        """Board signals are fed into the heuristic."""
        board = Board([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], score=100)

        # ##>: 100 - 300 // 15 - 0 + 4 * 4.
        self.assertEqual(evaluate(board), 96)

    def test_evaluate_full_board(self):
        """A full board is evaluated without error."""
        board = Board([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]], score=40)
        self.assertGreaterEqual(evaluate(board), 1)


if __name__ == '__main__':
    main()
