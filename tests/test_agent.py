"""
Tests for MinimaxAgent and find_best_move (high-level move selection).
"""

from unittest import TestCase, main, mock

import numpy as np

from game2048 import Board, Direction
from minimax import MinimaxAgent, SearchMode, find_best_move

FULL_LOST_BOARD = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]


class TestFindBestMove(TestCase):
    """Test the entry point."""

    def test_returns_legal_direction(self):
        """A board with legal moves gets one of them."""
        for seed in range(5):
            board = Board.new_game(seed=seed)
            direction = find_best_move(board, 2)

            # ##>: Direction is one of the moves changing the board.
            self.assertIsInstance(direction, Direction)
            self.assertIn(direction, board.legal_directions())

    def test_returns_legal_direction_midgame(self):
        """A crowded board gets one of its few legal moves."""
        board = Board([[2, 4, 8, 16], [32, 64, 128, 256], [2, 4, 8, 16], [32, 64, 0, 0]], score=2500)
        direction = find_best_move(board, 3)
        self.assertIn(direction, board.legal_directions())

    def test_no_move_on_lost_board(self):
        """A board without legal moves gets no direction."""
        self.assertIsNone(find_best_move(Board(FULL_LOST_BOARD), 3))

    def test_depth_zero_has_no_direction(self):
        """Depth 0 evaluates the root without choosing."""
        board = Board([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertIsNone(find_best_move(board, 0))

    def test_prefers_merge(self):
        """A single-ply search merges towards the corner."""
        board = Board([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(find_best_move(board, 1), Direction.LEFT)

    def test_deterministic(self):
        """Two searches on the same board agree and leave it untouched."""
        board = Board([[4, 2, 0, 0], [2, 0, 0, 0], [0, 2, 0, 0], [0, 0, 0, 4]], score=20)
        before = board.board_array

        first = find_best_move(board, 3)
        second = find_best_move(board, 3)

        self.assertEqual(first, second)
        np.testing.assert_array_equal(board.board_array, before)

    def test_clone_failure_propagates(self):
        """A board that cannot be copied aborts the search."""
        board = Board.new_game(seed=3)
        with mock.patch.object(Board, 'clone', side_effect=RuntimeError('cannot copy board')):
            with self.assertRaises(RuntimeError):
                find_best_move(board, 2)

    def test_negative_depth(self):
        """Negative depths are rejected."""
        with self.assertRaises(ValueError):
            find_best_move(Board.new_game(seed=0), -1)


class TestMinimaxAgent(TestCase):
    """Test agent configuration and search dispatch."""

    def setUp(self):
        self.board = Board([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

    def test_default_depth(self):
        """The agent searches seven plies by default."""
        self.assertEqual(MinimaxAgent().depth, 7)

    def test_mode_dispatch(self):
        """Each mode keeps its own tie-breaking rule."""
        self.assertEqual(MinimaxAgent(depth=1, mode=SearchMode.MINIMAX).choose_action(self.board), Direction.RIGHT)
        self.assertEqual(MinimaxAgent(depth=1, mode=SearchMode.ALPHA_BETA).choose_action(self.board), Direction.DOWN)

    def test_mode_from_string(self):
        """Modes can be given by value."""
        self.assertEqual(MinimaxAgent(depth=1, mode='minimax').choose_action(self.board), Direction.RIGHT)

    def test_search_result(self):
        """The full search result exposes the root score."""
        result = MinimaxAgent(depth=1).search(self.board)
        self.assertEqual(result.score, 0)
        self.assertEqual(result.direction, Direction.DOWN)

    def test_logs_decision(self):
        """Chosen moves are logged at debug level."""
        with self.assertLogs('minimax.agent', level='DEBUG') as logs:
            MinimaxAgent(depth=1).choose_action(self.board)
        self.assertIn('Down', logs.output[0])

    def test_logs_missing_move(self):
        """Boards without moves are logged at debug level."""
        with self.assertLogs('minimax.agent', level='DEBUG') as logs:
            MinimaxAgent(depth=2).choose_action(Board(FULL_LOST_BOARD))
        self.assertIn('No move', logs.output[0])


if __name__ == '__main__':
    main()
