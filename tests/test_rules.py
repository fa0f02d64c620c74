import unittest

from game import (
    MAX_PIECE,
    Board,
    Model,
    at_least_one_move_exists,
    check_game_over,
    empty_space_exists,
    max_tile_exists,
)


class TestGameOverPredicates(unittest.TestCase):
    def test_given_boards_when_checking_empty_space_then_expected(self):
        self.assertTrue(empty_space_exists(Board(3)))
        self.assertTrue(empty_space_exists(Board.from_values([[2, 4], [8, 0]])))
        self.assertFalse(empty_space_exists(Board.from_values([[2, 4], [8, 16]])))

    def test_given_max_piece_anywhere_when_checking_then_detected(self):
        self.assertEqual(MAX_PIECE, 2048)
        b = Board.from_values([[0, 0, 0], [0, 0, 0], [0, 0, 2048]])
        self.assertTrue(max_tile_exists(b))
        self.assertFalse(max_tile_exists(Board.from_values([[1024, 1024], [0, 0]])))

    def test_given_full_board_with_interior_pair_when_checking_moves_then_found(self):
        # (1, 1) and (1, 0) are both 4
        self.assertTrue(at_least_one_move_exists(Board.from_values([[2, 4], [8, 4]])))
        # (1, 1) and (0, 1) are both 8
        self.assertTrue(at_least_one_move_exists(Board.from_values([[2, 4], [8, 8]])))

    def test_given_pair_only_on_row_zero_or_column_zero_when_checking_moves_then_not_seen(self):
        # (0, 0) and (1, 0) are equal but the sweep starts at index 1 in both axes
        self.assertFalse(at_least_one_move_exists(Board.from_values([[2, 2], [4, 8]])))
        # (0, 0) and (0, 1) likewise
        self.assertFalse(at_least_one_move_exists(Board.from_values([[2, 4], [2, 8]])))

    def test_given_single_cell_board_when_full_then_game_over(self):
        self.assertTrue(check_game_over(Board.from_values([[2]])))
        self.assertFalse(check_game_over(Board(1)))


class TestModelGameOver(unittest.TestCase):
    def test_given_max_tile_when_game_over_queried_then_true_regardless_of_space(self):
        m = Model.from_values([
            [0, 0, 0, 0],
            [0, 2048, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ], score=20000, max_score=100)
        self.assertTrue(m.game_over())
        self.assertEqual(m.max_score(), 20000)

    def test_given_stalemate_when_game_over_queried_then_max_score_folded(self):
        m = Model.from_values([[2, 4], [8, 16]], score=30, max_score=12)
        self.assertEqual(m.max_score(), 12)
        self.assertTrue(m.game_over())
        self.assertEqual(m.max_score(), 30)

        m2 = Model.from_values([[2, 4], [8, 16]], score=30, max_score=500)
        self.assertTrue(m2.game_over())
        self.assertEqual(m2.max_score(), 500)

    def test_given_running_game_when_game_over_queried_then_max_score_untouched(self):
        m = Model.from_values([[2, 0], [0, 0]], score=64, max_score=8)
        self.assertFalse(m.game_over())
        self.assertEqual(m.max_score(), 8)

    def test_given_stale_flag_when_game_over_queried_then_recomputed(self):
        m = Model.from_values([[2, 0], [0, 0]], game_over=True)
        self.assertFalse(m.game_over())

    def test_given_last_empty_cell_filled_when_add_tile_then_game_over(self):
        from game import Tile

        m = Model.from_values([[2, 4], [8, 0]], score=10)
        m.add_tile(Tile.create(32, 1, 1))
        self.assertTrue(m.game_over())
        self.assertEqual(m.max_score(), 10)


if __name__ == '__main__':
    unittest.main()
