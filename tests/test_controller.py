import unittest

from game import GameController, Model, Side


def _tiles(m):
    return [v for row in m.values() for v in row if v]


class TestGameController(unittest.TestCase):
    def test_given_seed_when_new_game_then_two_small_tiles(self):
        m = GameController(size=4, seed=7).new_game()
        tiles = _tiles(m)
        self.assertEqual(len(tiles), 2)
        self.assertTrue(all(v in (2, 4) for v in tiles))
        self.assertEqual(m.score(), 0)

    def test_given_same_seed_when_new_game_then_same_board(self):
        a = GameController(size=4, seed=11).new_game()
        b = GameController(size=4, seed=11).new_game()
        self.assertEqual(a.values(), b.values())

    def test_given_two_probability_one_when_spawning_then_only_twos(self):
        c = GameController(size=3, seed=3, two_probability=1.0)
        for _ in range(9):
            c.spawn_tile()
        self.assertEqual(_tiles(c.model), [2] * 9)
        self.assertIsNone(c.spawn_tile())

    def test_given_blocked_direction_when_play_then_no_spawn(self):
        m = Model.from_values([
            [2, 4, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ])
        c = GameController(model=m, seed=1)
        self.assertFalse(c.play(Side.WEST))
        self.assertEqual(len(_tiles(m)), 2)

    def test_given_open_direction_when_play_then_one_tile_spawned(self):
        m = Model.from_values([
            [2, 4, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ])
        c = GameController(model=m, seed=1)
        self.assertTrue(c.play(Side.EAST))
        self.assertEqual(m.values()[0][2:], [2, 4])
        self.assertEqual(len(_tiles(m)), 3)

    def test_given_finished_game_when_play_then_refused(self):
        m = Model.from_values([[2, 4], [8, 16]], score=10)
        c = GameController(model=m, seed=1)
        self.assertFalse(c.play(Side.NORTH))
        self.assertEqual(m.values(), [[2, 4], [8, 16]])
        self.assertEqual(m.max_score(), 10)


if __name__ == '__main__':
    unittest.main()
