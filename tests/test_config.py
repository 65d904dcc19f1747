import unittest

from aeroplane_chess.config import Config, config


class TestConfigDefaults(unittest.TestCase):
    def test_board_constants(self):
        cfg = Config()
        self.assertEqual(cfg.TOTAL_SPACES, 52)
        self.assertEqual(cfg.WIN_SPACE, 5)
        self.assertEqual(cfg.SEAT_COLORS, [0, 2])
        self.assertEqual((cfg.DIE_FROM, cfg.DIE_TO), (1, 7))

    def test_derived_win_space(self):
        cfg = Config(FINAL_STRETCH_SPACES=8)
        self.assertEqual(cfg.WIN_SPACE, 7)

    def test_module_instance(self):
        self.assertEqual(config.PIECES_PER_PLAYER, 4)
        self.assertTrue(config.PLAYER_ID_KEY)


class TestConfigValidation(unittest.TestCase):
    def test_offsets_need_four_colors(self):
        with self.assertRaises(ValueError):
            Config(SHORTCUT_ENTRIES=[36, 49, 10])

    def test_offsets_must_lie_on_track(self):
        with self.assertRaises(ValueError):
            Config(LAUNCH_STARTS=[18, 31, 44, 52])

    def test_two_seats(self):
        with self.assertRaises(ValueError):
            Config(SEAT_COLORS=[0])

    def test_die_range(self):
        with self.assertRaises(ValueError):
            Config(DIE_FROM=0)
        with self.assertRaises(ValueError):
            Config(DIE_TO=8)


if __name__ == "__main__":
    unittest.main()
