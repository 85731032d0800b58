import unittest

from mortgage_calc.theme import Theme, ThemeManager


class TestThemeManager(unittest.TestCase):

    def test_defaults_to_light(self):
        manager = ThemeManager()
        self.assertFalse(manager.is_dark)
        self.assertEqual(manager.get_color("accent"), Theme.LIGHT["accent"])

    def test_toggle(self):
        manager = ThemeManager()
        self.assertEqual(manager.toggle_theme(), "Dark")
        self.assertTrue(manager.is_dark)
        self.assertEqual(manager.get_color("danger"), Theme.DARK["danger"])
        self.assertEqual(manager.toggle_theme(), "Light")

    def test_missing_key(self):
        self.assertEqual(ThemeManager().get_color("nope"), "#ff0000")

    def test_palettes_share_keys(self):
        self.assertEqual(set(Theme.LIGHT), set(Theme.DARK))


if __name__ == '__main__':
    unittest.main()
