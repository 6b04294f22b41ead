"""Regression tests for display-width helpers.

Column widths and grid painting both rely on these measurements.
"""

import unittest

from bindsheet import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_ascii_and_box_drawing_are_single_width(self) -> None:
        self.assertEqual(ansi_mod.display_width("Ctrl"), 4)
        self.assertEqual(ansi_mod.display_width("┳┫┛━│"), 5)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("界a"), 3)

    def test_combining_marks_take_no_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("é"), 1)

    def test_visible_width_ignores_escape_sequences(self) -> None:
        self.assertEqual(ansi_mod.visible_width("\x1b[97mab\x1b[0m"), 2)


if __name__ == "__main__":
    unittest.main()
