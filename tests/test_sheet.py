"""Host-facing state tests: mode updates, margins, and configuration."""

from __future__ import annotations

import unittest

from bindsheet.actions import Binding, action_sequence
from bindsheet.ansi import visible_width
from bindsheet.keys import ctrl_key
from bindsheet.sheet import DEFAULT_MODE, CheatSheet, ModeUpdate
from bindsheet.ui_theme import OCEAN_THEME, PLAIN_THEME

KEYBINDS = [("Normal", [Binding(ctrl_key("q"), action_sequence(["Quit"]))])]


class CheatSheetTests(unittest.TestCase):
    def test_mode_update_replaces_snapshot_and_requests_render(self) -> None:
        sheet = CheatSheet()
        self.assertEqual(sheet.mode, DEFAULT_MODE)
        self.assertTrue(sheet.update(ModeUpdate(mode="Pane", keybinds=KEYBINDS)))
        self.assertEqual(sheet.mode, "Pane")
        self.assertEqual(sheet.keybinds, KEYBINDS)

    def test_other_events_are_ignored(self) -> None:
        sheet = CheatSheet()
        self.assertFalse(sheet.update("Timer"))
        self.assertEqual(sheet.keybinds, [])

    def test_render_keeps_one_cell_margin(self) -> None:
        sheet = CheatSheet()
        sheet.update(ModeUpdate(mode="Normal", keybinds=KEYBINDS))
        lines = sheet.render(11, 41).split("\n")[:-1]
        self.assertEqual(len(lines), 10)
        self.assertTrue(all(visible_width(line) == 40 for line in lines))

    def test_zero_or_single_cell_sizes_render_nothing(self) -> None:
        sheet = CheatSheet()
        sheet.update(ModeUpdate(mode="Normal", keybinds=KEYBINDS))
        self.assertEqual(sheet.render(0, 40), "")
        self.assertEqual(sheet.render(10, 0), "")
        self.assertEqual(sheet.render(1, 40), "")

    def test_configuration_selects_theme_and_split(self) -> None:
        sheet = CheatSheet()
        sheet.load({"theme": "ocean", "left_pane_percent": "30"})
        self.assertEqual(sheet.theme, OCEAN_THEME)
        self.assertEqual(sheet.left_percent, 30.0)

        sheet.load({"theme": "ocean", "no_color": "true", "left_pane_percent": "wide"})
        self.assertEqual(sheet.theme, PLAIN_THEME)
        self.assertEqual(sheet.left_percent, 50.0)

        sheet.load({"left_pane_percent": "100"})
        self.assertEqual(sheet.left_percent, 50.0)

    def test_non_finite_left_percent_falls_back_to_even_split(self) -> None:
        sheet = CheatSheet()
        sheet.update(ModeUpdate(mode="Normal", keybinds=KEYBINDS))
        for raw in ("nan", "inf", "-inf"):
            with self.subTest(raw=raw):
                sheet.load({"left_pane_percent": raw, "no_color": "true"})
                self.assertEqual(sheet.left_percent, 50.0)
                first = sheet.render(3, 41).split("\n")[0]
                self.assertIn("Shared", first)


if __name__ == "__main__":
    unittest.main()
