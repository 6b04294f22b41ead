"""Column-width and pane-table construction tests."""

from __future__ import annotations

import unittest

from bindsheet.actions import Binding, action_sequence
from bindsheet.keys import char_key, ctrl_key
from bindsheet.tables import calculate_column_widths, keybinds_to_table
from bindsheet.ui_theme import DEFAULT_THEME, OCEAN_THEME


class ColumnWidthTests(unittest.TestCase):
    def test_per_column_maximum(self) -> None:
        widths = calculate_column_widths([[4, 1, 1, 1, 10], [0, 0, 5, 1, 3]])
        self.assertEqual(widths, [4, 1, 5, 1, 10])

    def test_ragged_rows_treat_missing_columns_as_zero(self) -> None:
        self.assertEqual(calculate_column_widths([[1], [2, 3]]), [2, 3])
        self.assertEqual(calculate_column_widths([[0, 0, 2], [1]]), [1, 0, 2])

    def test_no_rows_yields_no_columns(self) -> None:
        self.assertEqual(calculate_column_widths([]), [])


class KeybindsToTableTests(unittest.TestCase):
    def test_table_has_one_row_per_binding_and_five_columns(self) -> None:
        bindings = [
            Binding(char_key("a"), action_sequence(["Resize(Left)"])),
            Binding(ctrl_key("b"), action_sequence(["Resize(Right)"])),
        ]
        table = keybinds_to_table(bindings, "Resize")
        self.assertEqual(len(table.rows), 2)
        self.assertEqual(table.widths, (4, 1, 1, 1, 13))
        self.assertEqual(table.column_spacing, 1)
        self.assertEqual([cell.plain() for cell in table.rows[1].cells], ["Ctrl", "+", "b", "━", "Resize(Right)"])

    def test_block_carries_title_and_theme_styles(self) -> None:
        table = keybinds_to_table([], "Shared", OCEAN_THEME)
        self.assertEqual(table.rows, ())
        self.assertEqual(table.widths, ())
        self.assertEqual(table.block.title, "Shared")
        self.assertEqual(table.block.title_style, OCEAN_THEME.title)
        self.assertEqual(table.block.border_style, OCEAN_THEME.border)
        self.assertEqual(table.highlight_style, OCEAN_THEME.highlight)

    def test_default_theme_used_when_not_given(self) -> None:
        table = keybinds_to_table([], "Normal")
        self.assertEqual(table.block.title_style, DEFAULT_THEME.title)
        self.assertIsNone(table.selected)


if __name__ == "__main__":
    unittest.main()
