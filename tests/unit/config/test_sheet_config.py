"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from bindsheet import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_theme_and_left_pane_percent_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("bindsheet.config.CONFIG_PATH", config_path):
                config.save_theme_name("  ocean ")
                config.save_left_pane_percent(140)

                saved = config.load_config()
                self.assertEqual(saved.get("theme"), "ocean")
                self.assertEqual(saved.get("left_pane_percent"), 99.0)
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_left_pane_percent(), 99.0)

    def test_missing_or_malformed_config_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("bindsheet.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertIsNone(config.load_left_pane_percent())

    def test_invalid_values_are_ignored(self) -> None:
        self.assertIsNone(config.load_left_pane_percent({"left_pane_percent": 0}))
        self.assertIsNone(config.load_left_pane_percent({"left_pane_percent": True}))
        self.assertIsNone(config.load_left_pane_percent({"left_pane_percent": "40"}))
        self.assertIsNone(config.load_left_pane_percent({"left_pane_percent": float("nan")}))
        self.assertEqual(config.load_left_pane_percent({"left_pane_percent": 35}), 35.0)
        self.assertIsNone(config.load_theme_name({"theme": "   "}))
        self.assertIsNone(config.load_theme_name({"theme": 3}))

    def test_save_errors_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("bindsheet.config.CONFIG_PATH", blocker / "config.json"):
                config.save_theme_name("ocean")
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
