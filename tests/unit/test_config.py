"""Tests for JSON config loading and exclude-pattern merging."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from includepaths import config


class ConfigLoadingTests(unittest.TestCase):
    def test_missing_or_malformed_config_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            self.assertEqual(config.load_config(root / "missing.json"), {})

            broken = root / "broken.json"
            broken.write_text("{not json", encoding="utf-8")
            self.assertEqual(config.load_config(broken), {})

            listing = root / "list.json"
            listing.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(config.load_config(listing), {})

    def test_exclude_paths_drops_invalid_items(self) -> None:
        data = {"exclude_paths": ["vendor/*", 3, "", None, "tmp/"]}
        self.assertEqual(config.exclude_paths_from(data), ["vendor/*", "tmp/"])
        self.assertEqual(config.exclude_paths_from({"exclude_paths": "vendor"}), [])

    def test_color_preference_defaults_to_enabled(self) -> None:
        self.assertTrue(config.load_color_preference({}))
        self.assertTrue(config.load_color_preference({"color": "no"}))
        self.assertFalse(config.load_color_preference({"color": False}))

    def test_merge_excludes_keeps_first_seen_order(self) -> None:
        merged = config.merge_excludes(["a", "b"], ["b", "c"], ("a", "d"))
        self.assertEqual(merged, ["a", "b", "c", "d"])

    def test_resolve_excludes_combines_user_project_and_cli_patterns(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            user_config = root / "user.json"
            user_config.write_text(json.dumps({"exclude_paths": ["node_modules/"]}), encoding="utf-8")
            (root / config.PROJECT_CONFIG_FILENAME).write_text(
                json.dumps({"exclude_paths": ["vendor/*", "node_modules/"]}),
                encoding="utf-8",
            )

            with mock.patch.object(config, "USER_CONFIG_PATH", user_config):
                merged = config.resolve_excludes(root, ["*.min.js"])

            self.assertEqual(merged, ["node_modules/", "vendor/*", "*.min.js"])

    def test_resolve_excludes_honors_explicit_config_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            custom = root / "custom.json"
            custom.write_text(json.dumps({"exclude_paths": ["spec/fixtures/**"]}), encoding="utf-8")
            (root / config.PROJECT_CONFIG_FILENAME).write_text(
                json.dumps({"exclude_paths": ["ignored-by-override"]}),
                encoding="utf-8",
            )

            with mock.patch.object(config, "USER_CONFIG_PATH", root / "no-user.json"):
                merged = config.resolve_excludes(root, [], custom)

            self.assertEqual(merged, ["spec/fixtures/**"])


if __name__ == "__main__":
    unittest.main()
