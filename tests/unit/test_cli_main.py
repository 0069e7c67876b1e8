"""CLI behavior tests for ``includepaths.cli.main``."""

from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from includepaths import cli
from includepaths.errors import UnreadableFileError, VcsError


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        user_patch = mock.patch("includepaths.config.USER_CONFIG_PATH", self.root / "no-user-config.json")
        user_patch.start()
        self.addCleanup(user_patch.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def run_main(self, argv: list[str], entries: frozenset[str]) -> tuple[str, mock.MagicMock]:
        stdout = io.StringIO()
        with mock.patch("includepaths.cli.IncludePathsBuilder") as builder_cls, mock.patch(
            "includepaths.cli.sys.stdout", stdout
        ):
            builder_cls.return_value.build.return_value = entries
            cli.main(argv)
        return stdout.getvalue(), builder_cls

    def test_prints_sorted_entries_one_per_line(self) -> None:
        output, builder_cls = self.run_main([str(self.root)], frozenset({"trackable.rb", "subdir/"}))

        self.assertEqual(output, "subdir/\ntrackable.rb\n")
        root_arg, excludes_arg = builder_cls.call_args.args
        self.assertEqual(Path(root_arg).resolve(), self.root)
        self.assertEqual(excludes_arg, [])

    def test_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            output, builder_cls = self.run_main([], frozenset({"./"}))
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(output, "./\n")
        self.assertEqual(Path(builder_cls.call_args.args[0]).resolve(), self.root)

    def test_cli_excludes_are_merged_after_project_config(self) -> None:
        (self.root / ".includepaths.json").write_text(
            json.dumps({"exclude_paths": ["vendor/*"]}),
            encoding="utf-8",
        )

        _output, builder_cls = self.run_main(
            [str(self.root), "-e", "*.min.js", "--exclude", "vendor/*"],
            frozenset({"./"}),
        )

        self.assertEqual(builder_cls.call_args.args[1], ["vendor/*", "*.min.js"])

    def test_json_output_without_color_is_plain_json(self) -> None:
        output, _builder_cls = self.run_main(
            [str(self.root), "--json", "--no-color"],
            frozenset({"b.rb", "a/"}),
        )

        self.assertEqual(json.loads(output), ["a/", "b.rb"])
        self.assertNotIn("\033[", output)

    def test_render_entries_highlights_json_when_color_enabled(self) -> None:
        rendered = cli.render_entries(frozenset({"a.rb"}), as_json=True, color=True, style="monokai")
        self.assertIn("\033[", rendered)
        self.assertIn("a.rb", rendered)

    def test_unknown_style_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.render_entries(frozenset({"a.rb"}), as_json=True, color=True, style="no-such-style")
        self.assertIn("no-such-style", str(ctx.exception.code))

    def test_missing_root_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root / "missing")])
        self.assertIn("Path not found", str(ctx.exception.code))

    def test_unreadable_file_exits_with_actionable_message(self) -> None:
        with mock.patch("includepaths.cli.IncludePathsBuilder") as builder_cls:
            builder_cls.return_value.build.side_effect = UnreadableFileError("secret/key.rb")
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(self.root)])

        message = str(ctx.exception.code)
        self.assertIn("secret/key.rb", message)
        self.assertIn("exclude_paths", message)

    def test_git_failure_exits_with_message(self) -> None:
        with mock.patch("includepaths.cli.IncludePathsBuilder") as builder_cls:
            builder_cls.return_value.build.side_effect = VcsError(["git", "ls-files"], 128, "fatal: broken")
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(self.root)])

        self.assertIn("fatal: broken", str(ctx.exception.code))


if __name__ == "__main__":
    unittest.main()
