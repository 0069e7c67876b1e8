"""Command-line front door for includepaths.

Parses CLI options, resolves exclude patterns from config, and prints the
include entries for the requested source tree.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.util import ClassNotFound

from .builder import IncludePathsBuilder
from .config import load_color_preference, load_user_config, resolve_excludes
from .errors import UnreadableFileError, VcsError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def render_entries(entries: frozenset[str], as_json: bool, color: bool, style: str) -> str:
    """Format sorted include entries as plain lines or (optionally highlighted) JSON."""
    ordered = sorted(entries)
    if not as_json:
        return "".join(f"{entry}\n" for entry in ordered)
    text = json.dumps(ordered, indent=2) + "\n"
    if not color:
        return text
    try:
        formatter = Terminal256Formatter(style=style)
    except ClassNotFound:
        raise SystemExit(f"Unknown Pygments style: {style}")
    return highlight(text, JsonLexer(), formatter)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print include paths for a source tree.

    Unreadable wanted files and git failures exit with an actionable message.
    """
    parser = argparse.ArgumentParser(
        description="Print the minimal set of paths an analysis run should scan."
    )
    parser.add_argument("root", nargs="?", default=None, help="Source tree root. Defaults to current directory.")
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob pattern to exclude (repeatable).",
    )
    parser.add_argument("--config", default=None, help="Project config file (default: ROOT/.includepaths.json).")
    parser.add_argument("--json", action="store_true", help="Print entries as a JSON array.")
    parser.add_argument("--style", default="monokai", help="Pygments style name for --json output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    root = Path(args.root) if args.root is not None else Path.cwd()
    if not root.is_dir():
        raise SystemExit(f"Path not found: {root}")

    config_path = Path(args.config) if args.config is not None else None
    excludes = resolve_excludes(root, args.exclude, config_path)

    try:
        entries = IncludePathsBuilder(root, excludes).build()
    except UnreadableFileError as exc:
        raise SystemExit(f"{exc}") from exc
    except VcsError as exc:
        raise SystemExit(f"Unable to query git for ignored files: {exc}") from exc

    color = (
        not args.no_color
        and load_color_preference(load_user_config())
        and sys.stdout.isatty()
    )
    sys.stdout.write(render_entries(entries, args.json, color, args.style))


if __name__ == "__main__":
    main()
