"""Git-backed trackability checks.

Queries git once per build for untracked-but-ignored paths. Anything under the
analysis root that git would not reject is considered trackable.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import VcsError
from .types import SourcePath

logger = logging.getLogger(__name__)


def _is_within(path: Path, root: Path) -> bool:
    """Return whether ``path`` is at or under ``root`` after resolution."""
    try:
        path.relative_to(root)
        return True
    except ValueError:
        return False


class AllTrackable:
    """Trackability oracle used when no version control applies to the root."""

    def is_trackable_or_tracked(self, path: SourcePath) -> bool:
        return True


@dataclass(frozen=True)
class GitTrackability:
    """Snapshot of git's ignore decisions for one analysis root.

    ``ignored_files`` and ``ignored_dirs`` hold root-relative strings so parent
    checks can reject whole subtrees. ``root_ignored`` is set when the root
    itself sits inside an ignored directory.
    """

    root: Path
    ignored_files: frozenset[str]
    ignored_dirs: frozenset[str]
    root_ignored: bool = False

    def is_trackable_or_tracked(self, path: SourcePath) -> bool:
        if self.root_ignored:
            return False
        if path.is_root:
            return True
        if path.relative in self.ignored_files or path.relative in self.ignored_dirs:
            return False
        return not any(ancestor in self.ignored_dirs for ancestor in path.ancestors())


def _git_toplevel(root: Path) -> Path | None:
    """Return the work-tree top level containing ``root``, or ``None`` outside git."""
    try:
        proc = subprocess.run(
            ["git", "-C", str(root), "rev-parse", "--show-toplevel"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError:
        return None
    top_level = proc.stdout.strip()
    if not top_level:
        return None
    return Path(top_level).resolve()


def _list_ignored(repo_root: Path) -> list[tuple[str, bool]]:
    """Return ``(repo-relative path, is_dir)`` pairs for untracked ignored paths."""
    command = [
        "git",
        "-C",
        str(repo_root),
        "ls-files",
        "-z",
        "--others",
        "-i",
        "--exclude-standard",
        "--directory",
    ]
    proc = subprocess.run(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    if proc.returncode != 0:
        raise VcsError(command, proc.returncode, proc.stderr.decode("utf-8", errors="replace"))

    ignored: list[tuple[str, bool]] = []
    for raw in proc.stdout.split(b"\x00"):
        if not raw:
            continue
        rel = os.fsdecode(raw)
        is_dir = rel.endswith("/")
        rel = rel.rstrip("/")
        if rel:
            ignored.append((rel, is_dir))
    return ignored


def load_git_trackability(root: Path) -> GitTrackability | AllTrackable:
    """Build a trackability oracle for ``root``.

    Falls back to ``AllTrackable`` when git is unavailable or ``root`` is not
    inside a work tree. Raises ``VcsError`` when git is usable but listing
    ignored files fails.
    """
    if shutil.which("git") is None:
        logger.debug("git not found on PATH; treating every path under %s as trackable", root)
        return AllTrackable()

    root = root.resolve()
    repo_root = _git_toplevel(root)
    if repo_root is None or not _is_within(root, repo_root):
        logger.debug("%s is not inside a git work tree; treating every path as trackable", root)
        return AllTrackable()

    ignored_files: set[str] = set()
    ignored_dirs: set[str] = set()
    root_ignored = False
    for rel, is_dir in _list_ignored(repo_root):
        abs_path = repo_root / rel
        if not _is_within(abs_path, root):
            if _is_within(root, abs_path):
                root_ignored = True
            continue
        root_rel = abs_path.relative_to(root).as_posix()
        if root_rel == ".":
            root_ignored = True
            continue
        if is_dir or abs_path.is_dir():
            ignored_dirs.add(root_rel)
        else:
            ignored_files.add(root_rel)

    logger.debug(
        "git snapshot for %s: %d ignored files, %d ignored directories",
        root,
        len(ignored_files),
        len(ignored_dirs),
    )
    return GitTrackability(
        root=root,
        ignored_files=frozenset(ignored_files),
        ignored_dirs=frozenset(ignored_dirs),
        root_ignored=root_ignored,
    )


__all__ = [
    "AllTrackable",
    "GitTrackability",
    "load_git_trackability",
]
