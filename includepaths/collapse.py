"""Depth-first directory collapsing into include entries.

A directory whose whole subtree is includable becomes a single ``dir/`` entry;
otherwise its includable children are listed individually.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .classifier import PathClassifier
from .errors import UnreadableFileError
from .types import SourcePath, Verdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubtreeResult:
    """Include entries for one subtree and whether nothing beneath it was dropped."""

    fully_included: bool
    entries: frozenset[str]


EXCLUDED = SubtreeResult(fully_included=False, entries=frozenset())

# VCS metadata is never part of the source tree.
SKIPPED_NAMES = frozenset({".git"})


def list_children(directory: SourcePath) -> list[SourcePath]:
    """List direct children of ``directory`` in name order.

    Symlinks are reported as non-directories so the walk never follows them.
    VCS metadata directories are left out entirely.
    Listing errors propagate to the caller.
    """
    children: list[SourcePath] = []
    with os.scandir(directory.absolute) as entries:
        for child in entries:
            if child.name in SKIPPED_NAMES:
                continue
            is_dir = child.is_dir(follow_symlinks=False)
            children.append(directory.child(child.name, is_dir))
    children.sort(key=lambda item: item.relative)
    return children


class TreeCollapser:
    """Walks a source tree and aggregates per-path verdicts bottom-up."""

    def __init__(self, classifier: PathClassifier) -> None:
        self.classifier = classifier

    def collapse(self, root: SourcePath) -> frozenset[str]:
        """Return include entries for the tree at ``root``.

        Raises ``UnreadableFileError`` as soon as any wanted path is unreadable.
        """
        return self.visit(root).entries

    def visit(self, path: SourcePath) -> SubtreeResult:
        verdict = self.classifier.classify(path)
        if verdict is Verdict.EXCLUDE:
            return EXCLUDED
        if verdict is Verdict.FATAL_UNREADABLE:
            raise UnreadableFileError(path.relative)
        if not path.is_dir:
            return SubtreeResult(fully_included=True, entries=frozenset({path.entry}))

        results = [self.visit(child) for child in list_children(path)]
        if all(result.fully_included for result in results):
            return SubtreeResult(fully_included=True, entries=frozenset({path.entry}))

        entries: set[str] = set()
        for result in results:
            entries.update(result.entries)
        logger.debug("%s has exclusions; listing %d entries beneath it", path.entry, len(entries))
        return SubtreeResult(fully_included=False, entries=frozenset(entries))


__all__ = ["SubtreeResult", "EXCLUDED", "SKIPPED_NAMES", "list_children", "TreeCollapser"]
