"""Entry point that wires the oracles together and computes include paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .classifier import PathClassifier
from .collapse import TreeCollapser
from .excludes import ExcludeMatcher
from .gitignore import load_git_trackability
from .readability import PermissionReadability
from .types import ReadabilityOracle, SourcePath, TrackabilityOracle

logger = logging.getLogger(__name__)


class IncludePathsBuilder:
    """Computes the minimal set of paths an analysis run should scan.

    ``trackability`` and ``readability`` default to git and permission-bit
    checks; tests inject fakes. Each ``build()`` starts from fresh state.
    """

    def __init__(
        self,
        root: Path,
        excludes: Iterable[str] = (),
        trackability: TrackabilityOracle | None = None,
        readability: ReadabilityOracle | None = None,
    ) -> None:
        self.root = Path(root)
        self.excludes = tuple(excludes)
        self.trackability = trackability
        self.readability = readability

    def build(self) -> frozenset[str]:
        """Return include entries; raises ``UnreadableFileError`` on unreadable wanted paths."""
        root = self.root.resolve()
        trackability = self.trackability
        if trackability is None:
            trackability = load_git_trackability(root)
        readability = self.readability
        if readability is None:
            readability = PermissionReadability()

        classifier = PathClassifier(ExcludeMatcher(self.excludes), trackability, readability)
        entries = TreeCollapser(classifier).collapse(SourcePath.for_root(root))
        logger.info("computed %d include entries for %s", len(entries), root)
        return entries


def build_include_paths(root: Path, excludes: Iterable[str] = ()) -> frozenset[str]:
    """Convenience wrapper around ``IncludePathsBuilder(root, excludes).build()``."""
    return IncludePathsBuilder(root, excludes).build()


__all__ = ["IncludePathsBuilder", "build_include_paths"]
