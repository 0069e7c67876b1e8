"""Per-path verdicts combining exclude patterns, git ignores and permissions."""

from __future__ import annotations

from .types import (
    ExcludeOracle,
    ReadabilityOracle,
    SourcePath,
    TrackabilityOracle,
    Verdict,
)


class PathClassifier:
    """Assigns a ``Verdict`` to each path for the duration of one build.

    Exclusion sources are consulted before permissions, so an excluded path is
    never reported as unreadable. Verdicts are memoized per relative path.
    """

    def __init__(
        self,
        excludes: ExcludeOracle,
        trackability: TrackabilityOracle,
        readability: ReadabilityOracle,
    ) -> None:
        self.excludes = excludes
        self.trackability = trackability
        self.readability = readability
        self._verdicts: dict[str, Verdict] = {}

    def classify(self, path: SourcePath) -> Verdict:
        cached = self._verdicts.get(path.relative)
        if cached is not None:
            return cached
        verdict = self._classify_uncached(path)
        self._verdicts[path.relative] = verdict
        return verdict

    def _classify_uncached(self, path: SourcePath) -> Verdict:
        if self.excludes.matches(path):
            return Verdict.EXCLUDE
        if not self.trackability.is_trackable_or_tracked(path):
            return Verdict.EXCLUDE
        if not self.readability.is_readable_by_all(path):
            return Verdict.FATAL_UNREADABLE
        return Verdict.INCLUDE


__all__ = ["PathClassifier"]
