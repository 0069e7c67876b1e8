"""User exclude-pattern matching.

Patterns are shell-style globs matched case-sensitively against root-relative
paths. ``*`` crosses directory separators, and excluding a directory excludes
everything beneath it.
"""

from __future__ import annotations

from collections.abc import Iterable
from fnmatch import fnmatchcase

from .types import SourcePath

_DIRECTORY_SUFFIXES = ("/**", "/*", "/")


def normalize_pattern(pattern: str) -> str:
    """Strip surrounding whitespace and a leading ``./`` from ``pattern``."""
    normalized = pattern.strip()
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def expand_globstar(pattern: str) -> frozenset[str]:
    """Return ``pattern`` plus variants where each ``**/`` matches zero directories.

    ``fnmatchcase`` needs at least one directory for ``**/``, so ``**/*.rb``
    alone would miss a top-level ``a.rb``.
    """
    expanded = {pattern}
    pending = [pattern]
    while pending:
        current = pending.pop()
        variants: list[str] = []
        if current.startswith("**/"):
            variants.append(current[3:])
        idx = current.find("/**/")
        while idx != -1:
            variants.append(current[:idx] + current[idx + 3 :])
            idx = current.find("/**/", idx + 1)
        for variant in variants:
            if variant and variant not in expanded:
                expanded.add(variant)
                pending.append(variant)
    return frozenset(expanded)


def _directory_form(pattern: str) -> str | None:
    """Return the directory a contents pattern such as ``vendor/*`` names."""
    for suffix in _DIRECTORY_SUFFIXES:
        if pattern.endswith(suffix):
            base = pattern[: -len(suffix)]
            return base or None
    return None


class ExcludeMatcher:
    """Matches root-relative paths against a set of exclude globs."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        normalized = {normalize_pattern(pattern) for pattern in patterns}
        normalized.discard("")
        self.patterns = frozenset(normalized)
        self._globs = frozenset(glob for pattern in self.patterns for glob in expand_globstar(pattern))
        directory_patterns = {_directory_form(pattern) for pattern in self._globs}
        directory_patterns.discard(None)
        self._directory_patterns = frozenset(directory_patterns)

    def __bool__(self) -> bool:
        return bool(self.patterns)

    def _matches_relative(self, relative: str, is_dir: bool) -> bool:
        for pattern in self._globs:
            if fnmatchcase(relative, pattern):
                return True
            if is_dir and fnmatchcase(f"{relative}/", pattern):
                return True
        if is_dir:
            return any(fnmatchcase(relative, pattern) for pattern in self._directory_patterns)
        return False

    def matches(self, path: SourcePath) -> bool:
        """Return whether ``path`` or any enclosing directory matches a pattern.

        The root itself is never matched; patterns are relative to it.
        """
        if not self.patterns or path.is_root:
            return False
        for ancestor in path.ancestors():
            if self._matches_relative(ancestor, is_dir=True):
                return True
        return self._matches_relative(path.relative, path.is_dir)


__all__ = ["ExcludeMatcher", "expand_globstar", "normalize_pattern"]
