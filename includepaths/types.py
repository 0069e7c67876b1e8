"""Value types and oracle interfaces shared by the include-path builder."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

ROOT_RELATIVE = "."
ROOT_ENTRY = "./"


@dataclass(frozen=True)
class SourcePath:
    """A filesystem location addressed relative to the analysis root.

    ``relative`` always uses forward slashes; the root itself is ``"."``.
    """

    root: Path
    relative: str
    is_dir: bool

    @classmethod
    def for_root(cls, root: Path) -> SourcePath:
        return cls(root=root, relative=ROOT_RELATIVE, is_dir=True)

    @property
    def is_root(self) -> bool:
        return self.relative == ROOT_RELATIVE

    @property
    def absolute(self) -> Path:
        if self.is_root:
            return self.root
        return self.root.joinpath(*self.relative.split("/"))

    @property
    def entry(self) -> str:
        """Include-entry form: trailing slash for directories, bare for files."""
        if self.is_root:
            return ROOT_ENTRY
        if self.is_dir:
            return f"{self.relative}/"
        return self.relative

    def child(self, name: str, is_dir: bool) -> SourcePath:
        relative = name if self.is_root else f"{self.relative}/{name}"
        return SourcePath(root=self.root, relative=relative, is_dir=is_dir)

    def ancestors(self) -> tuple[str, ...]:
        """Relative forms of every enclosing directory below the root, outermost first."""
        if self.is_root:
            return ()
        parts = self.relative.split("/")
        return tuple("/".join(parts[:idx]) for idx in range(1, len(parts)))


class Verdict(enum.Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"
    FATAL_UNREADABLE = "fatal_unreadable"


class ReadabilityOracle(Protocol):
    def is_readable_by_all(self, path: SourcePath) -> bool: ...


class ExcludeOracle(Protocol):
    def matches(self, path: SourcePath) -> bool: ...


class TrackabilityOracle(Protocol):
    def is_trackable_or_tracked(self, path: SourcePath) -> bool: ...


__all__ = [
    "ROOT_ENTRY",
    "ROOT_RELATIVE",
    "SourcePath",
    "Verdict",
    "ReadabilityOracle",
    "ExcludeOracle",
    "TrackabilityOracle",
]
