"""Public package surface for includepaths.

Computes which paths of a source tree an analysis run should scan, collapsing
fully-included directories into single entries.
"""

from __future__ import annotations

from .builder import IncludePathsBuilder, build_include_paths
from .errors import UnreadableFileError, VcsError
from .types import ROOT_ENTRY, SourcePath, Verdict


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "IncludePathsBuilder",
    "build_include_paths",
    "UnreadableFileError",
    "VcsError",
    "ROOT_ENTRY",
    "SourcePath",
    "Verdict",
    "main",
]
