"""Permission-bit checks for "readable by everyone who may run the analysis"."""

from __future__ import annotations

import stat

from .types import SourcePath

FILE_READ_BITS = stat.S_IROTH
DIRECTORY_READ_BITS = stat.S_IROTH | stat.S_IXOTH


def mode_is_readable_by_all(mode: int, is_dir: bool) -> bool:
    """Return whether ``mode`` grants read (and traverse, for directories) to others."""
    required = DIRECTORY_READ_BITS if is_dir else FILE_READ_BITS
    return (mode & required) == required


class PermissionReadability:
    """Readability oracle backed by ``stat`` permission bits.

    Symlinks are followed and judged by their target, so a link to a directory
    needs traverse access too. A dangling link raises ``OSError``.
    """

    def is_readable_by_all(self, path: SourcePath) -> bool:
        mode = path.absolute.stat().st_mode
        return mode_is_readable_by_all(mode, path.is_dir or stat.S_ISDIR(mode))


__all__ = [
    "FILE_READ_BITS",
    "DIRECTORY_READ_BITS",
    "mode_is_readable_by_all",
    "PermissionReadability",
]
