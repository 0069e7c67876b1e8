"""Exceptions raised while computing include paths.

``UnreadableFileError`` is the one failure callers are expected to handle and
report; ``VcsError`` and filesystem ``OSError`` are operational failures.
"""

from __future__ import annotations


class UnreadableFileError(Exception):
    """A path is wanted for analysis but is not readable by all users."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Can't read {path}: adjust exclude_paths or file permissions")
        self.path = path


class VcsError(RuntimeError):
    """The version-control tool could not be queried for ignored paths."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        detail = stderr.strip()
        message = f"{' '.join(command)} exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


__all__ = ["UnreadableFileError", "VcsError"]
