"""Exceptions raised while choosing or applying a shortened filename."""

from __future__ import annotations

from pathlib import Path


class NamefitError(Exception):
    """Base class for namefit errors."""


class FilenameNotFound(NamefitError):
    """Raised when a path has no final filename segment (e.g. `/` or `.`)."""

    def __init__(self, path: Path | str):
        self.path = path
        super().__init__(f"Filename not found in path: {path}")


class RetriesExhausted(NamefitError):
    """Raised when every numbered candidate up to the retry cap already exists."""

    def __init__(self, filename: str, attempts: int):
        self.filename = filename
        self.attempts = attempts
        super().__init__(
            f"No free filename for {filename!r} after {attempts} attempts"
        )


class ConfigError(NamefitError):
    """Raised when a config file has the wrong shape."""


class SameFileError(NamefitError):
    """Raised when the rename source and destination are the same path."""

    def __init__(self, src: Path, dst: Path):
        self.src = src
        self.dst = dst
        super().__init__(f"Source and destination are the same: {src} -> {dst}")


class RenameError(NamefitError):
    """Raised when the final rename/move fails."""

    def __init__(self, src: Path, dst: Path, cause: OSError):
        self.src = src
        self.dst = dst
        self.cause = cause
        super().__init__(f"Rename error: {src} -> {dst}: {cause}")
