"""Exceptions raised while resolving and processing markdown files."""

from __future__ import annotations

from pathlib import Path


class EmojiStripperError(RuntimeError):
    """Base class for every error the stripper raises deliberately."""


class InvalidRunError(EmojiStripperError):
    """Raised before any file is touched when the run itself cannot proceed."""


class PathNotFoundError(InvalidRunError):
    """Raised when the requested path does not exist."""


class NotMarkdownError(InvalidRunError):
    """Raised when a single file is given without a markdown extension."""


class NotADirectoryWithoutRecursiveError(InvalidRunError):
    """Raised when a directory is given but recursive mode is off."""


class FileProcessingError(EmojiStripperError):
    """Raised for failures scoped to one file; the batch continues."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class IoReadError(FileProcessingError):
    """Raised when a file cannot be read or decoded."""


class IoWriteError(FileProcessingError):
    """Raised when a destination or backup file cannot be written."""
