"""Resolve a user-supplied path into the markdown files to process.

A regular file always yields exactly one target. A directory is only
accepted in recursive mode, where every markdown file below it becomes an
in-place target. Targets are sorted by path so runs are reproducible.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from md_emoji_stripper.config import DEFAULT_CONFIG, StripperConfig
from md_emoji_stripper.errors import (
    NotADirectoryWithoutRecursiveError,
    NotMarkdownError,
    PathNotFoundError,
)

LOGGER = logging.getLogger(__name__)


class TargetMode(enum.Enum):
    SINGLE = "single"
    RECURSIVE_MEMBER = "recursive-member"


@dataclass(frozen=True)
class FileTarget:
    """A markdown file and where its stripped content should go."""

    path: Path
    mode: TargetMode
    # None means stdout
    destination: Optional[Path]

    @property
    def in_place(self) -> bool:
        return self.destination is not None and self.destination == self.path

    def describe_destination(self) -> str:
        if self.destination is None:
            return "stdout"
        if self.in_place:
            return "in-place"
        return str(self.destination)


def _walk_markdown(root: Path, config: StripperConfig) -> List[Path]:
    excluded = set(config.excluded_dirs)
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name not in excluded]
        for filename in filenames:
            candidate = Path(dirpath) / filename
            if config.is_markdown(candidate) and candidate.is_file():
                found.append(candidate)
    return sorted(found)


def resolve(
    path: Path,
    recursive: bool,
    *,
    output: Optional[Path] = None,
    config: Optional[StripperConfig] = None,
) -> List[FileTarget]:
    """Return the files to process for ``path``.

    Raises ``PathNotFoundError``, ``NotMarkdownError`` or
    ``NotADirectoryWithoutRecursiveError`` before anything is read.
    """

    cfg = config or DEFAULT_CONFIG
    path = Path(path)

    if not path.exists():
        raise PathNotFoundError(f"Path does not exist: {path}")

    if path.is_dir():
        if not recursive:
            raise NotADirectoryWithoutRecursiveError(
                f"{path} is a directory; use --recursive to process the markdown files under it"
            )
        targets = [
            FileTarget(path=member, mode=TargetMode.RECURSIVE_MEMBER, destination=member)
            for member in _walk_markdown(path, cfg)
        ]
        LOGGER.debug("Resolved %d markdown files under %s", len(targets), path)
        return targets

    if not cfg.is_markdown(path):
        raise NotMarkdownError(
            f"Not a markdown file: {path} (expected one of: {', '.join(cfg.markdown_extensions)})"
        )

    # --recursive implies in-place writes, including for a single file
    if recursive:
        destination: Optional[Path] = path
    else:
        destination = Path(output) if output is not None else None
    return [FileTarget(path=path, mode=TargetMode.SINGLE, destination=destination)]
