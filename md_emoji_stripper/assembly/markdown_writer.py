"""Write stripped markdown to its destination."""

from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO

from md_emoji_stripper.errors import IoWriteError

LOGGER = logging.getLogger(__name__)


def write_markdown(output_path: Path, markdown: str, *, encoding: str = "utf-8") -> None:
    """Atomically replace ``output_path`` with ``markdown``.

    The content goes to a temporary file in the same directory which is then
    renamed over the destination, so an interrupted run never leaves a
    half-written file behind. Permission bits of an existing file are kept.
    A symlinked destination is written through to the file it points at.
    """

    if output_path.is_symlink():
        output_path = Path(os.path.realpath(output_path))

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=output_path.parent, prefix=f".{output_path.name}.", suffix=".tmp"
        )
    except OSError as exc:
        raise IoWriteError(output_path, f"Could not write to file `{output_path}`: {exc}") from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(markdown)
        if output_path.exists():
            shutil.copymode(output_path, tmp_path)
        os.replace(tmp_path, output_path)
    except (OSError, UnicodeEncodeError) as exc:
        tmp_path.unlink(missing_ok=True)
        raise IoWriteError(output_path, f"Could not write to file `{output_path}`: {exc}") from exc


def write_backup(source: Path, backup_path: Path) -> Path:
    """Copy ``source`` byte for byte to ``backup_path``."""

    try:
        shutil.copy2(source, backup_path)
    except OSError as exc:
        raise IoWriteError(source, f"Could not create backup at `{backup_path}`: {exc}") from exc
    LOGGER.debug("Backed up %s to %s", source, backup_path)
    return backup_path


def write_stdout(markdown: str, stream: Optional[TextIO] = None) -> None:
    target = stream or sys.stdout
    try:
        target.write(markdown)
        target.flush()
    except (OSError, UnicodeEncodeError) as exc:
        raise IoWriteError(Path("<stdout>"), f"Could not write to stdout: {exc}") from exc
