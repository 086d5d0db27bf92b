"""Per-file processing: read, strip, then write, back up or preview."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from md_emoji_stripper.assembly.markdown_writer import write_backup, write_markdown, write_stdout
from md_emoji_stripper.config import DEFAULT_CONFIG, RunConfig
from md_emoji_stripper.errors import FileProcessingError, IoReadError
from md_emoji_stripper.postprocessing.emoji_cleaner import StripResult, strip
from md_emoji_stripper.services.file_resolver import FileTarget

LOGGER = logging.getLogger(__name__)

WRITTEN = "written"
UNCHANGED = "unchanged"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass
class FileOutcome:
    """What happened to one target."""

    target: FileTarget
    status: str
    result: Optional[StripResult] = None
    backup_path: Optional[Path] = None
    error: Optional[FileProcessingError] = None

    @property
    def removed_spans(self) -> int:
        return self.result.removed_spans if self.result else 0


def read_markdown(path: Path, encoding: str = "utf-8") -> str:
    """Read ``path`` without newline translation so CRLF files round-trip."""

    try:
        return path.read_bytes().decode(encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise IoReadError(path, f"Could not read file `{path}`: {exc}") from exc


def _report_dry_run(target: FileTarget, original: str, result: StripResult, verbose: bool) -> None:
    if verbose:
        LOGGER.info(
            "[DRY RUN] Would process: %s (%d emoji removed, %d -> %d bytes)",
            target.path,
            result.removed_spans,
            len(original.encode("utf-8")),
            len(result.text.encode("utf-8")),
        )
    else:
        LOGGER.info("[DRY RUN] Would process: %s (%d emoji removed)", target.path, result.removed_spans)


def process_target(
    target: FileTarget,
    config: RunConfig,
    *,
    stdout: Optional[TextIO] = None,
) -> FileOutcome:
    """Run one target through the pipeline.

    Raises ``IoReadError`` or ``IoWriteError``; the original file is never
    modified unless its backup (when requested) was written first.
    """

    settings = config.settings or DEFAULT_CONFIG
    original = read_markdown(target.path, settings.encoding)
    result = strip(original)

    if config.dry_run:
        _report_dry_run(target, original, result, config.verbose)
        return FileOutcome(target=target, status=SKIPPED, result=result)

    backup_path = None
    if target.destination is None:
        write_stdout(result.text, stdout)
        status = WRITTEN
    elif target.in_place and not result.changed:
        status = UNCHANGED
    else:
        if target.in_place and config.backup:
            backup_path = write_backup(target.path, settings.backup_path_for(target.path))
            if config.verbose:
                LOGGER.info("Created backup: %s", backup_path)
        write_markdown(target.destination, result.text, encoding=settings.encoding)
        status = WRITTEN

    if config.verbose:
        LOGGER.info(
            "Processed %s: %d emoji removed -> %s%s",
            target.path,
            result.removed_spans,
            target.describe_destination(),
            "" if status == WRITTEN else f" ({status})",
        )
    return FileOutcome(target=target, status=status, result=result, backup_path=backup_path)
