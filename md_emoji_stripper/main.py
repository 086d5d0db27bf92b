"""CLI entrypoint for stripping emoji from markdown files."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from importlib import metadata
from pathlib import Path
from typing import List, Optional, TextIO

from md_emoji_stripper.config import DEFAULT_CONFIG, LOG_LEVELS, RunConfig
from md_emoji_stripper.errors import FileProcessingError, InvalidRunError
from md_emoji_stripper.postprocessing.emoji_table import EMOJI_TABLE_SOURCE, EMOJI_TABLE_VERSION
from md_emoji_stripper.processing.file_processing import FAILED, FileOutcome, process_target
from md_emoji_stripper.services.file_resolver import resolve

LOGGER = logging.getLogger("md_emoji_stripper")

EXIT_OK = 0
EXIT_FILE_ERRORS = 1
EXIT_INVALID_RUN = 2


@dataclass
class RunSummary:
    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status != FAILED)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == FAILED)

    @property
    def removed_spans(self) -> int:
        return sum(outcome.removed_spans for outcome in self.outcomes)

    @property
    def exit_code(self) -> int:
        return EXIT_FILE_ERRORS if self.failed else EXIT_OK


def _version_string() -> str:
    try:
        package_version = metadata.version("md-emoji-stripper")
    except metadata.PackageNotFoundError:
        package_version = "unknown"
    return f"%(prog)s {package_version} (emoji table {EMOJI_TABLE_VERSION}: {EMOJI_TABLE_SOURCE})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md-emoji-stripper",
        description=(
            "Remove emojis from markdown files. Can process single files or "
            "recursively scan directories."
        ),
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        required=True,
        metavar="PATH",
        help="Path to a markdown file or directory containing .md files",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Recursively process all .md files in the directory (replaces files in-place)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path (only works with single file mode, ignored with --recursive)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed processing information")
    parser.add_argument("-d", "--dry-run", action="store_true", help="Preview changes without modifying files")
    parser.add_argument(
        "-b",
        "--backup",
        action="store_true",
        help="Create backup files (.bak) before modifying (only with --recursive)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_CONFIG.log_level,
        choices=list(LOG_LEVELS),
    )
    parser.add_argument("--version", action="version", version=_version_string())
    return parser


def _warn_ignored_options(config: RunConfig) -> None:
    if config.recursive and config.output is not None:
        LOGGER.warning("--output is ignored with --recursive; files are replaced in-place")
    if config.backup and not config.recursive:
        output = config.output
        if output is None or Path(output) != Path(config.path):
            LOGGER.warning("--backup only applies to in-place writes; no backup will be created")


def run_pipeline(config: RunConfig, *, stdout: Optional[TextIO] = None) -> RunSummary:
    """Process every file selected by ``config``.

    Run-level problems (missing path, non-markdown file, directory without
    --recursive) raise ``InvalidRunError`` before any file is read. Errors
    scoped to a single file are logged and recorded, and the batch continues.
    """

    _warn_ignored_options(config)
    targets = resolve(
        config.path,
        config.recursive,
        output=config.output,
        config=config.settings,
    )

    directory_run = Path(config.path).is_dir()
    if directory_run and (config.verbose or config.dry_run):
        LOGGER.info("Scanning directory: %s", config.path)

    summary = RunSummary()
    for target in targets:
        try:
            outcome = process_target(target, config, stdout=stdout)
        except FileProcessingError as exc:
            LOGGER.error("Error processing %s: %s", target.path, exc)
            outcome = FileOutcome(target=target, status=FAILED, error=exc)
        summary.outcomes.append(outcome)

    if directory_run:
        LOGGER.info("Completed: %d files processed, %d errors", summary.processed, summary.failed)
    return summary


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")
    if args.verbose or args.dry_run:
        # reports requested on the command line are logged at INFO
        LOGGER.setLevel(min(getattr(logging, args.log_level), logging.INFO))

    config = RunConfig(
        path=args.path,
        recursive=args.recursive,
        output=args.output,
        verbose=args.verbose,
        dry_run=args.dry_run,
        backup=args.backup,
        settings=DEFAULT_CONFIG,
    )
    try:
        summary = run_pipeline(config)
    except InvalidRunError as exc:
        LOGGER.error("%s", exc)
        return EXIT_INVALID_RUN

    if summary.failed:
        LOGGER.error("%d of %d files failed", summary.failed, len(summary.outcomes))
    return summary.exit_code


if __name__ == "__main__":
    sys.exit(main())
