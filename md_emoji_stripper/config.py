"""Global configuration defaults for the markdown emoji stripper."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

# Load environment variables from default locations and package-level .env
load_dotenv()
load_dotenv(Path(__file__).resolve().parent / ".env")

LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


def _split_env_list(raw: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class StripperConfig:
    """Tool-wide defaults, overridable through the environment."""

    # Compared case-insensitively against Path.suffix
    markdown_extensions: Tuple[str, ...] = (".md",)
    # Directory names never descended into during recursive traversal
    excluded_dirs: Tuple[str, ...] = (".git", "node_modules")
    backup_suffix: str = ".bak"
    encoding: str = "utf-8"
    log_level: str = "INFO"
    log_level_env_var: str = "MD_EMOJI_STRIPPER_LOG_LEVEL"
    extensions_env_var: str = "MD_EMOJI_STRIPPER_EXTENSIONS"
    excluded_dirs_env_var: str = "MD_EMOJI_STRIPPER_EXCLUDE_DIRS"

    def is_markdown(self, path: Path) -> bool:
        suffix = path.suffix.lower()
        return any(suffix == ext.lower() for ext in self.markdown_extensions)

    def backup_path_for(self, path: Path) -> Path:
        return path.with_name(f"{path.name}{self.backup_suffix}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StripperConfig":
        env = os.environ if environ is None else environ
        config = cls()
        overrides = {}

        level = (env.get(config.log_level_env_var) or "").strip().upper()
        # unknown names fall back to the default rather than break the CLI
        if level in LOG_LEVELS:
            overrides["log_level"] = level

        extensions = env.get(config.extensions_env_var)
        if extensions:
            overrides["markdown_extensions"] = tuple(
                ext if ext.startswith(".") else f".{ext}" for ext in _split_env_list(extensions)
            )

        excluded = env.get(config.excluded_dirs_env_var)
        if excluded is not None:
            overrides["excluded_dirs"] = _split_env_list(excluded)

        return replace(config, **overrides) if overrides else config


@dataclass(frozen=True)
class RunConfig:
    """Validated options for a single invocation; read-only for the run."""

    path: Path
    recursive: bool = False
    output: Optional[Path] = None
    verbose: bool = False
    dry_run: bool = False
    backup: bool = False
    settings: StripperConfig = field(default_factory=lambda: DEFAULT_CONFIG)


DEFAULT_CONFIG = StripperConfig.from_env()
