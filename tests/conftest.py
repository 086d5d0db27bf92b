from __future__ import annotations

from pathlib import Path

import pytest

from md_emoji_stripper.config import RunConfig, StripperConfig

from samples import CLEAN_MARKDOWN, SAMPLE_MARKDOWN


@pytest.fixture
def settings() -> StripperConfig:
    return StripperConfig()


@pytest.fixture
def make_config(settings):
    def _make(path: Path, **overrides) -> RunConfig:
        return RunConfig(path=path, settings=settings, **overrides)

    return _make


@pytest.fixture
def markdown_tree(tmp_path: Path) -> Path:
    """docs/ with markdown at two levels, a text file and an ignored .git dir."""

    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / ".git").mkdir()
    (root / "a.md").write_text("Hello 👋 World! 🎉🎉\n", encoding="utf-8")
    (root / "guide" / "setup.md").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    (root / "guide" / "clean.md").write_text(CLEAN_MARKDOWN, encoding="utf-8")
    (root / "b.txt").write_text("Not markdown 🎉\n", encoding="utf-8")
    (root / ".git" / "HEAD.md").write_text("ref 🎉\n", encoding="utf-8")
    return root
