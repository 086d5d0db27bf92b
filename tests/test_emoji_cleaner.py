"""Tests for emoji stripping."""

from __future__ import annotations

import pytest

from md_emoji_stripper.postprocessing.emoji_cleaner import (
    CodepointSpan,
    find_spans,
    has_emoji,
    strip,
    strip_emoji,
)
from md_emoji_stripper.postprocessing.emoji_table import classify

from samples import CLEAN_MARKDOWN, SAMPLE_MARKDOWN

TRICKY_INPUTS = [
    "",
    "plain ascii",
    "Hello 👋 World! 🎉🎉",
    SAMPLE_MARKDOWN,
    CLEAN_MARKDOWN,
    "\U0001F3FB bare tone then \U0001F600",
    "a\u200d\U0001F600\u200db",
    "©\U0001F600\ufe0f and ©\ufe0f",
    "1\U0001F600\u20e3 keycap-ish",
    "\U0001F1FA\U0001F1F8\U0001F1E9 three indicators",
    "\U0001F3F4\U000E0067\U000E0062 unterminated tags",
    "line one 🚀\r\nline two\r\n",
]


def test_strip_emoji_removes_characters() -> None:
    assert strip_emoji("Hello 😊") == "Hello "


def test_strip_concrete_scenario() -> None:
    result = strip("Hello 👋 World! 🎉🎉")
    assert result.text == "Hello  World! "
    assert result.removed_spans == 3
    assert result.removed_chars == 3
    assert result.changed


def test_strip_empty_input() -> None:
    result = strip("")
    assert result.text == ""
    assert result.removed_spans == 0
    assert result.removed_chars == 0
    assert not result.changed


def test_identity_without_emoji() -> None:
    for text in (CLEAN_MARKDOWN, "| a | b |\n|---|---|\n", "∀x ∈ ℕ: x² ≥ 0", "Ünïcödé 한국어 🄰"):
        result = strip(text)
        assert result.text == text
        assert result.removed_spans == 0


def test_markdown_syntax_survives() -> None:
    cleaned = strip_emoji(SAMPLE_MARKDOWN)
    assert cleaned == (
        "# Release notes \n"
        "\n"
        "- Fixed the parser \n"
        "- Café, naïve, 日本語 and ∑ x² stay as-is\n"
        "\n"
        "```python\n"
        "assert a → b  # \n"
        "```\n"
    )


def test_skin_tone_removed_with_base() -> None:
    result = strip("Thanks \U0001F44D\U0001F3FF!")
    assert result.text == "Thanks !"
    assert result.removed_spans == 1
    assert result.removed_chars == 2


def test_zwj_sequence_removed_as_one_span() -> None:
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
    result = strip(f"Team {family}.")
    assert result.text == "Team ."
    assert result.removed_spans == 1
    assert result.removed_chars == 5


def test_bare_modifiers_are_left_alone() -> None:
    text = "x\U0001F3FBy\u200dz\ufe0f"
    assert strip(text).text == text


def test_text_symbol_after_stray_zwj_survives() -> None:
    result = strip("\U0001F600\u200d\u00a9 2024")
    assert result.text == "\u200d\u00a9 2024"
    assert result.removed_chars == 1


def test_crlf_line_endings_preserved() -> None:
    assert strip_emoji("a 🚀\r\nb\r\n") == "a \r\nb\r\n"


@pytest.mark.parametrize("text", TRICKY_INPUTS)
def test_idempotent(text: str) -> None:
    once = strip_emoji(text)
    assert strip_emoji(once) == once


@pytest.mark.parametrize("text", TRICKY_INPUTS)
def test_non_emoji_scalars_preserved(text: str) -> None:
    kept = []
    offset = 0
    while offset < len(text):
        length = classify(text, offset)
        if length:
            offset += length
        else:
            kept.append(text[offset])
            offset += 1
    assert strip_emoji(text) == "".join(kept)
    strip_emoji(text).encode("utf-8")


def test_find_spans_reports_offsets_and_bytes() -> None:
    spans = list(find_spans("ab\U0001F1FA\U0001F1F8c\U0001F600"))
    assert spans == [
        CodepointSpan(start=2, length=2, byte_length=8),
        CodepointSpan(start=5, length=1, byte_length=4),
    ]


def test_has_emoji() -> None:
    assert has_emoji("ok ✅")
    assert not has_emoji("ok © →")
