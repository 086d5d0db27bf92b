"""Remove emoji sequences from markdown text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from md_emoji_stripper.postprocessing.emoji_table import classify


@dataclass(frozen=True)
class CodepointSpan:
    """A run of scalar values recognised as one emoji."""

    start: int
    length: int
    byte_length: int


@dataclass(frozen=True)
class StripResult:
    text: str
    removed_spans: int
    removed_chars: int

    @property
    def changed(self) -> bool:
        return self.removed_spans > 0


def find_spans(text: str) -> Iterator[CodepointSpan]:
    """Yield emoji spans left to right; spans never overlap."""

    offset = 0
    while offset < len(text):
        length = classify(text, offset)
        if length:
            chunk = text[offset : offset + length]
            yield CodepointSpan(start=offset, length=length, byte_length=len(chunk.encode("utf-8")))
            offset += length
        else:
            offset += 1


def strip(text: str) -> StripResult:
    """Return ``text`` without emoji plus counts of what was removed.

    Everything outside a matched span is copied through untouched, so
    markdown syntax, accented letters, CJK and maths symbols are preserved.
    """

    if not text:
        return StripResult(text=text, removed_spans=0, removed_chars=0)

    pieces: List[str] = []
    cursor = 0
    spans = 0
    removed = 0
    for span in find_spans(text):
        pieces.append(text[cursor : span.start])
        cursor = span.start + span.length
        spans += 1
        removed += span.length

    if not spans:
        return StripResult(text=text, removed_spans=0, removed_chars=0)

    pieces.append(text[cursor:])
    return StripResult(text="".join(pieces), removed_spans=spans, removed_chars=removed)


def strip_emoji(text: str) -> str:
    return strip(text).text


def has_emoji(text: str) -> bool:
    return next(find_spans(text), None) is not None
