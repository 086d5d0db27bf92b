"""Static emoji classification table and sequence matcher.

Code points fall into four groups:

* pictographic ranges are emoji wherever they appear;
* text-default symbols (``©``, ``™``, arrows, small squares, ...) are emoji
  only when followed by VS16, even inside a ZWJ sequence, so plain
  typography and maths survive;
* keycap bases (``0-9 # *``) are emoji only as a full keycap sequence;
* regional indicators pair into flags.

After a base, the match is extended greedily over variation selectors,
skin tone modifiers, combining enclosing marks, terminated tag sequences and
ZWJ links to a further base. Bare modifiers are never emoji on their own.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Optional, Sequence, Tuple

EMOJI_TABLE_VERSION = "2024.1"
EMOJI_TABLE_SOURCE = (
    "Unicode 15.1 emoji-data.txt (Emoji_Presentation and Extended_Pictographic), "
    "reduced to block-level ranges; dingbats and misc symbols are kept whole"
)

Interval = Tuple[int, int]

PICTOGRAPHIC_RANGES: Tuple[Interval, ...] = (
    (0x231A, 0x231B),  # watch, hourglass
    (0x23E9, 0x23EC),  # fast-forward / rewind
    (0x23F0, 0x23F0),  # alarm clock
    (0x23F3, 0x23F3),  # hourglass flowing
    (0x25FD, 0x25FE),  # medium-small squares
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
    (0x2B1B, 0x2B1C),  # large squares
    (0x2B50, 0x2B50),  # star
    (0x2B55, 0x2B55),  # heavy circle
    (0x1F004, 0x1F004),  # mahjong red dragon
    (0x1F0CF, 0x1F0CF),  # joker
    (0x1F18E, 0x1F18E),  # AB button
    (0x1F191, 0x1F19A),  # squared CL .. VS
    (0x1F201, 0x1F202),
    (0x1F21A, 0x1F21A),
    (0x1F22F, 0x1F22F),
    (0x1F232, 0x1F23A),
    (0x1F250, 0x1F251),
    (0x1F300, 0x1F3FA),  # symbols & pictographs, up to skin tones
    (0x1F400, 0x1F64F),  # symbols & pictographs (cont.), emoticons
    (0x1F680, 0x1F6FF),  # transport & map
    (0x1F7E0, 0x1F7EB),  # coloured circles and squares
    (0x1F7F0, 0x1F7F0),
    (0x1F90C, 0x1F9FF),  # supplemental symbols & pictographs
    (0x1FA70, 0x1FAFF),  # symbols & pictographs extended-A
)

TEXT_DEFAULT_RANGES: Tuple[Interval, ...] = (
    (0x00A9, 0x00A9),  # copyright
    (0x00AE, 0x00AE),  # registered
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),  # trade mark
    (0x2139, 0x2139),
    (0x2194, 0x2199),  # arrows
    (0x21A9, 0x21AA),
    (0x2328, 0x2328),  # keyboard
    (0x23CF, 0x23CF),
    (0x23ED, 0x23EF),
    (0x23F1, 0x23F2),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FC),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F170, 0x1F171),
    (0x1F17E, 0x1F17F),
)

REGIONAL_INDICATORS: Interval = (0x1F1E6, 0x1F1FF)
SKIN_TONE_MODIFIERS: Interval = (0x1F3FB, 0x1F3FF)
TAG_CHARACTERS: Interval = (0xE0020, 0xE007E)
CANCEL_TAG = 0xE007F
ZWJ = 0x200D
VS15 = 0xFE0E
VS16 = 0xFE0F
KEYCAP = 0x20E3
ENCLOSING_MARKS = frozenset((0x20DD, 0x20DE, 0x20DF, 0x20E0, 0x20E2, 0x20E3, 0x20E4))
KEYCAP_BASES = frozenset("0123456789#*")

_PICTOGRAPHIC_STARTS = [start for start, _ in PICTOGRAPHIC_RANGES]
_TEXT_DEFAULT_STARTS = [start for start, _ in TEXT_DEFAULT_RANGES]


def _in_table(cp: int, table: Sequence[Interval], starts: Sequence[int]) -> bool:
    idx = bisect_right(starts, cp) - 1
    return idx >= 0 and cp <= table[idx][1]


def _in_range(cp: int, interval: Interval) -> bool:
    return interval[0] <= cp <= interval[1]


def is_pictographic(cp: int) -> bool:
    return _in_table(cp, PICTOGRAPHIC_RANGES, _PICTOGRAPHIC_STARTS)


def is_text_default(cp: int) -> bool:
    return _in_table(cp, TEXT_DEFAULT_RANGES, _TEXT_DEFAULT_STARTS)


def is_regional_indicator(cp: int) -> bool:
    return _in_range(cp, REGIONAL_INDICATORS)


def is_modifier(cp: int) -> bool:
    """True for code points that only ever attach to a preceding base."""

    return (
        cp in (VS15, VS16, ZWJ, CANCEL_TAG)
        or cp in ENCLOSING_MARKS
        or _in_range(cp, SKIN_TONE_MODIFIERS)
        or _in_range(cp, TAG_CHARACTERS)
    )


def _cp_at(text: str, index: int) -> Optional[int]:
    if 0 <= index < len(text):
        return ord(text[index])
    return None


def _match_base(text: str, offset: int) -> int:
    """Return the length of the emoji base at ``offset`` or 0."""

    cp = ord(text[offset])
    if is_regional_indicator(cp):
        nxt = _cp_at(text, offset + 1)
        return 2 if nxt is not None and is_regional_indicator(nxt) else 1

    if text[offset] in KEYCAP_BASES:
        end = offset + 1
        if _cp_at(text, end) == VS16:
            end += 1
        return end + 1 - offset if _cp_at(text, end) == KEYCAP else 0

    if is_pictographic(cp):
        return 1

    if is_text_default(cp):
        return 2 if _cp_at(text, offset + 1) == VS16 else 0

    return 0


def _tag_sequence_length(text: str, offset: int) -> int:
    end = offset
    while True:
        cp = _cp_at(text, end)
        if cp is None:
            return 0
        if cp == CANCEL_TAG:
            return end + 1 - offset if end > offset else 0
        if not _in_range(cp, TAG_CHARACTERS):
            return 0
        end += 1


def _extend(text: str, end: int) -> int:
    while True:
        cp = _cp_at(text, end)
        if cp is None:
            return end
        if cp in (VS15, VS16) or cp in ENCLOSING_MARKS or _in_range(cp, SKIN_TONE_MODIFIERS):
            end += 1
            continue
        tags = _tag_sequence_length(text, end)
        if tags:
            end += tags
            continue
        return end


def classify(text: str, offset: int) -> Optional[int]:
    """Return the length of the emoji sequence starting at ``offset``.

    The result counts scalar values (``str`` indices). ``None`` means the
    character at ``offset`` does not start an emoji; this includes any bare
    modifier, variation selector, ZWJ or tag character.
    """

    if offset < 0 or offset >= len(text):
        return None

    base = _match_base(text, offset)
    if not base:
        return None

    end = _extend(text, offset + base)
    while _cp_at(text, end) == ZWJ and end + 1 < len(text):
        joined = _match_base(text, end + 1)
        if not joined:
            break
        end = _extend(text, end + 1 + joined)

    return end - offset
