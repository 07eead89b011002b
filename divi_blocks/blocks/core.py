"""Pattern-based shortcode block extraction.

Each block type is isolated by its own regular expression instead of a real
tokenizer. Matches are non-overlapping and non-recursive: a scan finds the
first complete open...close span, then resumes after it. Nesting is never
validated and unterminated blocks simply produce no match.
"""

import re
from typing import Literal, overload

from divi_blocks.blocks.models import RawBlock, RawBlockType

PATTERNS: dict[RawBlockType, re.Pattern[str]] = {
    RawBlockType.SECTION: re.compile(r"\[et_pb_section.*?\](.*?)\[/et_pb_section\]", re.DOTALL),
    RawBlockType.COLUMN: re.compile(r"\[et_pb_column.*?\](.*?)\[/et_pb_column\]", re.DOTALL),
    RawBlockType.ROW: re.compile(r"\[et_pb_row.*?\](.*?)\[/et_pb_row\]", re.DOTALL),
    RawBlockType.TEXT: re.compile(r"\[et_pb_text.*?\](.*?)\[/et_pb_text\]", re.DOTALL),
    RawBlockType.IMAGE: re.compile(r'\[et_pb_image src="(.*?)"', re.DOTALL),
    RawBlockType.BUTTON: re.compile(r"\[et_pb_button (.*?)\]", re.DOTALL),
}

KNOWN_TAGS = frozenset(f"et_pb_{block_type.value}" for block_type in RawBlockType)

# these open tags are matched by prefix, so "[et_pb_row_inner" still opens a row
PREFIX_MATCHED_TAGS = tuple(
    f"et_pb_{block_type.value}"
    for block_type in (RawBlockType.SECTION, RawBlockType.COLUMN, RawBlockType.ROW, RawBlockType.TEXT)
)

_OPENING_TAG = re.compile(r"\[(et_pb_\w+)")


def _scan(source: str, pattern: re.Pattern[str]):
    pos = 0
    while pos <= len(source):
        m = pattern.search(source, pos)
        if m is None:
            return
        yield m
        # a zero-width match must not stall the scan
        pos = m.end() if m.end() > m.start() else m.start() + 1


@overload
def extract_blocks_of_type(
    source: str, block_type: RawBlockType, with_offsets: Literal[False] = False
) -> list[str]: ...


@overload
def extract_blocks_of_type(
    source: str, block_type: RawBlockType, with_offsets: Literal[True]
) -> list[RawBlock]: ...


def extract_blocks_of_type(
    source: str, block_type: RawBlockType, with_offsets: bool = False
) -> list[str] | list[RawBlock]:
    """Return every non-overlapping match of `block_type` in `source`, left to right.

    With `with_offsets`, each match is a `RawBlock` carrying its offset in
    `source`; otherwise only the inner contents are returned.
    """
    pattern = PATTERNS[block_type]
    if not source:
        return []

    if not with_offsets:
        return [m.group(1) for m in _scan(source, pattern)]

    return [
        RawBlock(type=block_type, content=m.group(1), offset=m.start())
        for m in _scan(source, pattern)
    ]


def find_attribute(source: str, name: str) -> str | None:
    """Value of the first `name="..."` attribute in `source`, or None."""
    m = re.search(rf'{re.escape(name)}="(.*?)"', source, re.DOTALL)
    return m.group(1) if m else None


def _is_known_tag(name: str) -> bool:
    return name in KNOWN_TAGS or name.startswith(PREFIX_MATCHED_TAGS)


def count_inert_tags(source: str) -> int:
    """Count opening `[et_pb_*` tags that none of the block patterns is meant for."""
    if not source:
        return 0
    return sum(1 for m in _OPENING_TAG.finditer(source) if not _is_known_tag(m.group(1)))
