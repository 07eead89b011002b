"""Internally exposed API for isolating raw shortcode blocks."""

from divi_blocks.blocks.core import (
    count_inert_tags,
    extract_blocks_of_type,
    find_attribute,
)
from divi_blocks.blocks.models import RawBlock, RawBlockType

__all__ = [
    "extract_blocks_of_type",
    "find_attribute",
    "count_inert_tags",
    "RawBlock",
    "RawBlockType",
]
