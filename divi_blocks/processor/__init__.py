"""Turn raw shortcode blocks into page builder nodes. Main logic."""

from divi_blocks.processor.core import PageConverter, convert_page, merge_by_offset
from divi_blocks.processor.models import (
    ButtonBlock,
    ColumnGroup,
    ColumnsBlock,
    ConversionStats,
    ImageBlock,
    NodeType,
    ParsedPage,
    RowGroup,
    TextBlock,
)
from divi_blocks.processor.text import parse_inline_html
from divi_blocks.common.models import Span

__all__ = [
    "PageConverter",
    "convert_page",
    "merge_by_offset",
    "parse_inline_html",
    "ParsedPage",
    "ConversionStats",
    "NodeType",
    "TextBlock",
    "ImageBlock",
    "ButtonBlock",
    "RowGroup",
    "ColumnGroup",
    "ColumnsBlock",
    "Span",
]
