"""Core: shortcode markup -> ordered tree of page builder nodes.

Sections are the largest unit and map to page blocks. A section with one
column is spliced flat into the page; several columns become one `columns`
block. Inside a column, rows, images, texts and buttons are extracted by
separate passes and merged back into document order by offset.
"""

from collections.abc import Iterable

from divi_blocks.blocks.core import count_inert_tags, extract_blocks_of_type, find_attribute
from divi_blocks.blocks.models import RawBlockType
from divi_blocks.common.utils.config import get_config
from divi_blocks.common.utils.keys import KeyGenerator, RandomKeyGenerator
from divi_blocks.common.utils.logger import get_logger
from divi_blocks.common.utils.statistics import statistics
from divi_blocks.processor.models import (
    ButtonBlock,
    ColumnGroup,
    ColumnsBlock,
    ConversionStats,
    ImageBlock,
    Node,
    PageNode,
    ParsedPage,
    RowGroup,
    TextBlock,
)
from divi_blocks.processor.text import TextParser, parse_inline_html

logger = get_logger(__name__)

def merge_by_offset(*groups: Iterable[tuple[int, Node | None]]) -> list[Node]:
    """Merge offset-tagged results of independent passes into document order, dropping empties."""
    merged = sorted((pair for group in groups for pair in group), key=lambda pair: pair[0])
    return [node for _, node in merged if node is not None]


class PageConverter:
    """Converts the markup of one page. Holds no state across pages besides its collaborators."""

    def __init__(
        self,
        text_parser: TextParser | None = None,
        key_generator: KeyGenerator | None = None,
    ):
        self.text_parser = text_parser or parse_inline_html
        self.keys = key_generator or RandomKeyGenerator()

    def _key(self) -> str:
        return self.keys.generate()

    # leaf handlers

    def handle_image(self, src: str) -> ImageBlock:
        cfg = get_config()
        if src.startswith("/"):
            src = cfg.root_relative_scheme + src[1:]
        return ImageBlock(key=self._key(), asset_reference=f"{cfg.asset_prefix}{src}")

    def handle_button(self, attributes: str) -> ButtonBlock:
        return ButtonBlock(
            key=self._key(),
            url=find_attribute(attributes, "button_url"),
            label=find_attribute(attributes, "button_text"),
        )

    def handle_text(self, inner: str) -> TextBlock | None:
        spans = self.text_parser(inner)
        if not spans:
            return None
        return TextBlock(key=self._key(), text=list(spans))

    # containers

    def handle_row(self, inner: str) -> Node | None:
        items = self.build_children(inner)
        if not items:
            return None
        if len(items) == 1:
            return items[0]
        return RowGroup(key=self._key(), items=items)

    def build_children(self, span: str) -> list[Node]:
        """Convert every known child block in `span` into nodes, in document order."""
        rows = extract_blocks_of_type(span, RawBlockType.ROW, True)
        images = extract_blocks_of_type(span, RawBlockType.IMAGE, True)
        texts = extract_blocks_of_type(span, RawBlockType.TEXT, True)
        buttons = extract_blocks_of_type(span, RawBlockType.BUTTON, True)

        return merge_by_offset(
            [(m.offset, self.handle_row(m.content)) for m in rows],
            [(m.offset, self.handle_image(m.content)) for m in images],
            [(m.offset, self.handle_text(m.content)) for m in texts],
            [(m.offset, self.handle_button(m.content)) for m in buttons],
        )

    def _section_nodes(self, section: str, stats: ConversionStats) -> list[PageNode]:
        columns = extract_blocks_of_type(section, RawBlockType.COLUMN)
        stats.columns_found += len(columns)

        # one column: its items become standalone page blocks
        if len(columns) == 1:
            items = self.build_children(columns[0])
            if items:
                stats.columns_retained += 1
            return list(items)

        groups: list[ColumnGroup] = []
        for column in columns:
            column_items = self.build_children(column)
            if not column_items:
                logger.debug("no valid items found in column %.60r", column)
                continue
            groups.append(ColumnGroup(key=self._key(), items=column_items))

        stats.columns_retained += len(groups)
        if not groups:
            return []
        return [ColumnsBlock(key=self._key(), columns=groups)]

    def assemble(self, source: str, title: str | None = None) -> ParsedPage:
        """Convert a whole page: sections in source order, columns per section."""
        title = title or get_config().default_title
        stats = ConversionStats(inert_tags=count_inert_tags(source))
        blocks: list[PageNode] = []
        per_section: list[int] = []

        sections = extract_blocks_of_type(source, RawBlockType.SECTION)
        stats.sections_found = len(sections)
        logger.info(f"Found {len(sections)} sections in page {title}")

        for section in sections:
            nodes = self._section_nodes(section, stats)
            per_section.append(len(nodes))
            blocks.extend(nodes)

        stats.sections_retained = sum(1 for count in per_section if count)
        stats.blocks_emitted = len(blocks)
        stats.items_per_section = statistics(per_section)

        logger.info(
            f"Retained {stats.sections_retained} of {stats.sections_found} sections "
            f"({stats.blocks_emitted} top-level blocks) in page {title}"
        )
        if stats.inert_tags:
            logger.warning(f"{stats.inert_tags} unrecognized et_pb tags ignored in page {title}")

        return ParsedPage(title=title, blocks=blocks, stats=stats)


def convert_page(
    markup: str | None,
    title: str | None = None,
    *,
    text_parser: TextParser | None = None,
    key_generator: KeyGenerator | None = None,
) -> ParsedPage:
    """Convert one page of builder markup into page builder nodes.

    Can be called as:
    - convert_page(markup)
    - convert_page(markup, "About us")
    - convert_page(markup, text_parser=my_parser, key_generator=SequentialKeyGenerator())
    """
    converter = PageConverter(text_parser=text_parser, key_generator=key_generator)
    return converter.assemble(markup or "", title)
