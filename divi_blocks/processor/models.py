"""Page builder node models.

Nodes serialize under the field names the downstream block-array document
expects (`_key`, `_type`, `_sanityAsset`, `rowItems`, ...). Build them with
the Python field names; dump with `by_alias=True`.
"""

import json as jsonlib
from collections.abc import Iterator
from enum import Enum
from functools import cached_property
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from divi_blocks.common.models import Span
from divi_blocks.common.utils.config import get_config
from divi_blocks.common.utils.logger import get_logger
from divi_blocks.common.utils.statistics import Statistics, statistics

logger = get_logger(__name__)


class NodeType(Enum):
    TEXT = "textBlock"
    IMAGE = "image"
    BUTTON = "button"
    ROW = "row"
    COLUMN = "column"
    COLUMNS = "columns"


class NodeBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    key: str = Field(alias="_key")


class TextBlock(NodeBase):
    type: Literal[NodeType.TEXT] = Field(default=NodeType.TEXT, alias="_type")
    text: list[Span]  # never empty

    @property
    def plain_text(self) -> str:
        return "".join(span.text for span in self.text)


class ImageBlock(NodeBase):
    type: Literal[NodeType.IMAGE] = Field(default=NodeType.IMAGE, alias="_type")
    asset_reference: str = Field(alias="_sanityAsset")


class ButtonBlock(NodeBase):
    type: Literal[NodeType.BUTTON] = Field(default=NodeType.BUTTON, alias="_type")
    url: str | None = Field(default=None, alias="buttonUrl")
    label: str | None = Field(default=None, alias="buttonText")


class RowGroup(NodeBase):
    """Two or more nodes from one row. Single-item rows are unwrapped instead."""

    type: Literal[NodeType.ROW] = Field(default=NodeType.ROW, alias="_type")
    items: list["Node"] = Field(alias="rowItems")


Node = Annotated[Union[TextBlock, ImageBlock, ButtonBlock, RowGroup], Field(discriminator="type")]

RowGroup.model_rebuild()


class ColumnGroup(NodeBase):
    type: Literal[NodeType.COLUMN] = Field(default=NodeType.COLUMN, alias="_type")
    items: list[Node] = Field(alias="columnItems")


class ColumnsBlock(NodeBase):
    """All non-empty columns of a multi-column section."""

    type: Literal[NodeType.COLUMNS] = Field(default=NodeType.COLUMNS, alias="_type")
    columns: list[ColumnGroup]


PageNode = Annotated[
    Union[TextBlock, ImageBlock, ButtonBlock, RowGroup, ColumnsBlock],
    Field(discriminator="type"),
]


class ConversionStats(BaseModel):
    """Side-channel diagnostics; never influences the node tree."""

    sections_found: int = 0
    sections_retained: int = 0
    columns_found: int = 0
    columns_retained: int = 0
    blocks_emitted: int = 0
    inert_tags: int = 0  # unknown [et_pb_*] opening tags
    items_per_section: Statistics = Field(default_factory=lambda: statistics([]))


def dump_node(node: BaseModel) -> dict[str, Any]:
    return node.model_dump(mode="json", by_alias=True, exclude_none=True)


class ParsedPage(BaseModel):
    """Top-level nodes converted from one page. Exposes a list-like interface alongside metadata.

    A: Iterate directly over nodes

    B: access the serialized node array via .json / .ndjson_items

    C: access a readable rendering via .markdown
    """

    title: str
    blocks: list[PageNode]
    stats: ConversionStats = Field(default_factory=ConversionStats)

    def __getitem__(self, index: int) -> PageNode:
        return self.blocks[index]

    def __iter__(self) -> Iterator[PageNode]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def to_list(self) -> list[dict[str, Any]]:
        """Nodes as plain dicts, ready to embed in a block-array field."""
        return [dump_node(block) for block in self.blocks]

    @cached_property
    def json(self) -> str:  # pyright: ignore[reportIncompatibleMethodOverride]
        return jsonlib.dumps(self.to_list(), ensure_ascii=False)

    @cached_property
    def ndjson_items(self) -> str:
        return "".join(jsonlib.dumps(item, ensure_ascii=False) + "\n" for item in self.to_list())

    def _format_spans(self, spans: list[Span]) -> str:
        """Format spans into markdown text."""
        result = ""
        for span in spans:
            text = span.text
            # keep surrounding whitespace outside the markers
            stripped = text.strip()
            if not stripped:
                result += text
                continue
            lead = text[: len(text) - len(text.lstrip())]
            trail = text[len(text.rstrip()) :]

            for fmt in span.formats:
                match fmt:
                    case "bold":
                        stripped = f"**{stripped}**"
                    case "italic":
                        stripped = f"*{stripped}*"
                    case "underline":
                        stripped = f"<u>{stripped}</u>"
                    case "code":
                        stripped = f"`{stripped}`"
                    case "none":
                        pass
                    case _:
                        logger.warning(f"Unknown format: {fmt}")

            if span.href:
                stripped = f"[{stripped}]({span.href})"
            result += f"{lead}{stripped}{trail}"

        return result

    def _render(self, node: PageNode | ColumnGroup, lines: list[str]) -> None:
        match node:
            case TextBlock():
                lines.append(f"{self._format_spans(node.text).strip()}\n\n")
            case ImageBlock():
                lines.append(f"![Image]({node.asset_reference})\n\n")
            case ButtonBlock():
                lines.append(f"[{node.label or 'Button'}]({node.url or ''})\n\n")
            case RowGroup() | ColumnGroup():
                for item in node.items:
                    self._render(item, lines)
            case ColumnsBlock():
                separator = get_config().markdown_column_separator
                for i, column in enumerate(node.columns):
                    if i > 0:
                        lines.append(f"{separator}\n\n")
                    self._render(column, lines)

    @cached_property
    def markdown(self) -> str:
        lines: list[str] = []
        for block in self.blocks:
            self._render(block, lines)
        return "".join(lines)
