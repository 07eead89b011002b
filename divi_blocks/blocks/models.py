"""Raw block models for shortcode extraction."""

from enum import Enum

from pydantic import BaseModel


# The six shortcode types we understand. Anything else in brackets is inert.
class RawBlockType(Enum):
    SECTION = "section"
    COLUMN = "column"
    ROW = "row"
    TEXT = "text"
    IMAGE = "image"
    BUTTON = "button"


class RawBlock(BaseModel):
    """One match of a block pattern. Transient: consumed right after extraction."""

    type: RawBlockType
    content: str  # inner content (for images the src value, for buttons the attributes)
    offset: int  # start of the whole match in the scanned string

    model_config = {"frozen": True}
