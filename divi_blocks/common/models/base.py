"""Shared base models for blocks."""

from typing import Literal

from pydantic import BaseModel

InlineFormat = Literal["bold", "italic", "underline", "code", "none"]


class Span(BaseModel):
    """A run of inline text with consistent styling."""

    text: str
    formats: tuple[InlineFormat | str, ...] = ("none",)
    href: str | None = None  # set when the run sits inside a link

    model_config = {"frozen": True}

    def same_style(self, other: "Span") -> bool:
        return tuple(self.formats) == tuple(other.formats) and self.href == other.href
