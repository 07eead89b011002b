from divi_blocks.common.models.base import InlineFormat, Span

__all__ = ["InlineFormat", "Span"]
