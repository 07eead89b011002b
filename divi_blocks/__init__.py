"""Main entrypoint. Exposes the public API."""

from divi_blocks.processor.core import convert_page
from divi_blocks.processor.models import ParsedPage, NodeType
from divi_blocks.common.utils.keys import KeyGenerator, SequentialKeyGenerator

__all__ = ["convert_page", "ParsedPage", "NodeType", "KeyGenerator", "SequentialKeyGenerator"]
