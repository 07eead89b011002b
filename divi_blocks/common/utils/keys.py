"""Node key generation.

Keys only give the downstream renderer a stable identity per node; nothing in
the conversion compares or orders by them.
"""

import itertools
import uuid
from typing import Protocol, runtime_checkable

from divi_blocks.common.utils.config import get_config


@runtime_checkable
class KeyGenerator(Protocol):
    def generate(self) -> str: ...


class RandomKeyGenerator:
    """Random hex keys, unique enough to avoid collisions within a document."""

    def __init__(self, length: int | None = None):
        self.length = length or get_config().key_length

    def generate(self) -> str:
        return uuid.uuid4().hex[: self.length]


class SequentialKeyGenerator:
    """Deterministic keys (`k1`, `k2`, ...) for tests and reproducible exports."""

    def __init__(self, prefix: str = "k", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def generate(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


__all__ = ["KeyGenerator", "RandomKeyGenerator", "SequentialKeyGenerator"]
