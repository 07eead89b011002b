import pytest

from divi_blocks.common.utils.keys import SequentialKeyGenerator
from divi_blocks.processor.core import PageConverter


@pytest.fixture()
def keys() -> SequentialKeyGenerator:
    return SequentialKeyGenerator()


@pytest.fixture()
def converter(keys: SequentialKeyGenerator) -> PageConverter:
    return PageConverter(key_generator=keys)
