import random

import pytest

from linkshortener.dao.memory import ShortURLMemoryDAO


@pytest.fixture
def rng() -> random.Random:
    """Provide a seeded random source for reproducible shortcodes."""
    return random.Random(1234)


@pytest.fixture
def dao(rng) -> ShortURLMemoryDAO:
    """Create an empty ShortURLMemoryDAO with a seeded random source."""
    return ShortURLMemoryDAO(rng=rng)
