"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns a string of the expected length.

2. Output format
   - All characters must belong to the Base62 alphabet.

3. Injectable randomness
   - Same seeded random source produces identical output.
   - The generator delegates to the injected source.

4. Error handling
   - Ensures invalid lengths raise appropriate exceptions.
"""

import random
import string
from unittest.mock import MagicMock

import pytest

from linkshortener.utils import generate_shortcode
from linkshortener.utils.shortener import ALPHABET


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_default_length():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 6


@pytest.mark.parametrize('length', [1, 7, 32])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length)) == length


# -------------------------------
# 2. Output format
# -------------------------------


def test_alphabet_is_base62():
    assert len(ALPHABET) == 62
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)


def test_generate_shortcode_only_uses_alphabet():
    rng = random.Random(1234)
    for _ in range(500):
        assert set(generate_shortcode(6, rng=rng)) <= set(ALPHABET)


# -------------------------------
# 3. Injectable randomness
# -------------------------------


def test_generate_shortcode_is_deterministic_with_seeded_rng():
    assert generate_shortcode(6, rng=random.Random(42)) == generate_shortcode(6, rng=random.Random(42))


def test_generate_shortcode_uses_injected_rng():
    rng = MagicMock(spec=random.Random)
    rng.choices.return_value = list('abcXYZ')

    assert generate_shortcode(6, rng=rng) == 'abcXYZ'
    rng.choices.assert_called_once_with(ALPHABET, k=6)


# -------------------------------
# 4. Error handling
# -------------------------------


@pytest.mark.parametrize('length', [0, -1])
def test_generate_shortcode_with_non_positive_length(length):
    with pytest.raises(ValueError, match='Length must be a positive integer'):
        generate_shortcode(length)


@pytest.mark.parametrize('length', ['6', 6.0, None, True])
def test_generate_shortcode_with_invalid_length_type(length):
    with pytest.raises(TypeError, match='Length must be of type integer'):
        generate_shortcode(length)
