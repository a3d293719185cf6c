"""Shortcode generation utility

This module provides a helper function for generating random Base62
shortcodes. The generator never checks uniqueness: callers are expected
to retry on collision (see ShortURLMemoryDAO.create()).

Functions:
    generate_shortcode(length=6, rng=None):
        Generate a random shortcode suitable for use as a URL slug.

Example:
    >>> import random
    >>> from linkshortener.utils import generate_shortcode
    >>> len(generate_shortcode())
    6
    >>> generate_shortcode(8, rng=random.Random(42)) == generate_shortcode(8, rng=random.Random(42))
    True
"""

import random
import string

from linkshortener.utils.constants import SHORTCODE_LENGTH


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits  # 62 characters

_system_random = random.SystemRandom()


def generate_shortcode(length: int = SHORTCODE_LENGTH, rng: random.Random | None = None) -> str:
    """Generate a random Base62 shortcode.

    Every character is drawn uniformly and independently from ALPHABET.

    Args:
        length (int, optional):
            Number of characters of the shortcode. Defaults to 6.

        rng (random.Random, optional):
            Source of randomness. Any object with a random.Random compatible
            `choices()` method works, which lets tests force collisions.
            Defaults to a shared random.SystemRandom instance.

    Returns:
        str: A `length` characters long alphanumeric shortcode.

    Raises:
        TypeError: if length is not an integer.
        ValueError: if length is lower than 1.

    Example:
        >>> code = generate_shortcode(6, rng=random.Random(0))
        >>> len(code), code.isalnum()
        (6, True)
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    if rng is None:
        rng = _system_random
    return ''.join(rng.choices(ALPHABET, k=length))
