"""Helper utilities shared by the data store and the facade.

Functions:
    get_short_url(shortcode, base_url) -> str
        Get string representation of short URL for a given shortcode
    is_absolute_url(url) -> bool
        Check whether a string is a well-formed absolute URL

Example:
    >>> get_short_url('abc123', 'https://sho.rt/')
    'https://sho.rt/abc123'
    >>> is_absolute_url('https://example.com/page')
    True
    >>> is_absolute_url('/relative/path')
    False
"""

import re
from urllib.parse import urlsplit


_SCHEME = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*:')


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the shortener

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}/{shortcode}'


def is_absolute_url(url: str) -> bool:
    """Check whether `url` is a well-formed absolute URL

    An absolute URL is a scheme followed by a non-empty scheme-specific
    part, e.g. 'https://example.com', 'mailto:someone@example.com',
    'file:///tmp/report.pdf' or 'urn:isbn:0451450523'. Whitespace anywhere
    in the URL and invalid ports make it malformed.

    Args:
        url (str): candidate URL

    Returns:
        bool: True if the URL is absolute and well-formed, False otherwise.
    """
    if not isinstance(url, str) or not url or any(c.isspace() for c in url):
        return False
    if not _SCHEME.match(url):
        return False
    try:
        components = urlsplit(url)
        components.port  # raises ValueError on malformed ports
    except ValueError:
        return False
    return bool(components.netloc) or bool(components.path)
