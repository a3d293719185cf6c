"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a short URL is unknown to the data store, or expired on resolution.

    ShortURLAlreadyExistsError:
        Raised when attempting to insert a short URL whose shortcode is taken.

    InvalidURLError:
        Raised when a target URL is not a well-formed absolute URL.

    InvalidExpiryError:
        Raised when a short URL lifetime is not a whole number of days, or is out of range.

Example:
    >>> from linkshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    linkshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

from linkshortener.exceptions import LinkShortenerError


class DAOError(LinkShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortURLModel is not found in the data store."""

    error_code = 'dao:short_url_not_found'


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortURLModel that already exists in the data store."""

    error_code = 'dao:short_url_already_exists'


class InvalidURLError(DAOError):
    """Exception raised when a target URL is not a well-formed absolute URL."""

    error_code = 'dao:invalid_url'


class InvalidExpiryError(DAOError):
    """Exception raised when a short URL lifetime is not a whole number of days, or is out of range."""

    error_code = 'dao:invalid_expiry'
