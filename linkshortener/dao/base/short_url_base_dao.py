"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for creating, resolving, reading and deleting short URLs.
    - Standardize error handling across data store implementations.
    - Enforce a consistent API for use by the ShortenerFacade.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()
        >>> short_url = dao.create("https://example.com/blog/article-123", shortcode="a1b2c3")

        >>> dao.hit("a1b2c3", ip_address="203.0.113.7")
        'https://example.com/blog/article-123'

        >>> retrieved = dao.get("a1b2c3")
        >>> retrieved.click_count
        1
        >>> print(retrieved.expires_at)
        None
"""

from abc import ABC, abstractmethod

from linkshortener.models import ShortURLModel, URLStatsModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        create(target, shortcode=None, title=None, expires_in_days=None, created_by=None) -> ShortURLModel:
            Create a short URL, generating a unique shortcode unless one is given.
            Raises InvalidURLError if the target is not an absolute URL.
            Raises ShortURLAlreadyExistsError if the custom shortcode is taken.

        insert(short_url: ShortURLModel) -> ShortURLBaseDAO:
            Store a fully built ShortURLModel verbatim.
            Raises ShortURLAlreadyExistsError if the shortcode already exists.

        hit(shortcode, ip_address=None, user_agent=None, referer=None) -> str:
            Resolve a shortcode to its target URL and record the click.
            Raises ShortURLNotFoundError if the shortcode is unknown or expired.

        get(shortcode) -> ShortURLModel:
            Retrieve a short URL regardless of expiry.
            Raises ShortURLNotFoundError if the shortcode is unknown.

        stats(shortcode) -> URLStatsModel:
            Aggregate usage statistics of a short URL.
            Raises ShortURLNotFoundError if the shortcode is unknown.

        all() -> list[ShortURLModel]:
            Return every short URL, newest first.

        delete(shortcode) -> bool:
            Remove a short URL. Returns whether a record was removed.

        count() -> int:
            Return the number of stored short URLs.

    Subclassing:
        Datastore-specific implementations must extend this class and
        implement all abstract methods.
    """

    @abstractmethod
    def create(
        self,
        target: str,
        shortcode: str | None = None,
        title: str | None = None,
        expires_in_days: int | None = None,
        created_by: str | None = None,
    ) -> ShortURLModel:
        """Create a new short URL.

        Args:
            target (str):
                Absolute URL the short URL redirects to.
            shortcode (Optional[str]):
                Custom shortcode. Generated when omitted or empty.
            title (Optional[str]):
                Display title. Defaults to the target URL when omitted.
            expires_in_days (Optional[int]):
                Lifetime in days from now. None means the short URL never expires.
            created_by (Optional[str]):
                Attribution of the short URL. Defaults to 'Anonymous'.

        Returns:
            ShortURLModel: snapshot of the created short URL.

        Raises:
            InvalidURLError:
                If the target is not a well-formed absolute URL.
            ShortURLAlreadyExistsError:
                If the custom shortcode is already in use.
            InvalidExpiryError:
                If the resulting expiry time is out of range.
        """
        pass

    @abstractmethod
    def insert(self, short_url: ShortURLModel) -> 'ShortURLBaseDAO':
        """Insert a fully built ShortURLModel into the data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same short code already exists.
        """
        pass

    @abstractmethod
    def hit(
        self,
        shortcode: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
        referer: str | None = None,
    ) -> str:
        """Resolve a shortcode and record the click.

        Returns:
            str: target URL of the short URL.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown or the short URL has expired.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str) -> ShortURLModel:
        """Retrieve a short URL by its shortcode, expired or not.

        Raises:
            ShortURLNotFoundError:
                If no short URL with the given shortcode exists.
        """
        pass

    @abstractmethod
    def stats(self, shortcode: str) -> URLStatsModel:
        """Aggregate the usage statistics of a short URL.

        Raises:
            ShortURLNotFoundError:
                If no short URL with the given shortcode exists.
        """
        pass

    @abstractmethod
    def all(self) -> list[ShortURLModel]:
        """Return every short URL ordered by creation time, newest first."""
        pass

    @abstractmethod
    def delete(self, shortcode: str) -> bool:
        """Remove a short URL. Returns True if a record was removed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored short URLs."""
        pass
