"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a process-local implementation of ShortURLBaseDAO. The
store is volatile: its records live as long as the DAO instance.

Responsibilities:
    - Create short URLs with unique (custom or generated) shortcodes;
    - Resolve shortcodes while recording click telemetry;
    - Keep a bounded click history per short URL;
    - Hide expired short URLs from resolution;
    - Serialize every operation so that concurrent request handlers never
      observe or produce a torn record.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from linkshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> short_url = dao.create("https://example.com/page", shortcode="abc123")
    >>> dao.hit("abc123", user_agent="curl/8.5.0")
    'https://example.com/page'
    >>> dao.get("abc123").click_count
    1
    >>> dao.delete("abc123")
    True
"""

import random
import logging
import threading
from collections import deque
from datetime import datetime, timedelta, UTC

from beartype import beartype

from linkshortener.models import ShortURLModel, ClickEventModel, URLStatsModel
from linkshortener.models.short_url_model import DEFAULT_IP_ADDRESS, DEFAULT_USER_AGENT, DEFAULT_REFERER, DEFAULT_CREATED_BY
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import (
    InvalidURLError,
    InvalidExpiryError,
    ShortURLAlreadyExistsError,
    ShortURLNotFoundError,
)
from linkshortener.utils.helpers import is_absolute_url
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.stats import aggregate_stats
from linkshortener.utils.constants import SHORTCODE_LENGTH, CLICK_HISTORY_LIMIT


logger = logging.getLogger(__name__)


def _expiry(now: datetime, expires_in_days: int) -> datetime:
    try:
        return now + timedelta(days=expires_in_days)
    except OverflowError as e:
        raise InvalidExpiryError(f"Lifetime of {expires_in_days} days is out of range.") from e


class _ShortURLEntry:
    """Live, mutable short URL record. Never leaves the DAO."""

    __slots__ = ('target', 'shortcode', 'title', 'click_count', 'created_at', 'expires_at', 'created_by', 'clicks')

    def __init__(self, short_url: ShortURLModel, click_history_limit: int):
        self.target = short_url.target
        self.shortcode = short_url.shortcode
        self.title = short_url.title
        self.click_count = short_url.click_count
        self.created_at = short_url.created_at
        self.expires_at = short_url.expires_at
        self.created_by = short_url.created_by
        # Appending to a full deque evicts the oldest click
        self.clicks = deque(short_url.clicks, maxlen=click_history_limit)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at < now

    def snapshot(self) -> ShortURLModel:
        return ShortURLModel(
            target=self.target,
            shortcode=self.shortcode,
            title=self.title,
            click_count=self.click_count,
            created_at=self.created_at,
            expires_at=self.expires_at,
            created_by=self.created_by,
            clicks=tuple(self.clicks),
        )


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface on top of a plain
    dictionary guarded by a single lock.

    NOTE: correctness depends on two compound operations being atomic with
          respect to each other, which the lock guarantees:
          - create(): shortcode uniqueness check followed by the insert;
          - hit(): expiry check, click counter increment and click append.
          Reads take the same lock and copy the record into an immutable
          ShortURLModel, so they never see a half-applied hit.

    Attributes:
        shortcode_length (int):
            Length of generated shortcodes.
        click_history_limit (int):
            Maximum number of click events retained per short URL.

    Example:
        >>> dao = ShortURLMemoryDAO(rng=random.Random(42))
        >>> short_url = dao.create("https://example.com")
        >>> len(short_url.shortcode)
        6
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        shortcode_length: int = SHORTCODE_LENGTH,
        click_history_limit: int = CLICK_HISTORY_LIMIT,
    ):
        """Initialize an empty in-memory short URL store

        Args:
            rng (Optional[random.Random]):
                Source of randomness for shortcode generation.
                Defaults to the generator's shared SystemRandom instance.
            shortcode_length (int):
                Length of generated shortcodes. Defaults to 6.
            click_history_limit (int):
                Maximum number of retained clicks per short URL. Defaults to 100.

        Raises:
            ValueError:
                If shortcode_length or click_history_limit is lower than 1.
        """
        if shortcode_length < 1:
            raise ValueError(f'Shortcode length must be a positive integer (given value: {shortcode_length}).')
        if click_history_limit < 1:
            raise ValueError(f'Click history limit must be a positive integer (given value: {click_history_limit}).')

        self.rng = rng
        self.shortcode_length = shortcode_length
        self.click_history_limit = click_history_limit
        self._urls: dict[str, _ShortURLEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, shortcode: object) -> bool:
        with self._lock:
            return shortcode in self._urls

    def _unused_shortcode(self) -> str:
        # Caller must hold the lock. The Base62 space (62**6 codes) dwarfs any
        # in-memory store, so the loop terminates after very few attempts.
        shortcode = generate_shortcode(self.shortcode_length, rng=self.rng)
        while shortcode in self._urls:
            logger.debug('Generated shortcode collides with an existing one. Retrying.', extra={'shortcode': shortcode})
            shortcode = generate_shortcode(self.shortcode_length, rng=self.rng)
        return shortcode

    @beartype
    def create(
        self,
        target: str,
        shortcode: str | None = None,
        title: str | None = None,
        expires_in_days: int | None = None,
        created_by: str | None = None,
    ) -> ShortURLModel:
        """Create a short URL

        Args:
            target (str):
                Absolute URL the short URL redirects to.
            shortcode (Optional[str]):
                Custom shortcode, used verbatim. Generated when omitted or empty.
            title (Optional[str]):
                Display title. Defaults to the target URL when omitted.
            expires_in_days (Optional[int]):
                Lifetime in days. Negative values create an already expired short URL.
            created_by (Optional[str]):
                Attribution of the short URL. Defaults to 'Anonymous'.

        Returns:
            ShortURLModel: snapshot of the newly created short URL.

        Raises:
            InvalidURLError:
                If the target is not a well-formed absolute URL.
            ShortURLAlreadyExistsError:
                If the custom shortcode already exists.
            InvalidExpiryError:
                If expires_in_days pushes the expiry past datetime.max (or before datetime.min).

        Example:
            >>> dao.create('https://example.com', shortcode='ex', expires_in_days=7)
            ShortURLModel(target='https://example.com', shortcode='ex', ...)
        """
        if not is_absolute_url(target):
            raise InvalidURLError(f"Target URL '{target}' is not a valid absolute URL.")

        with self._lock:
            now = datetime.now(UTC)
            expires_at = None if expires_in_days is None else _expiry(now, expires_in_days)

            if shortcode:
                if shortcode in self._urls:
                    raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")
            else:
                shortcode = self._unused_shortcode()

            short_url = ShortURLModel(
                target=target,
                shortcode=shortcode,
                title=title,
                created_at=now,
                expires_at=expires_at,
                created_by=created_by or DEFAULT_CREATED_BY,
            )
            self._urls[shortcode] = _ShortURLEntry(short_url, self.click_history_limit)

        logger.info('Short URL created.', extra={'shortcode': shortcode, 'target': target})
        return short_url

    @beartype
    def insert(self, short_url: ShortURLModel) -> 'ShortURLMemoryDAO':
        """Insert a fully built short URL verbatim

        Clicks beyond the click history limit are dropped oldest first.

        Returns:
            ShortURLMemoryDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
        """
        with self._lock:
            if short_url.shortcode in self._urls:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            self._urls[short_url.shortcode] = _ShortURLEntry(short_url, self.click_history_limit)
        return self

    @beartype
    def hit(
        self,
        shortcode: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
        referer: str | None = None,
    ) -> str:
        """Resolve a shortcode to its target URL and record the click

        The click counter grows on every successful hit. The click history
        keeps only the most recent `click_history_limit` clicks.

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            ip_address (Optional[str]):
                Client IP address. Defaults to 'Unknown'.
            user_agent (Optional[str]):
                Client User-Agent header. Defaults to 'Unknown'.
            referer (Optional[str]):
                Client Referer header. Defaults to 'Direct'.

        Returns:
            str: target URL of the short URL.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is unknown or the short URL has expired.

        Example:
            >>> dao.hit('abc123', ip_address='203.0.113.7')
            'https://example.com/page'
        """
        with self._lock:
            entry = self._urls.get(shortcode)
            now = datetime.now(UTC)
            if entry is None:
                logger.debug('Short URL not found.', extra={'shortcode': shortcode})
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            if entry.is_expired(now):
                logger.debug('Short URL expired.', extra={'shortcode': shortcode, 'expiresAt': entry.expires_at})
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

            entry.click_count += 1
            entry.clicks.append(
                ClickEventModel(
                    clicked_at=now,
                    ip_address=ip_address or DEFAULT_IP_ADDRESS,
                    user_agent=user_agent or DEFAULT_USER_AGENT,
                    referer=referer or DEFAULT_REFERER,
                )
            )
            target = entry.target

        logger.debug('Short URL resolved.', extra={'shortcode': shortcode})
        return target

    @beartype
    def get(self, shortcode: str) -> ShortURLModel:
        """Retrieve a short URL by shortcode, including expired ones

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.
        """
        with self._lock:
            entry = self._urls.get(shortcode)
            if entry is None:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            return entry.snapshot()

    @beartype
    def stats(self, shortcode: str) -> URLStatsModel:
        """Aggregate the usage statistics of a short URL

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.
        """
        return aggregate_stats(self.get(shortcode))

    def all(self) -> list[ShortURLModel]:
        """Return snapshots of every short URL, newest first"""
        with self._lock:
            snapshots = [entry.snapshot() for entry in reversed(self._urls.values())]
        return sorted(snapshots, key=lambda short_url: short_url.created_at, reverse=True)

    @beartype
    def delete(self, shortcode: str) -> bool:
        """Remove a short URL

        Returns:
            bool: True if the short URL existed and was removed, False otherwise.
        """
        with self._lock:
            removed = self._urls.pop(shortcode, None) is not None

        if removed:
            logger.info('Short URL deleted.', extra={'shortcode': shortcode})
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._urls)
