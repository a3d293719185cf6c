"""Shortener facade consumed by the transport layer

The facade composes the short URL DAO with the display views. It holds no
state of its own beyond the DAO handle and the public base URL, and
translates DAO lookups into `view | None` results:

    - unknown (or, for resolution, expired) shortcodes yield None;
    - creation errors (InvalidURLError, ShortURLAlreadyExistsError,
      InvalidExpiryError) propagate
      to the caller, which maps them onto its own error responses.

Classes:
    ShortenerFacade:
        Create, resolve, inspect, list and delete short URLs.

Functions:
    create_shortener(config_path=None) -> ShortenerFacade:
        Load the configuration, initialize logging and build the facade.

Example:
    >>> from linkshortener.service import create_shortener
    >>> from linkshortener.models import CreateShortURLRequest
    >>> facade = create_shortener()
    >>> view = facade.create_short_url(CreateShortURLRequest(target='https://example.com', shortcode='ex'))
    >>> view.short_url
    'http://localhost:5002/ex'
    >>> facade.get_original_url('ex', ip_address='203.0.113.7')
    'https://example.com'
    >>> facade.get_original_url('missing') is None
    True
"""

import logging
from pathlib import Path

from linkshortener.models import ShortURLView, URLStatsView, CreateShortURLRequest
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.memory import ShortURLMemoryDAO, seed_demo_short_urls
from linkshortener.dao.exceptions import ShortURLNotFoundError
from linkshortener.utils.config import ShortenerConfig, load_config
from linkshortener.utils.logging import initialize_logging


logger = logging.getLogger(__name__)


class ShortenerFacade:
    """Operations exposed to the transport layer.

    Attributes:
        dao (ShortURLBaseDAO):
            Data store holding the short URLs.
        base_url (str):
            Public base URL used to build displayed short URLs.
    """

    def __init__(self, dao: ShortURLBaseDAO, base_url: str):
        self.dao = dao
        self.base_url = base_url

    @classmethod
    def from_config(cls, config: ShortenerConfig) -> 'ShortenerFacade':
        """Build a facade over a fresh in-memory store

        Seeds the demonstration short URLs when `config.seed_demo_data` is set.
        """
        dao = ShortURLMemoryDAO(
            shortcode_length=config.shortcode_length,
            click_history_limit=config.click_history_limit,
        )
        if config.seed_demo_data:
            seed_demo_short_urls(dao)

        logger.info('Shortener initialized.', extra={'baseUrl': config.base_url, 'seeded': config.seed_demo_data})
        return cls(dao, config.base_url)

    def create_short_url(self, request: CreateShortURLRequest) -> ShortURLView:
        """Create a short URL

        Raises:
            InvalidURLError:
                If the target is not a well-formed absolute URL.
            ShortURLAlreadyExistsError:
                If the custom shortcode is already in use.
            InvalidExpiryError:
                If the requested lifetime is out of range.
        """
        short_url = self.dao.create(
            request.target,
            shortcode=request.shortcode,
            title=request.title,
            expires_in_days=request.expires_in_days,
        )
        return ShortURLView.from_model(short_url, self.base_url)

    def get_original_url(
        self,
        shortcode: str,
        ip_address: str | None = None,
        user_agent: str | None = None,
        referer: str | None = None,
    ) -> str | None:
        """Resolve a shortcode and record the click. None if unknown or expired."""
        try:
            return self.dao.hit(shortcode, ip_address=ip_address, user_agent=user_agent, referer=referer)
        except ShortURLNotFoundError:
            return None

    def get_short_url_info(self, shortcode: str) -> ShortURLView | None:
        try:
            short_url = self.dao.get(shortcode)
        except ShortURLNotFoundError:
            return None
        return ShortURLView.from_model(short_url, self.base_url)

    def get_url_stats(self, shortcode: str) -> URLStatsView | None:
        try:
            stats = self.dao.stats(shortcode)
        except ShortURLNotFoundError:
            return None
        return URLStatsView.from_model(stats)

    def get_all_urls(self) -> list[ShortURLView]:
        return [ShortURLView.from_model(short_url, self.base_url) for short_url in self.dao.all()]

    def delete_short_url(self, shortcode: str) -> bool:
        return self.dao.delete(shortcode)


def create_shortener(config_path: str | Path | None = None) -> ShortenerFacade:
    """Process entry point: load the configuration, set up logging, build the facade

    Call once at process start and hand the returned facade to every request
    handler.

    Args:
        config_path (Optional[str | Path]):
            Explicit YAML configuration file (see load_config()).

    Returns:
        ShortenerFacade: facade over a fresh in-memory store.
    """
    config = load_config(config_path)
    initialize_logging(config.log_level)
    return ShortenerFacade.from_config(config)
