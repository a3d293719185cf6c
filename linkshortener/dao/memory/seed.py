"""Demonstration short URLs inserted at process start

Functions:
    seed_demo_short_urls(dao) -> list[ShortURLModel]
        Insert the demonstration short URLs that aren't already present.
"""

import logging

from linkshortener.models import ShortURLModel
from linkshortener.dao.base import ShortURLBaseDAO
from linkshortener.dao.exceptions import ShortURLAlreadyExistsError


logger = logging.getLogger(__name__)

DEMO_SHORT_URLS = (
    {
        'shortcode': 'github',
        'target': 'https://github.com',
        'title': 'GitHub - Where the world builds software',
        'click_count': 42,
    },
    {
        'shortcode': 'dotnet',
        'target': 'https://dotnet.microsoft.com',
        'title': '.NET Official Website',
        'click_count': 28,
    },
)


def seed_demo_short_urls(dao: ShortURLBaseDAO) -> list[ShortURLModel]:
    """Insert the demonstration short URLs into `dao`

    Demo entries whose shortcode is already taken are skipped.

    Returns:
        list[ShortURLModel]: the short URLs that were inserted.
    """
    inserted = []
    for fields in DEMO_SHORT_URLS:
        short_url = ShortURLModel(**fields)
        try:
            dao.insert(short_url)
        except ShortURLAlreadyExistsError:
            logger.debug('Demo short URL already present. Skipping.', extra={'shortcode': short_url.shortcode})
        else:
            inserted.append(short_url)

    logger.info('Seeded demo short URLs.', extra={'count': len(inserted)})
    return inserted
