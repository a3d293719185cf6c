from linkshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO
from linkshortener.dao.memory.seed import DEMO_SHORT_URLS, seed_demo_short_urls


__all__ = [
    'ShortURLMemoryDAO',
    'DEMO_SHORT_URLS',
    'seed_demo_short_urls',
]
