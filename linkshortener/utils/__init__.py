from linkshortener.utils.config import ShortenerConfig, app_env, project_root, load_config
from linkshortener.utils.helpers import get_short_url, is_absolute_url
from linkshortener.utils.shortener import generate_shortcode
from linkshortener.utils.stats import aggregate_stats
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'aggregate_stats',
    'ShortenerConfig',
    'app_env',
    'project_root',
    'load_config',
    'get_short_url',
    'is_absolute_url',
    'initialize_logging',
]
