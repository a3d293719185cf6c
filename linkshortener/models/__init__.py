from linkshortener.models.short_url_model import ShortURLModel, ClickEventModel
from linkshortener.models.stats_model import URLStatsModel, ClickStatsModel
from linkshortener.models.view_model import ShortURLView, URLStatsView, ClickStatsView, CreateShortURLRequest


__all__ = [
    'ShortURLModel',
    'ClickEventModel',
    'URLStatsModel',
    'ClickStatsModel',
    'ShortURLView',
    'URLStatsView',
    'ClickStatsView',
    'CreateShortURLRequest',
]
