"""Usage statistics aggregation for short URLs

Functions:
    aggregate_stats(short_url, recent_limit=10) -> URLStatsModel
        Summarize the retained click history of a short URL.

Example:
    >>> from linkshortener.utils.stats import aggregate_stats
    >>> stats = aggregate_stats(short_url)
    >>> stats.total_clicks
    150
    >>> stats.clicks_by_hour
    {'09:00': 2, '14:00': 1}

NOTE:
    - total_clicks reports the record's click counter, which keeps counting
      after old click events leave the retained history.
    - recent_clicks and clicks_by_hour are computed from the retained
      history only.
"""

from collections import Counter
from operator import attrgetter

from linkshortener.models.short_url_model import ShortURLModel
from linkshortener.models.stats_model import URLStatsModel, ClickStatsModel
from linkshortener.utils.constants import RECENT_CLICKS_LIMIT


def hour_label(hour: int) -> str:
    """Format an hour of the day as an 'HH:00' bucket label."""
    return f'{hour:02d}:00'


def aggregate_stats(short_url: ShortURLModel, recent_limit: int = RECENT_CLICKS_LIMIT) -> URLStatsModel:
    """Summarize the click history of a short URL.

    Args:
        short_url (ShortURLModel):
            Snapshot of the short URL record.

        recent_limit (int, optional):
            Maximum number of recent clicks to report. Defaults to 10.

    Returns:
        URLStatsModel:
            total_clicks, up to `recent_limit` most recent clicks (newest first)
            and a sparse hour-of-day histogram over the retained clicks.
    """
    # Walk the history newest-inserted first so that the stable sort keeps
    # insertion recency for clicks sharing the same timestamp.
    newest_first = sorted(reversed(short_url.clicks), key=attrgetter('clicked_at'), reverse=True)
    recent_clicks = tuple(
        ClickStatsModel(clicked_at=click.clicked_at, ip_address=click.ip_address, user_agent=click.user_agent)
        for click in newest_first[:recent_limit]
    )

    by_hour = Counter(click.clicked_at.hour for click in short_url.clicks)
    clicks_by_hour = {hour_label(hour): by_hour[hour] for hour in sorted(by_hour)}

    return URLStatsModel(
        shortcode=short_url.shortcode,
        target=short_url.target,
        title=short_url.title,
        total_clicks=short_url.click_count,
        created_at=short_url.created_at,
        expires_at=short_url.expires_at,
        recent_clicks=recent_clicks,
        clicks_by_hour=clicks_by_hour,
    )
