"""Unit tests for the aggregate_stats function in stats.py.

Test coverage includes:

1. Totals
   - total_clicks reports the click counter, not the retained history size.

2. Recent clicks
   - At most 10 clicks, newest first.
   - Ties on timestamp keep the most recently recorded click first.
   - Referer is not part of the recent click view.

3. Hour-of-day histogram
   - Sparse 'HH:00' buckets computed from retained clicks only.
"""

from datetime import datetime, timedelta, UTC

import pytest

from linkshortener.models import ShortURLModel, ClickEventModel, ClickStatsModel
from linkshortener.utils import aggregate_stats
from linkshortener.utils.stats import hour_label


def make_short_url(clicked_at: list[datetime], click_count: int | None = None) -> ShortURLModel:
    clicks = tuple(ClickEventModel(clicked_at=dt, ip_address=f'10.0.0.{i}') for i, dt in enumerate(clicked_at))
    return ShortURLModel(
        target='https://example.com',
        shortcode='abc123',
        title='Example',
        click_count=len(clicks) if click_count is None else click_count,
        created_at=datetime(2025, 10, 1, tzinfo=UTC),
        clicks=clicks,
    )


# -------------------------------
# 1. Totals
# -------------------------------


def test_total_clicks_uses_click_counter():
    stats = aggregate_stats(make_short_url([datetime(2025, 10, 15, 9, tzinfo=UTC)], click_count=150))
    assert stats.total_clicks == 150


def test_stats_carry_record_fields():
    short_url = make_short_url([])
    stats = aggregate_stats(short_url)

    assert stats.shortcode == 'abc123'
    assert stats.target == 'https://example.com'
    assert stats.title == 'Example'
    assert stats.created_at == short_url.created_at
    assert stats.expires_at is None
    assert stats.recent_clicks == ()
    assert stats.clicks_by_hour == {}


# -------------------------------
# 2. Recent clicks
# -------------------------------


def test_recent_clicks_are_limited_and_newest_first():
    start = datetime(2025, 10, 15, 0, tzinfo=UTC)
    stats = aggregate_stats(make_short_url([start + timedelta(minutes=i) for i in range(25)]))

    assert len(stats.recent_clicks) == 10
    assert [click.clicked_at for click in stats.recent_clicks] == [start + timedelta(minutes=i) for i in range(24, 14, -1)]


def test_recent_clicks_shorter_history():
    start = datetime(2025, 10, 15, 0, tzinfo=UTC)
    stats = aggregate_stats(make_short_url([start, start + timedelta(hours=1)]))

    assert [click.ip_address for click in stats.recent_clicks] == ['10.0.0.1', '10.0.0.0']


def test_recent_clicks_sorted_by_time_not_insertion():
    base = datetime(2025, 10, 15, 12, tzinfo=UTC)
    stats = aggregate_stats(make_short_url([base, base - timedelta(hours=1), base + timedelta(hours=1)]))

    assert [click.ip_address for click in stats.recent_clicks] == ['10.0.0.2', '10.0.0.0', '10.0.0.1']


def test_recent_clicks_ties_keep_latest_recorded_first():
    same = datetime(2025, 10, 15, 12, tzinfo=UTC)
    stats = aggregate_stats(make_short_url([same, same, same]))

    assert [click.ip_address for click in stats.recent_clicks] == ['10.0.0.2', '10.0.0.1', '10.0.0.0']


def test_custom_recent_limit():
    start = datetime(2025, 10, 15, 0, tzinfo=UTC)
    stats = aggregate_stats(make_short_url([start + timedelta(minutes=i) for i in range(5)]), recent_limit=2)
    assert len(stats.recent_clicks) == 2


def test_recent_clicks_drop_referer():
    stats = aggregate_stats(make_short_url([datetime(2025, 10, 15, 9, tzinfo=UTC)]))
    click = stats.recent_clicks[0]

    assert isinstance(click, ClickStatsModel)
    assert click.user_agent == 'Unknown'
    assert not hasattr(click, 'referer')


# -------------------------------
# 3. Hour-of-day histogram
# -------------------------------


def test_clicks_by_hour():
    hours = [
        datetime(2025, 10, 15, 9, 5, tzinfo=UTC),
        datetime(2025, 10, 16, 9, 55, tzinfo=UTC),
        datetime(2025, 10, 15, 14, 0, tzinfo=UTC),
    ]
    stats = aggregate_stats(make_short_url(hours))
    assert stats.clicks_by_hour == {'09:00': 2, '14:00': 1}


def test_clicks_by_hour_counts_retained_clicks_only():
    stats = aggregate_stats(make_short_url([datetime(2025, 10, 15, 23, tzinfo=UTC)], click_count=500))
    assert stats.clicks_by_hour == {'23:00': 1}


def test_clicks_by_hour_keys_are_ordered():
    hours = [datetime(2025, 10, 15, h, tzinfo=UTC) for h in (22, 0, 7)]
    assert list(aggregate_stats(make_short_url(hours)).clicks_by_hour) == ['00:00', '07:00', '22:00']


@pytest.mark.parametrize('hour, label', [(0, '00:00'), (9, '09:00'), (23, '23:00')])
def test_hour_label(hour, label):
    assert hour_label(hour) == label
