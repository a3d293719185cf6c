"""Display views handed to the transport layer

The transport layer serializes these views as-is, so `to_dict()` produces
JSON-ready payloads with camelCase keys and ISO-8601 timestamps.

Classes:
    CreateShortURLRequest:
        Parsed short URL creation payload.
    ShortURLView:
        Short URL record as displayed to clients (includes the full short URL).
    ClickStatsView:
        One recent click as displayed to clients.
    URLStatsView:
        Aggregated usage statistics as displayed to clients.

Example:
    >>> request = CreateShortURLRequest.from_dict({'originalUrl': 'https://example.com', 'customCode': 'ex'})
    >>> request.target, request.shortcode
    ('https://example.com', 'ex')
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from linkshortener.models.short_url_model import ShortURLModel
from linkshortener.models.stats_model import URLStatsModel, ClickStatsModel
from linkshortener.dao.exceptions import InvalidURLError, InvalidExpiryError
from linkshortener.utils.helpers import get_short_url


def _isoformat(dt: datetime | None) -> str | None:
    return None if dt is None else dt.isoformat().replace('+00:00', 'Z')


@dataclass(frozen=True)
class CreateShortURLRequest:
    target: str
    shortcode: str | None = None
    title: str | None = None
    expires_in_days: int | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> 'CreateShortURLRequest':
        """Parse a camelCase creation payload.

        Raises:
            InvalidURLError: if 'originalUrl' is missing or empty.
            InvalidExpiryError: if 'expiresInDays' is present but not an integer.
        """
        target = payload.get('originalUrl')
        if not target:
            raise InvalidURLError("Missing 'originalUrl' in request payload.")

        expires_in_days = payload.get('expiresInDays')
        if expires_in_days is not None and (not isinstance(expires_in_days, int) or isinstance(expires_in_days, bool)):
            raise InvalidExpiryError(f"'expiresInDays' must be a whole number of days (given value: {expires_in_days!r}).")

        return cls(
            target=target,
            shortcode=payload.get('customCode'),
            title=payload.get('title'),
            expires_in_days=expires_in_days,
        )


@dataclass(frozen=True)
class ShortURLView:
    shortcode: str
    short_url: str
    target: str
    title: str
    click_count: int
    created_at: datetime
    expires_at: datetime | None = None

    @classmethod
    def from_model(cls, short_url: ShortURLModel, base_url: str) -> 'ShortURLView':
        return cls(
            shortcode=short_url.shortcode,
            short_url=get_short_url(short_url.shortcode, base_url),
            target=short_url.target,
            title=short_url.title,
            click_count=short_url.click_count,
            created_at=short_url.created_at,
            expires_at=short_url.expires_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'shortCode': self.shortcode,
            'shortUrl': self.short_url,
            'originalUrl': self.target,
            'title': self.title,
            'clickCount': self.click_count,
            'createdAt': _isoformat(self.created_at),
            'expiresAt': _isoformat(self.expires_at),
        }


@dataclass(frozen=True)
class ClickStatsView:
    clicked_at: datetime
    ip_address: str
    user_agent: str

    @classmethod
    def from_model(cls, click: ClickStatsModel) -> 'ClickStatsView':
        return cls(clicked_at=click.clicked_at, ip_address=click.ip_address, user_agent=click.user_agent)

    def to_dict(self) -> dict[str, Any]:
        return {
            'clickedAt': _isoformat(self.clicked_at),
            'ipAddress': self.ip_address,
            'userAgent': self.user_agent,
        }


@dataclass(frozen=True)
class URLStatsView:
    shortcode: str
    target: str
    title: str
    total_clicks: int
    created_at: datetime
    expires_at: datetime | None
    recent_clicks: tuple[ClickStatsView, ...]
    clicks_by_hour: dict[str, int]

    @classmethod
    def from_model(cls, stats: URLStatsModel) -> 'URLStatsView':
        return cls(
            shortcode=stats.shortcode,
            target=stats.target,
            title=stats.title,
            total_clicks=stats.total_clicks,
            created_at=stats.created_at,
            expires_at=stats.expires_at,
            recent_clicks=tuple(ClickStatsView.from_model(click) for click in stats.recent_clicks),
            clicks_by_hour=dict(stats.clicks_by_hour),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'shortCode': self.shortcode,
            'originalUrl': self.target,
            'title': self.title,
            'totalClicks': self.total_clicks,
            'createdAt': _isoformat(self.created_at),
            'expiresAt': _isoformat(self.expires_at),
            'recentClicks': [click.to_dict() for click in self.recent_clicks],
            'clicksByHour': dict(self.clicks_by_hour),
        }
