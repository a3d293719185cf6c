from dataclasses import dataclass, field
from datetime import datetime, UTC


DEFAULT_IP_ADDRESS = 'Unknown'
DEFAULT_USER_AGENT = 'Unknown'
DEFAULT_REFERER = 'Direct'
DEFAULT_CREATED_BY = 'Anonymous'


@dataclass(frozen=True)
class ClickEventModel:
    """Represent a single resolution of a short URL.

    Attributes:
        clicked_at (datetime):
            Moment of the resolution (UTC).
        ip_address (str):
            Client IP address, 'Unknown' when not provided.
        user_agent (str):
            Client User-Agent header, 'Unknown' when not provided.
        referer (str):
            Client Referer header, 'Direct' when not provided.
    """
    clicked_at: datetime
    ip_address: str = DEFAULT_IP_ADDRESS
    user_agent: str = DEFAULT_USER_AGENT
    referer: str = DEFAULT_REFERER


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Instances are immutable snapshots. The data store owns the live record
    and hands out a fresh ShortURLModel on every read.

    Attributes:
        target (str):
            The original long URL that the short code redirects to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        title (str):
            Display title. Defaults to the target URL when None.
        click_count (int):
            Number of resolutions ever recorded. Never limited by the
            retained click history.
        created_at (datetime):
            Creation time (UTC).
        expires_at (Optional[datetime]):
            Time after which the short URL no longer resolves.
            None means the short URL never expires.
        created_by (str):
            Attribution of the short URL, 'Anonymous' by default.
        clicks (tuple[ClickEventModel, ...]):
            Most recent resolutions in insertion order.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> url = ShortURLModel(
        ...     target="https://example.com/article/123",
        ...     shortcode="abc123",
        ...     expires_at=datetime.now(UTC) + timedelta(days=30),
        ... )
        >>> url.title
        'https://example.com/article/123'
        >>> url.click_count
        0
        >>> url.is_expired()
        False
    """
    target: str
    shortcode: str
    title: str | None = None
    click_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime | None = None
    created_by: str = DEFAULT_CREATED_BY
    clicks: tuple[ClickEventModel, ...] = ()

    def __post_init__(self):
        if self.title is None:
            object.__setattr__(self, 'title', self.target)
        if self.click_count < len(self.clicks):
            raise ValueError(
                f'Click count ({self.click_count}) cannot be lower than the number of recorded clicks ({len(self.clicks)}).'
            )

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the short URL is past its expiry time.

        Args:
            now (Optional[datetime]):
                Reference time. Defaults to the current UTC time.

        Returns:
            bool: True if expires_at is set and lies before `now`.
        """
        if self.expires_at is None:
            return False
        return self.expires_at < (now or datetime.now(UTC))
