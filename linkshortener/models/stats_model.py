from dataclasses import dataclass, field
from datetime import datetime


# fmt: off
@dataclass(frozen=True)
class ClickStatsModel:
    clicked_at: datetime                # Moment of the resolution (UTC)
    ip_address: str                     # Client IP address
    user_agent: str                     # Client User-Agent header


@dataclass(frozen=True)
class URLStatsModel:
    shortcode: str                      # Unique short identifier of shortened URL
    target: str                         # Original long URL
    title: str                          # Display title
    total_clicks: int                   # All resolutions ever recorded
    created_at: datetime                # Creation time (UTC)
    expires_at: datetime | None = None  # Expiry time, None if the link never expires
    recent_clicks: tuple[ClickStatsModel, ...] = ()               # Newest first
    clicks_by_hour: dict[str, int] = field(default_factory=dict)  # 'HH:00' -> retained clicks
# fmt: on
