"""Relative age labels ("5 minutes ago") and the recency flag."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from dateutil.parser import parse as dateparse

INVALID_DATE = "Invalid Date"

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR

# Items younger than this many days are flagged as new
NEW_WITHIN_DAYS = 3
RELATIVE_WITHIN_DAYS = 7

MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Missing date parts fill from January 1st, midnight
PARSE_DEFAULT = datetime(1970, 1, 1)


@dataclass(frozen=True)
class TimeAgo:
    text: str
    is_new: bool

    @property
    def css_class(self) -> str:
        return "new" if self.is_new else "old"


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a timestamp into an aware UTC datetime. Naive values are UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = dateparse(str(value), default=PARSE_DEFAULT)
        except (ValueError, OverflowError, TypeError):
            return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_absolute(dt: datetime) -> str:
    """en-US short date, e.g. ``Jan 5, 2025``."""
    return f"{MONTH_ABBR[dt.month - 1]} {dt.day}, {dt.year}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit if count == 1 else unit + 's'} ago"


def get_time_ago(
    published: Union[str, datetime, None],
    now: Optional[datetime] = None,
) -> TimeAgo:
    """Compute the age label of ``published`` relative to ``now``.

    First match wins: under an hour and under a day are always new; up to
    seven days is new when at most three days old; anything older is shown as
    an absolute date.
    """
    publish_dt = parse_timestamp(published)
    if publish_dt is None:
        return TimeAgo(text=INVALID_DATE, is_new=False)

    now_dt = parse_timestamp(now) if now is not None else datetime.now(timezone.utc)
    elapsed = (now_dt - publish_dt).total_seconds()
    minutes = math.floor(elapsed / MINUTE)
    hours = math.floor(elapsed / HOUR)
    days = math.floor(elapsed / DAY)

    if minutes < 60:
        return TimeAgo(text=_plural(minutes, "minute"), is_new=True)
    if hours < 24:
        return TimeAgo(text=_plural(hours, "hour"), is_new=True)
    if days <= RELATIVE_WITHIN_DAYS:
        return TimeAgo(text=_plural(days, "day"), is_new=days <= NEW_WITHIN_DAYS)
    return TimeAgo(text=format_absolute(publish_dt), is_new=False)
