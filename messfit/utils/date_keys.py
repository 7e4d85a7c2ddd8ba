"""
Date Keys

Every per-day record (meal logs, water logs) is partitioned by a YYYY-MM-DD
key taken in a fixed UTC+05:30 offset. The offset is hardcoded and never read
from a timezone database, so keys stay consistent with already stored data
whatever the host timezone is.
"""

from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

KEY_OFFSET = timedelta(hours=5, minutes=30)
KEY_FORMAT = "%Y-%m-%d"


def _shifted(now: Optional[datetime] = None) -> datetime:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        # naive datetimes are treated as UTC instants
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc) + KEY_OFFSET


def to_key(day: date) -> str:
    return day.strftime(KEY_FORMAT)


def parse_key(key: str) -> date:
    return datetime.strptime(key, KEY_FORMAT).date()


def is_valid_key(key) -> bool:
    if not isinstance(key, str) or len(key) != 10:
        return False
    try:
        parse_key(key)
    except ValueError:
        return False
    return True


def key_for(now: Optional[datetime] = None) -> str:
    """Key of the calendar day containing the instant ``now``."""
    return to_key(_shifted(now).date())


def today(now: Optional[datetime] = None) -> str:
    return key_for(now)


def days_ago(n: int, now: Optional[datetime] = None) -> str:
    return to_key(_shifted(now).date() - timedelta(days=n))


def shift_key(key: str, days: int) -> str:
    return to_key(parse_key(key) + timedelta(days=days))


def keys_between(start: str, end: str) -> List[str]:
    """Ascending list of keys from start to end, both inclusive."""
    first, last = parse_key(start), parse_key(end)
    return [to_key(first + timedelta(days=i)) for i in range((last - first).days + 1)]


def window_keys(days: int, now: Optional[datetime] = None) -> List[str]:
    """The last ``days`` keys ending today, oldest first."""
    return [days_ago(i, now) for i in range(days - 1, -1, -1)]
