"""Timestamps in the warehouse's local time."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "Europe/Stockholm"
# "UTC+2", "GMT-05:30", "utc+0130"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the zone from ``APP_TIMEZONE``.

    IANA names are tried first, then fixed ``UTC±HH[:MM]`` offsets. Anything
    else, including an empty value, means Stockholm time.
    """

    name = (get_settings().app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(name)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert to the app zone.

    SQLite hands back naive datetimes; those are taken to be app-local already.
    """

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def _resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        pass

    match = _OFFSET_PATTERN.match(name)
    if match is None:
        return ZoneInfo(_DEFAULT_TIMEZONE)
    offset = timedelta(
        hours=int(match.group("hours")), minutes=int(match.group("minutes") or 0)
    )
    return timezone(-offset if match.group("sign") == "-" else offset)
