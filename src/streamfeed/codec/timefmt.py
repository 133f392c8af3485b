"""Wire timestamp format and the clock used for default activity times."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, datetime

from streamfeed.config import settings

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

_TIME_RE = re.compile(r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d{1,9}))?", re.ASCII)

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current instant as a naive datetime."""
    if settings.use_utc_clock:
        return datetime.now(UTC).replace(tzinfo=None)
    return datetime.now()


def format_time(value: datetime) -> str:
    return value.strftime(TIME_FORMAT)


def parse_time(text: str) -> datetime | None:
    """Parse a wire timestamp, returning None when it is not one.

    Fractional seconds are optional and may carry up to nine digits;
    anything past microseconds is dropped.
    """
    match = _TIME_RE.fullmatch(text)
    if not match:
        return None

    whole, fraction = match.groups()
    try:
        parsed = datetime.strptime(whole, "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return None

    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    return parsed
