"""Default date/time handling for schedule requests."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from jlr_mcp.models.responses import RequestInfo

logger = logging.getLogger(__name__)

# Sunday-first, as the Israeli week is counted
HEBREW_DAY_NAMES = (
    "יום ראשון",
    "יום שני",
    "יום שלישי",
    "יום רביעי",
    "יום חמישי",
    "יום שישי",
    "יום שבת",
)


def hebrew_day_name(moment: datetime) -> str:
    """Hebrew name of the day of week.

    Example: a Sunday -> "יום ראשון"
    """
    # datetime.weekday() is Monday=0
    return HEBREW_DAY_NAMES[(moment.weekday() + 1) % 7]


def resolve_now(client_time: str | None, tz_name: str) -> datetime:
    """Current local time, taken from the client when it sent one.

    Args:
        client_time: ISO 8601 time from the client, optional.
        tz_name: IANA zone the schedule is local to.

    Returns:
        Aware datetime in the schedule's zone. Naive client times are assumed
        to already be local.

    Raises:
        ValueError: If client_time is not ISO 8601.
    """
    tz = ZoneInfo(tz_name)
    if not client_time:
        return datetime.now(tz)

    parsed = datetime.fromisoformat(client_time.strip())
    logger.info(f"Using client time: {parsed.isoformat()}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def build_request_info(
    date: str | None,
    time: str | None,
    client_time: str | None,
    tz_name: str,
) -> tuple[RequestInfo, datetime]:
    """Fill in missing date (YYYYMMDD) and time (HHMM) from the current moment.

    Returns:
        (RequestInfo, the moment used)
    """
    now = resolve_now(client_time, tz_name)
    info = RequestInfo(
        date=date or now.strftime("%Y%m%d"),
        time=time or now.strftime("%H%M"),
        day_of_week=hebrew_day_name(now),
        current_time=now.strftime("%H:%M:%S"),
    )
    return info, now
