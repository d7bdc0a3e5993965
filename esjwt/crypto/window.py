"""Issued-at and expiry computation using calendar month arithmetic."""

import calendar
from datetime import UTC, datetime

from esjwt.crypto.errors import TimeComputationError
from esjwt.crypto.types import TimeWindow


def add_months(moment: datetime, months: int) -> datetime:
    """Advance a datetime by whole calendar months.

    The day of month is clamped to the last day of the target month, so
    January 31st plus one month lands on the last day of February.
    """
    index = moment.year * 12 + (moment.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    if not datetime.min.year <= year <= datetime.max.year:
        raise TimeComputationError(f"Adding {months} months leaves the supported date range")
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def compute_window(now: datetime, duration_months: int) -> TimeWindow:
    """Compute iat and exp Unix timestamps for a token issued at ``now``."""
    if duration_months < 0:
        raise TimeComputationError(
            f"Token duration must be non-negative, got {duration_months} months"
        )
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    else:
        now = now.astimezone(UTC)

    expires = add_months(now, duration_months)
    try:
        exp = int(expires.timestamp())
    except (OverflowError, ValueError) as e:
        raise TimeComputationError(f"Cannot convert expiry to a timestamp: {e}") from e
    return TimeWindow(iat=int(now.timestamp()), exp=exp)
