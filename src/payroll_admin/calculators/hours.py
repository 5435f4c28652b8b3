"""Elapsed working hours between check-in and check-out."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

MS_PER_HOUR = 60 * 60 * 1000
HOURS_QUANTUM = Decimal("0.01")


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def elapsed_milliseconds(start: datetime, end: datetime) -> int:
    """Whole milliseconds from start to end; negative if end precedes start."""
    delta = as_utc(end) - as_utc(start)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def compute_total_hours(check_in: datetime, check_out: datetime) -> Decimal:
    """Hours worked, rounded half-up to two decimal places.

    >>> from datetime import timedelta
    >>> t0 = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)
    >>> compute_total_hours(t0, t0 + timedelta(milliseconds=5_400_000))
    Decimal('1.50')
    """
    ms = elapsed_milliseconds(check_in, check_out)
    hours = Decimal(ms) / Decimal(MS_PER_HOUR)
    return hours.quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)
