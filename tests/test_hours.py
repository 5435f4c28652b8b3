"""Tests for the check-out hours calculation."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from payroll_admin.calculators.hours import (
    as_utc,
    compute_total_hours,
    elapsed_milliseconds,
)

T0 = datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc)


class TestComputeTotalHours:
    """Elapsed hours rounded to two decimals."""

    def test_ninety_minutes(self):
        """5,400,000 ms is exactly 1.50 hours."""
        check_out = T0 + timedelta(milliseconds=5_400_000)
        assert compute_total_hours(T0, check_out) == Decimal("1.50")

    def test_full_shift(self):
        assert compute_total_hours(T0, T0 + timedelta(hours=8)) == Decimal("8.00")

    def test_rounds_half_up(self):
        # 1 minute = 0.01666... hours
        assert compute_total_hours(T0, T0 + timedelta(minutes=1)) == Decimal("0.02")
        # 18 seconds = 0.005 hours exactly
        assert compute_total_hours(T0, T0 + timedelta(seconds=18)) == Decimal("0.01")
        # 17 seconds = 0.00472 hours
        assert compute_total_hours(T0, T0 + timedelta(seconds=17)) == Decimal("0.00")

    def test_result_has_two_decimal_places(self):
        result = compute_total_hours(T0, T0 + timedelta(hours=2, minutes=20))
        assert result == Decimal("2.33")
        assert result.as_tuple().exponent == -2

    def test_same_instant_is_zero(self):
        assert compute_total_hours(T0, T0) == Decimal("0.00")

    def test_check_out_before_check_in_is_negative(self):
        assert compute_total_hours(T0, T0 - timedelta(minutes=30)) == Decimal("-0.50")

    def test_naive_check_in_is_treated_as_utc(self):
        """Naive timestamps are read as UTC."""
        naive_check_in = datetime(2026, 1, 5, 8, 0)
        check_out = T0 + timedelta(hours=1, minutes=15)
        assert compute_total_hours(naive_check_in, check_out) == Decimal("1.25")

    def test_other_timezones(self):
        cairo = timezone(timedelta(hours=2))
        check_in = datetime(2026, 1, 5, 10, 0, tzinfo=cairo)  # 08:00 UTC
        assert compute_total_hours(check_in, T0 + timedelta(hours=3)) == Decimal("3.00")


class TestElapsedMilliseconds:
    def test_truncates_microseconds(self):
        end = T0 + timedelta(milliseconds=1500, microseconds=999)
        assert elapsed_milliseconds(T0, end) == 1500

    def test_spans_days(self):
        assert elapsed_milliseconds(T0, T0 + timedelta(days=1, seconds=1)) == 86_401_000


def test_as_utc_keeps_aware_values():
    assert as_utc(T0) is T0
    assert as_utc(datetime(2026, 1, 5, 8, 0)).tzinfo is timezone.utc
