"""Derived-value calculations."""

from payroll_admin.calculators.hours import as_utc, compute_total_hours, elapsed_milliseconds

__all__ = [
    "as_utc",
    "compute_total_hours",
    "elapsed_milliseconds",
]
