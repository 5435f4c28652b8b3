"""ORM models."""

from payroll_admin.models.audit import AnalyticsData, BackupRecord
from payroll_admin.models.base import Base, TimestampMixin, UpdatedAtMixin, UTCDateTime
from payroll_admin.models.employee import Advance, Employee, SalaryReport
from payroll_admin.models.preferences import DashboardConfig, ThemePreference
from payroll_admin.models.tracking import LeaveRequest, Task, TimeEntry

__all__ = [
    "Advance",
    "AnalyticsData",
    "BackupRecord",
    "Base",
    "DashboardConfig",
    "Employee",
    "LeaveRequest",
    "SalaryReport",
    "Task",
    "ThemePreference",
    "TimeEntry",
    "TimestampMixin",
    "UpdatedAtMixin",
    "UTCDateTime",
]
