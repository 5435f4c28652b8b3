"""Data-access services, one per table family."""

from payroll_admin.services.audit_service import AnalyticsService, BackupService
from payroll_admin.services.base import BaseService, Clock, utcnow
from payroll_admin.services.employee_service import (
    AdvanceService,
    EmployeeService,
    SalaryReportService,
)
from payroll_admin.services.preference_service import (
    DashboardConfigService,
    ThemePreferenceService,
)
from payroll_admin.services.task_service import LeaveRequestService, TaskService
from payroll_admin.services.time_entry_service import TimeEntryService

__all__ = [
    "AdvanceService",
    "AnalyticsService",
    "BackupService",
    "BaseService",
    "Clock",
    "DashboardConfigService",
    "EmployeeService",
    "LeaveRequestService",
    "SalaryReportService",
    "TaskService",
    "ThemePreferenceService",
    "TimeEntryService",
    "utcnow",
]
