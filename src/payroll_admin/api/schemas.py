"""Pydantic schemas for API request/response models.

Request bodies use the camelCase keys the front-end sends; every field is
optional and passed through to the store unchanged. Responses mirror the
stored rows with snake_case keys.
"""

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestBody(BaseModel):
    """Base for request bodies: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordResponse(BaseModel):
    """Base for responses built from ORM rows."""

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    """Error envelope."""

    error: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


# ============================================================================
# Employee schemas
# ============================================================================


class EmployeeCreate(RequestBody):
    """Schema for creating an employee."""

    code: str | None = None
    name: str | None = None
    job_title: str | None = None
    basic_salary: Decimal | None = None
    work_days: int | None = None
    daily_work_hours: Decimal | None = None
    monthly_incentives: Decimal | None = None
    date_added: dt.date | None = None


class EmployeeResponse(RecordResponse):
    id: int
    code: str
    name: str
    job_title: str | None = None
    basic_salary: Decimal | None = None
    work_days: int | None = None
    daily_work_hours: Decimal | None = None
    monthly_incentives: Decimal | None = None
    date_added: dt.date | None = None
    created_at: dt.datetime


# ============================================================================
# Advance and salary report schemas
# ============================================================================


class AdvanceCreate(RequestBody):
    """Schema for recording a cash advance."""

    employee_id: int | None = None
    amount: Decimal | None = None
    date: dt.date | None = None
    remaining_amount: Decimal | None = None
    notes: str | None = None
    is_paid: bool | None = None
    created_at: dt.datetime | None = None


class AdvanceResponse(RecordResponse):
    id: int
    employee_id: int
    amount: Decimal
    date: dt.date | None = None
    remaining_amount: Decimal | None = None
    notes: str | None = None
    is_paid: bool
    created_at: dt.datetime


class SalaryReportCreate(RequestBody):
    """Schema for storing a monthly salary report."""

    employee_id: int | None = None
    month: str | None = None
    basic_salary: Decimal | None = None
    advances_deduction: Decimal | None = None
    other_deductions: Decimal | None = None
    bonuses: Decimal | None = None
    net_salary: Decimal | None = None


class SalaryReportResponse(RecordResponse):
    id: int
    employee_id: int
    month: str
    basic_salary: Decimal | None = None
    advances_deduction: Decimal | None = None
    other_deductions: Decimal | None = None
    bonuses: Decimal | None = None
    net_salary: Decimal | None = None
    created_at: dt.datetime


# ============================================================================
# Backup history schemas
# ============================================================================


class BackupCreate(RequestBody):
    """Backup event as reported by the client (date/type map to backup_*)."""

    date: dt.datetime | None = None
    type: str | None = None
    status: str | None = None
    notes: str | None = None


class BackupResponse(RecordResponse):
    id: int
    backup_date: dt.datetime | None = None
    backup_type: str | None = None
    status: str | None = None
    notes: str | None = None
    created_at: dt.datetime


# ============================================================================
# Time entry schemas
# ============================================================================


class TimeEntryCreate(RequestBody):
    """Check-in only, or a complete session when checkOut is also given."""

    employee_id: int | None = None
    check_in: dt.datetime | None = None
    check_out: dt.datetime | None = None
    total_hours: Decimal | None = None
    notes: str | None = None


class TimeEntryResponse(RecordResponse):
    id: int
    employee_id: int
    check_in: dt.datetime
    check_out: dt.datetime | None = None
    total_hours: Decimal | None = None
    notes: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime | None = None


# ============================================================================
# Task and leave request schemas
# ============================================================================


class TaskCreate(RequestBody):
    employee_id: int | None = None
    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: dt.date | None = None


class TaskStatusUpdate(RequestBody):
    status: str | None = None


class TaskResponse(RecordResponse):
    id: int
    employee_id: int
    title: str
    description: str | None = None
    status: str
    priority: str
    due_date: dt.date | None = None
    created_at: dt.datetime
    updated_at: dt.datetime | None = None


class LeaveRequestCreate(RequestBody):
    employee_id: int | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    leave_type: str | None = None
    reason: str | None = None


class LeaveStatusUpdate(RequestBody):
    status: str | None = None
    approved_by: str | None = None


class LeaveRequestResponse(RecordResponse):
    id: int
    employee_id: int
    start_date: dt.date
    end_date: dt.date
    leave_type: str | None = None
    reason: str | None = None
    status: str
    approved_by: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime | None = None


# ============================================================================
# Preference schemas
# ============================================================================


class DashboardConfigSave(RequestBody):
    user_id: str | None = None
    layout: Any = None
    user_preferences: Any = None


class DashboardConfigResponse(RecordResponse):
    id: int
    user_id: str
    layout: Any = None
    user_preferences: Any = None
    created_at: dt.datetime
    updated_at: dt.datetime | None = None


class ThemePreferenceSave(RequestBody):
    user_id: str | None = None
    dark_mode: bool | None = None
    theme_color: str | None = None


class ThemePreferenceResponse(RecordResponse):
    id: int
    user_id: str
    dark_mode: bool | None = None
    theme_color: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime | None = None


# ============================================================================
# Analytics schemas
# ============================================================================


class AnalyticsCreate(RequestBody):
    report_type: str | None = None
    report_date: dt.date | None = None
    data: Any = None


class AnalyticsResponse(RecordResponse):
    id: int
    report_type: str
    report_date: dt.date
    data: Any = None
    created_at: dt.datetime
