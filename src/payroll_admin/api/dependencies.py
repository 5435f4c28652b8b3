"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated, Any, TypeVar

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_admin.services import (
    AdvanceService,
    AnalyticsService,
    BackupService,
    BaseService,
    Clock,
    DashboardConfigService,
    EmployeeService,
    LeaveRequestService,
    SalaryReportService,
    TaskService,
    ThemePreferenceService,
    TimeEntryService,
    utcnow,
)

ServiceT = TypeVar("ServiceT", bound=BaseService)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Session from the factory created at startup."""
    factory = request.app.state.session_factory
    async with factory() as session:
        yield session


def get_clock() -> Clock:
    """Clock used for check-in/check-out and updated_at stamps."""
    return utcnow


DbSession = Annotated[AsyncSession, Depends(get_db_session)]
ClockFn = Annotated[Clock, Depends(get_clock)]


def provide(service_cls: type[ServiceT]) -> Any:
    """Depends() marker building service_cls for the request's session."""

    def build(db: DbSession, clock: ClockFn) -> ServiceT:
        return service_cls(db, clock)

    return Depends(build)


# Type aliases for cleaner dependency injection
Employees = Annotated[EmployeeService, provide(EmployeeService)]
Advances = Annotated[AdvanceService, provide(AdvanceService)]
SalaryReports = Annotated[SalaryReportService, provide(SalaryReportService)]
Backups = Annotated[BackupService, provide(BackupService)]
TimeEntries = Annotated[TimeEntryService, provide(TimeEntryService)]
Tasks = Annotated[TaskService, provide(TaskService)]
LeaveRequests = Annotated[LeaveRequestService, provide(LeaveRequestService)]
DashboardConfigs = Annotated[DashboardConfigService, provide(DashboardConfigService)]
ThemePreferences = Annotated[ThemePreferenceService, provide(ThemePreferenceService)]
Analytics = Annotated[AnalyticsService, provide(AnalyticsService)]
