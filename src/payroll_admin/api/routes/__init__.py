"""API routes."""

from payroll_admin.api.routes.employees import router as employees_router
from payroll_admin.api.routes.health import router as health_router
from payroll_admin.api.routes.preferences import router as preferences_router
from payroll_admin.api.routes.records import router as records_router
from payroll_admin.api.routes.tasks import router as tasks_router
from payroll_admin.api.routes.time_entries import router as time_entries_router

__all__ = [
    "employees_router",
    "health_router",
    "preferences_router",
    "records_router",
    "tasks_router",
    "time_entries_router",
]
