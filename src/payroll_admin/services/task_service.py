"""Task and leave request data access."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select

from payroll_admin.models import LeaveRequest, Task
from payroll_admin.services.base import BaseService, present

DEFAULT_TASK_STATUS = "pending"
DEFAULT_TASK_PRIORITY = "medium"
INITIAL_LEAVE_STATUS = "pending"


class TaskService(BaseService):
    """Tasks assigned to employees."""

    async def list_for_employee(self, employee_id: int) -> list[Task]:
        """Tasks by due date, soonest first."""
        query = (
            select(Task)
            .where(Task.employee_id == employee_id)
            .order_by(Task.due_date.asc())
        )
        return await self.fetch_all(query)

    async def create_task(
        self,
        *,
        employee_id: int | None = None,
        title: str | None = None,
        description: str | None = None,
        status: str | None = None,
        priority: str | None = None,
        due_date: date | None = None,
    ) -> Task:
        task = Task(
            **present(
                {
                    "employee_id": employee_id,
                    "title": title,
                    "description": description,
                    "status": status or DEFAULT_TASK_STATUS,
                    "priority": priority or DEFAULT_TASK_PRIORITY,
                    "due_date": due_date,
                }
            )
        )
        return await self.insert(task)

    async def update_status(self, task_id: int, status: str | None) -> Task:
        """Set a task's status. Raises RecordNotFoundError for unknown ids."""
        return await self.update_by_id(Task, task_id, {"status": status})


class LeaveRequestService(BaseService):
    """Leave requests and their approval status."""

    async def list_for_employee(self, employee_id: int) -> list[LeaveRequest]:
        """Requests with the latest start date first."""
        query = (
            select(LeaveRequest)
            .where(LeaveRequest.employee_id == employee_id)
            .order_by(LeaveRequest.start_date.desc())
        )
        return await self.fetch_all(query)

    async def create_request(
        self,
        *,
        employee_id: int | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        leave_type: str | None = None,
        reason: str | None = None,
    ) -> LeaveRequest:
        """File a request; status always starts as pending."""
        request = LeaveRequest(
            **present(
                {
                    "employee_id": employee_id,
                    "start_date": start_date,
                    "end_date": end_date,
                    "leave_type": leave_type,
                    "reason": reason,
                    "status": INITIAL_LEAVE_STATUS,
                }
            )
        )
        return await self.insert(request)

    async def update_status(
        self,
        request_id: int,
        status: str | None,
        approved_by: str | None = None,
    ) -> LeaveRequest:
        return await self.update_by_id(
            LeaveRequest,
            request_id,
            {"status": status, "approved_by": approved_by},
        )
