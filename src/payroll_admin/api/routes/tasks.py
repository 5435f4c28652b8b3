"""Task and leave request endpoints."""

from typing import Annotated

from fastapi import APIRouter, Path, status

from payroll_admin.api.dependencies import LeaveRequests, Tasks
from payroll_admin.api.schemas import (
    LeaveRequestCreate,
    LeaveRequestResponse,
    LeaveStatusUpdate,
    TaskCreate,
    TaskResponse,
    TaskStatusUpdate,
)

router = APIRouter(tags=["tasks"])


@router.get("/tasks/{employee_id}", response_model=list[TaskResponse])
async def list_tasks(
    service: Tasks,
    employee_id: Annotated[int, Path()],
) -> list[TaskResponse]:
    """Tasks for an employee by due date."""
    tasks = await service.list_for_employee(employee_id)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(service: Tasks, payload: TaskCreate) -> TaskResponse:
    task = await service.create_task(**payload.model_dump())
    return TaskResponse.model_validate(task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task_status(
    service: Tasks,
    task_id: Annotated[int, Path()],
    payload: TaskStatusUpdate,
) -> TaskResponse:
    task = await service.update_status(task_id, payload.status)
    return TaskResponse.model_validate(task)


@router.get("/leave-requests/{employee_id}", response_model=list[LeaveRequestResponse])
async def list_leave_requests(
    service: LeaveRequests,
    employee_id: Annotated[int, Path()],
) -> list[LeaveRequestResponse]:
    """Leave requests for an employee, latest start date first."""
    requests = await service.list_for_employee(employee_id)
    return [LeaveRequestResponse.model_validate(r) for r in requests]


@router.post(
    "/leave-requests",
    response_model=LeaveRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_leave_request(
    service: LeaveRequests,
    payload: LeaveRequestCreate,
) -> LeaveRequestResponse:
    request = await service.create_request(**payload.model_dump())
    return LeaveRequestResponse.model_validate(request)


@router.put("/leave-requests/{request_id}", response_model=LeaveRequestResponse)
async def update_leave_status(
    service: LeaveRequests,
    request_id: Annotated[int, Path()],
    payload: LeaveStatusUpdate,
) -> LeaveRequestResponse:
    """Approve, reject or otherwise re-status a leave request."""
    request = await service.update_status(request_id, payload.status, payload.approved_by)
    return LeaveRequestResponse.model_validate(request)
