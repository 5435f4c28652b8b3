"""Time tracking endpoints."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, status

from payroll_admin.api.dependencies import TimeEntries
from payroll_admin.api.schemas import (
    ErrorResponse,
    MessageResponse,
    TimeEntryCreate,
    TimeEntryResponse,
)

router = APIRouter(prefix="/time-entries", tags=["time-entries"])


@router.get("/{employee_id}", response_model=list[TimeEntryResponse])
async def list_time_entries(
    service: TimeEntries,
    employee_id: Annotated[int, Path()],
    start_date: Annotated[datetime | None, Query(alias="startDate")] = None,
    end_date: Annotated[datetime | None, Query(alias="endDate")] = None,
) -> list[TimeEntryResponse]:
    """Entries for an employee, newest check-in first."""
    entries = await service.list_for_employee(employee_id, start_date, end_date)
    return [TimeEntryResponse.model_validate(e) for e in entries]


@router.post(
    "",
    response_model=TimeEntryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_time_entry(
    service: TimeEntries,
    payload: TimeEntryCreate,
) -> TimeEntryResponse:
    """Record a complete session, or check in at server time."""
    if payload.check_in and payload.check_out:
        entry = await service.record_complete(
            employee_id=payload.employee_id,
            check_in=payload.check_in,
            check_out=payload.check_out,
            total_hours=payload.total_hours,
            notes=payload.notes,
        )
    elif payload.check_in:
        entry = await service.check_in(payload.employee_id, payload.notes)
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="checkIn is required",
        )
    return TimeEntryResponse.model_validate(entry)


@router.put("/{entry_id}/checkout", response_model=TimeEntryResponse)
async def check_out(
    service: TimeEntries,
    entry_id: Annotated[int, Path()],
) -> TimeEntryResponse:
    entry = await service.check_out(entry_id)
    return TimeEntryResponse.model_validate(entry)


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_time_entry(
    service: TimeEntries,
    entry_id: Annotated[int, Path()],
) -> MessageResponse:
    await service.delete_entry(entry_id)
    return MessageResponse(message="Time entry deleted successfully")
