"""Backup history and analytics endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from payroll_admin.api.dependencies import Analytics, Backups
from payroll_admin.api.schemas import (
    AnalyticsCreate,
    AnalyticsResponse,
    BackupCreate,
    BackupResponse,
)

router = APIRouter(tags=["records"])


@router.post(
    "/backup-history",
    response_model=BackupResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_backup(service: Backups, payload: BackupCreate) -> BackupResponse:
    """Log a backup run reported by the client."""
    record = await service.record_backup(
        backup_date=payload.date,
        backup_type=payload.type,
        status=payload.status,
        notes=payload.notes,
    )
    return BackupResponse.model_validate(record)


@router.get("/analytics/{report_type}", response_model=list[AnalyticsResponse])
async def list_analytics(
    service: Analytics,
    report_type: Annotated[str, Path()],
    start_date: Annotated[date | None, Query(alias="startDate")] = None,
    end_date: Annotated[date | None, Query(alias="endDate")] = None,
) -> list[AnalyticsResponse]:
    """Reports of one type, latest first, optionally bounded by report date."""
    reports = await service.list_reports(report_type, start_date, end_date)
    return [AnalyticsResponse.model_validate(r) for r in reports]


@router.post(
    "/analytics",
    response_model=AnalyticsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def save_analytics(service: Analytics, payload: AnalyticsCreate) -> AnalyticsResponse:
    report = await service.save_report(payload.report_type, payload.report_date, payload.data)
    return AnalyticsResponse.model_validate(report)
