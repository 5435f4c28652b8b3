"""Backup history and analytics report data access."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import select

from payroll_admin.models import AnalyticsData, BackupRecord
from payroll_admin.services.base import BaseService, present


class BackupService(BaseService):
    """Append-only log of backup runs."""

    async def record_backup(
        self,
        *,
        backup_date: datetime | None = None,
        backup_type: str | None = None,
        status: str | None = None,
        notes: str | None = None,
    ) -> BackupRecord:
        record = BackupRecord(
            **present(
                {
                    "backup_date": backup_date,
                    "backup_type": backup_type,
                    "status": status,
                    "notes": notes,
                }
            )
        )
        return await self.insert(record)


class AnalyticsService(BaseService):
    """Stored analytics report payloads."""

    async def save_report(
        self,
        report_type: str | None,
        report_date: date | None,
        data: Any = None,
    ) -> AnalyticsData:
        record = AnalyticsData(
            **present(
                {"report_type": report_type, "report_date": report_date, "data": data}
            )
        )
        return await self.insert(record)

    async def list_reports(
        self,
        report_type: str,
        start: date | None = None,
        end: date | None = None,
    ) -> list[AnalyticsData]:
        """Reports of one type, latest report date first."""
        query = select(AnalyticsData).where(AnalyticsData.report_type == report_type)
        if start is not None:
            query = query.where(AnalyticsData.report_date >= start)
        if end is not None:
            query = query.where(AnalyticsData.report_date <= end)
        query = query.order_by(AnalyticsData.report_date.desc())
        return await self.fetch_all(query)
