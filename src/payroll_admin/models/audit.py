"""Backup history and analytics snapshot models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from payroll_admin.models.base import Base, JSONType, TimestampMixin, UTCDateTime


class BackupRecord(Base, TimestampMixin):
    """Audit log entry for a backup run."""

    __tablename__ = "backup_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    backup_date: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    backup_type: Mapped[str | None] = mapped_column(String, nullable=True)
    status: Mapped[str | None] = mapped_column(String, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class AnalyticsData(Base, TimestampMixin):
    """Stored analytics report payload."""

    __tablename__ = "analytics_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    report_type: Mapped[str] = mapped_column(String, nullable=False, index=True)
    report_date: Mapped[date] = mapped_column(Date, nullable=False)
    data: Mapped[Any | None] = mapped_column(JSONType, nullable=True)
