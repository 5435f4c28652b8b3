"""Time tracking data access."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import delete, select

from payroll_admin.calculators.hours import compute_total_hours
from payroll_admin.errors import RecordNotFoundError
from payroll_admin.models import TimeEntry
from payroll_admin.services.base import BaseService, present

logger = logging.getLogger(__name__)


class TimeEntryService(BaseService):
    """Check-in/check-out sessions for employees.

    Operations:
    - list_for_employee: entries newest first, optionally bounded by check-in time
    - check_in: open a session at the current clock time
    - record_complete: store a finished session in one insert
    - check_out: close a session and derive total_hours
    - delete_entry: remove a session
    """

    async def list_for_employee(
        self,
        employee_id: int,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TimeEntry]:
        query = select(TimeEntry).where(TimeEntry.employee_id == employee_id)
        if start is not None:
            query = query.where(TimeEntry.check_in >= start)
        if end is not None:
            query = query.where(TimeEntry.check_in <= end)
        query = query.order_by(TimeEntry.check_in.desc())
        return await self.fetch_all(query)

    async def check_in(self, employee_id: int | None, notes: str | None = None) -> TimeEntry:
        """Open a session; check_out and total_hours stay null."""
        entry = TimeEntry(
            **present(
                {
                    "employee_id": employee_id,
                    "check_in": self.clock(),
                    "notes": notes,
                }
            )
        )
        return await self.insert(entry)

    async def record_complete(
        self,
        *,
        employee_id: int | None,
        check_in: datetime,
        check_out: datetime,
        total_hours: Decimal | None = None,
        notes: str | None = None,
    ) -> TimeEntry:
        """Store a session with both timestamps.

        total_hours is derived from the timestamps when not supplied.
        """
        if total_hours is None:
            total_hours = compute_total_hours(check_in, check_out)
        entry = TimeEntry(
            **present(
                {
                    "employee_id": employee_id,
                    "check_in": check_in,
                    "check_out": check_out,
                    "total_hours": total_hours,
                    "notes": notes,
                }
            )
        )
        return await self.insert(entry)

    async def check_out(self, entry_id: int) -> TimeEntry:
        """Close a session at the current clock time.

        The read and the write share one transaction; the row is locked with
        FOR UPDATE on dialects that support it.

        Raises RecordNotFoundError if the entry does not exist.
        """
        async with self.translate_errors():
            entry = await self.session.get(TimeEntry, entry_id, with_for_update=True)
            if entry is None:
                raise RecordNotFoundError(TimeEntry.__tablename__, entry_id)

            check_out_time = self.clock()
            entry.check_out = check_out_time
            entry.total_hours = compute_total_hours(entry.check_in, check_out_time)
            entry.updated_at = check_out_time
            await self.session.commit()
            await self.session.refresh(entry)

        logger.info(
            "Checked out time entry %s after %s hours", entry_id, entry.total_hours
        )
        return entry

    async def delete_entry(self, entry_id: int) -> None:
        """Delete an entry; a missing id is not an error."""
        async with self.translate_errors():
            result = await self.session.execute(
                delete(TimeEntry).where(TimeEntry.id == entry_id)
            )
            await self.session.commit()
        logger.debug("Deleted %s time entry row(s) for id %s", result.rowcount, entry_id)
