"""Tests for the employee, advance, salary, task, leave and audit services."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_admin.errors import DataStoreError, RecordNotFoundError
from payroll_admin.models import Employee
from payroll_admin.services import (
    AdvanceService,
    AnalyticsService,
    BackupService,
    EmployeeService,
    LeaveRequestService,
    SalaryReportService,
    TaskService,
)


async def make_employee(session: AsyncSession, code: str = "E001", name: str = "Alice") -> Employee:
    return await EmployeeService(session).create_employee(
        code=code,
        name=name,
        job_title="Accountant",
        basic_salary=Decimal("4500.00"),
        work_days=22,
        daily_work_hours=Decimal("8"),
        monthly_incentives=Decimal("250.00"),
        date_added=date(2026, 1, 2),
    )


class TestEmployeeService:
    async def test_create_assigns_id_and_timestamp(self, session: AsyncSession):
        employee = await make_employee(session)

        assert employee.id is not None
        assert employee.created_at is not None
        assert employee.job_title == "Accountant"
        assert employee.basic_salary == Decimal("4500.00")

    async def test_get_by_code(self, session: AsyncSession):
        created = await make_employee(session, code="E042")
        service = EmployeeService(session)

        found = await service.get_by_code("E042")

        assert found is not None
        assert found.id == created.id
        assert found.name == "Alice"

    async def test_get_by_unknown_code_is_none(self, session: AsyncSession):
        assert await EmployeeService(session).get_by_code("missing") is None

    async def test_list_is_ordered_by_name(self, session: AsyncSession):
        await make_employee(session, code="E1", name="Zoe")
        await make_employee(session, code="E2", name="Adam")
        await make_employee(session, code="E3", name="Mona")

        employees = await EmployeeService(session).list_employees()

        assert [e.name for e in employees] == ["Adam", "Mona", "Zoe"]

    async def test_duplicate_code_raises_datastore_error(self, session: AsyncSession):
        await make_employee(session, code="DUP")

        with pytest.raises(DataStoreError) as exc_info:
            await make_employee(session, code="DUP", name="Bob")

        assert "UNIQUE" in exc_info.value.message
        # Session is usable again after the rollback
        count = await session.scalar(select(func.count()).select_from(Employee))
        assert count == 1

    async def test_missing_required_field_raises_datastore_error(self, session: AsyncSession):
        with pytest.raises(DataStoreError) as exc_info:
            await EmployeeService(session).create_employee(name="No Code")

        assert "NOT NULL" in exc_info.value.message


class TestAdvanceService:
    async def test_create_and_list_newest_first(self, session: AsyncSession):
        employee = await make_employee(session)
        service = AdvanceService(session)

        await service.create_advance(
            employee_id=employee.id,
            amount=Decimal("300.00"),
            date=date(2026, 1, 10),
            remaining_amount=Decimal("300.00"),
            notes="January",
        )
        await service.create_advance(
            employee_id=employee.id,
            amount=Decimal("150.00"),
            date=date(2026, 2, 10),
            remaining_amount=Decimal("50.00"),
            is_paid=True,
        )

        advances = await service.list_for_employee(employee.id)

        assert [a.date for a in advances] == [date(2026, 2, 10), date(2026, 1, 10)]
        assert advances[0].is_paid is True
        assert advances[1].is_paid is False
        assert advances[1].notes == "January"
        assert all(a.id is not None and a.created_at is not None for a in advances)

    async def test_supplied_created_at_is_kept(self, session: AsyncSession):
        employee = await make_employee(session)
        created_at = datetime(2025, 12, 31, 9, 30, tzinfo=timezone.utc)

        advance = await AdvanceService(session).create_advance(
            employee_id=employee.id,
            amount=Decimal("100.00"),
            created_at=created_at,
        )

        assert advance.created_at.replace(tzinfo=None) == datetime(2025, 12, 31, 9, 30)

    async def test_other_employees_are_excluded(self, session: AsyncSession):
        alice = await make_employee(session, code="A", name="Alice")
        bob = await make_employee(session, code="B", name="Bob")
        service = AdvanceService(session)
        await service.create_advance(employee_id=alice.id, amount=Decimal("10"))

        assert await service.list_for_employee(bob.id) == []


class TestSalaryReportService:
    async def test_list_newest_month_first(self, session: AsyncSession):
        employee = await make_employee(session)
        service = SalaryReportService(session)

        for month in ("2025-11", "2026-01", "2025-12"):
            await service.create_report(
                employee_id=employee.id,
                month=month,
                basic_salary=Decimal("4500.00"),
                advances_deduction=Decimal("300.00"),
                other_deductions=Decimal("0.00"),
                bonuses=Decimal("250.00"),
                net_salary=Decimal("4450.00"),
            )

        reports = await service.list_for_employee(employee.id)

        assert [r.month for r in reports] == ["2026-01", "2025-12", "2025-11"]
        assert reports[0].net_salary == Decimal("4450.00")


class TestTaskService:
    async def test_defaults_status_and_priority(self, session: AsyncSession):
        employee = await make_employee(session)

        task = await TaskService(session).create_task(employee_id=employee.id, title="File report")

        assert task.status == "pending"
        assert task.priority == "medium"

    async def test_explicit_status_and_priority_are_kept(self, session: AsyncSession):
        employee = await make_employee(session)

        task = await TaskService(session).create_task(
            employee_id=employee.id,
            title="Audit",
            status="in_progress",
            priority="high",
        )

        assert task.status == "in_progress"
        assert task.priority == "high"

    async def test_list_by_due_date_ascending(self, session: AsyncSession):
        employee = await make_employee(session)
        service = TaskService(session)
        await service.create_task(employee_id=employee.id, title="later", due_date=date(2026, 3, 1))
        await service.create_task(employee_id=employee.id, title="sooner", due_date=date(2026, 1, 15))

        tasks = await service.list_for_employee(employee.id)

        assert [t.title for t in tasks] == ["sooner", "later"]

    async def test_update_status_stamps_updated_at(self, session: AsyncSession, clock):
        employee = await make_employee(session)
        service = TaskService(session, clock)
        task = await service.create_task(employee_id=employee.id, title="Payroll")

        clock.advance(hours=2)
        updated = await service.update_status(task.id, "done")

        assert updated.status == "done"
        assert updated.updated_at.replace(tzinfo=None) == clock.now.replace(tzinfo=None)

    async def test_update_missing_task_raises(self, session: AsyncSession):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await TaskService(session).update_status(999, "done")

        assert exc_info.value.table == "tasks"
        assert exc_info.value.code == "NO_ROWS"

    async def test_update_without_status_hits_not_null(self, session: AsyncSession):
        employee = await make_employee(session)
        service = TaskService(session)
        task = await service.create_task(employee_id=employee.id, title="Payroll")

        with pytest.raises(DataStoreError) as exc_info:
            await service.update_status(task.id, None)

        assert "NOT NULL" in exc_info.value.message


class TestLeaveRequestService:
    async def test_create_starts_pending(self, session: AsyncSession):
        employee = await make_employee(session)

        request = await LeaveRequestService(session).create_request(
            employee_id=employee.id,
            start_date=date(2026, 2, 1),
            end_date=date(2026, 2, 5),
            leave_type="annual",
            reason="Family trip",
        )

        assert request.status == "pending"
        assert request.approved_by is None
        assert request.id is not None

    async def test_update_status_records_approver(self, session: AsyncSession):
        employee = await make_employee(session)
        service = LeaveRequestService(session)
        request = await service.create_request(
            employee_id=employee.id,
            start_date=date(2026, 2, 1),
            end_date=date(2026, 2, 2),
        )

        approved = await service.update_status(request.id, "approved", "manager-7")

        assert approved.status == "approved"
        assert approved.approved_by == "manager-7"
        assert approved.updated_at is not None

    async def test_update_without_approver_clears_it(self, session: AsyncSession):
        employee = await make_employee(session)
        service = LeaveRequestService(session)
        request = await service.create_request(
            employee_id=employee.id,
            start_date=date(2026, 2, 1),
            end_date=date(2026, 2, 2),
        )
        await service.update_status(request.id, "approved", "manager-7")

        reopened = await service.update_status(request.id, "pending")

        assert reopened.status == "pending"
        assert reopened.approved_by is None

    async def test_list_latest_start_first(self, session: AsyncSession):
        employee = await make_employee(session)
        service = LeaveRequestService(session)
        for start in (date(2026, 1, 1), date(2026, 6, 1), date(2026, 3, 1)):
            await service.create_request(employee_id=employee.id, start_date=start, end_date=start)

        requests = await service.list_for_employee(employee.id)

        assert [r.start_date for r in requests] == [
            date(2026, 6, 1),
            date(2026, 3, 1),
            date(2026, 1, 1),
        ]


class TestAuditServices:
    async def test_record_backup(self, session: AsyncSession):
        record = await BackupService(session).record_backup(
            backup_date=datetime(2026, 1, 31, 23, 0, tzinfo=timezone.utc),
            backup_type="full",
            status="success",
            notes="Month end",
        )

        assert record.id is not None
        assert record.backup_type == "full"
        assert record.created_at is not None

    async def test_analytics_filters_by_type_and_range(self, session: AsyncSession):
        service = AnalyticsService(session)
        await service.save_report("payroll_summary", date(2026, 1, 1), {"total": 1})
        await service.save_report("payroll_summary", date(2026, 2, 1), {"total": 2})
        await service.save_report("payroll_summary", date(2026, 3, 1), {"total": 3})
        await service.save_report("attendance", date(2026, 2, 1), {"rate": 0.97})

        reports = await service.list_reports(
            "payroll_summary", start=date(2026, 1, 15), end=date(2026, 3, 1)
        )

        assert [r.report_date for r in reports] == [date(2026, 3, 1), date(2026, 2, 1)]
        assert reports[0].data == {"total": 3}
