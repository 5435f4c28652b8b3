"""Employee, advance and salary report data access."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import select

from payroll_admin.models import Advance, Employee, SalaryReport
from payroll_admin.services.base import BaseService, present


class EmployeeService(BaseService):
    """Read and create employee records."""

    async def list_employees(self) -> list[Employee]:
        """All employees ordered by name."""
        return await self.fetch_all(select(Employee).order_by(Employee.name))

    async def get_by_code(self, code: str) -> Employee | None:
        """Employee with the given code, or None."""
        return await self.fetch_one_or_none(select(Employee).where(Employee.code == code))

    async def create_employee(
        self,
        *,
        code: str | None = None,
        name: str | None = None,
        job_title: str | None = None,
        basic_salary: Decimal | None = None,
        work_days: int | None = None,
        daily_work_hours: Decimal | None = None,
        monthly_incentives: Decimal | None = None,
        date_added: date | None = None,
    ) -> Employee:
        employee = Employee(
            **present(
                {
                    "code": code,
                    "name": name,
                    "job_title": job_title,
                    "basic_salary": basic_salary,
                    "work_days": work_days,
                    "daily_work_hours": daily_work_hours,
                    "monthly_incentives": monthly_incentives,
                    "date_added": date_added,
                }
            )
        )
        return await self.insert(employee)


class AdvanceService(BaseService):
    """Cash advances for an employee."""

    async def list_for_employee(self, employee_id: int) -> list[Advance]:
        """Advances newest first."""
        query = (
            select(Advance)
            .where(Advance.employee_id == employee_id)
            .order_by(Advance.date.desc())
        )
        return await self.fetch_all(query)

    async def create_advance(
        self,
        *,
        employee_id: int | None = None,
        amount: Decimal | None = None,
        date: date | None = None,
        remaining_amount: Decimal | None = None,
        notes: str | None = None,
        is_paid: bool | None = None,
        created_at: datetime | None = None,
    ) -> Advance:
        """Record an advance; created_at is kept when the caller supplies it."""
        advance = Advance(
            **present(
                {
                    "employee_id": employee_id,
                    "amount": amount,
                    "date": date,
                    "remaining_amount": remaining_amount,
                    "notes": notes,
                    "is_paid": is_paid,
                    "created_at": created_at,
                }
            )
        )
        return await self.insert(advance)


class SalaryReportService(BaseService):
    """Monthly salary report snapshots."""

    async def list_for_employee(self, employee_id: int) -> list[SalaryReport]:
        """Reports newest month first."""
        query = (
            select(SalaryReport)
            .where(SalaryReport.employee_id == employee_id)
            .order_by(SalaryReport.month.desc())
        )
        return await self.fetch_all(query)

    async def create_report(
        self,
        *,
        employee_id: int | None = None,
        month: str | None = None,
        basic_salary: Decimal | None = None,
        advances_deduction: Decimal | None = None,
        other_deductions: Decimal | None = None,
        bonuses: Decimal | None = None,
        net_salary: Decimal | None = None,
    ) -> SalaryReport:
        report = SalaryReport(
            **present(
                {
                    "employee_id": employee_id,
                    "month": month,
                    "basic_salary": basic_salary,
                    "advances_deduction": advances_deduction,
                    "other_deductions": other_deductions,
                    "bonuses": bonuses,
                    "net_salary": net_salary,
                }
            )
        )
        return await self.insert(report)
