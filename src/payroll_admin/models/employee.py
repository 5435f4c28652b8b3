"""Employee, cash advance and salary report models."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from payroll_admin.models.base import Base, TimestampMixin


class Employee(Base, TimestampMixin):
    """Employee record."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    job_title: Mapped[str | None] = mapped_column(String, nullable=True)
    basic_salary: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    work_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    daily_work_hours: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    monthly_incentives: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    date_added: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    __table_args__ = (UniqueConstraint("code", name="employees_code_unique"),)


class Advance(Base, TimestampMixin):
    """Cash advance against an employee's future salary."""

    __tablename__ = "advances"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    remaining_amount: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)
    is_paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class SalaryReport(Base, TimestampMixin):
    """Monthly payroll summary stored as a snapshot."""

    __tablename__ = "salary_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # YYYY-MM, sorts chronologically as text
    month: Mapped[str] = mapped_column(String, nullable=False)
    basic_salary: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    advances_deduction: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    other_deductions: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    bonuses: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    net_salary: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
