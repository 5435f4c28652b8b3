"""Employee, advance and salary report endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from payroll_admin.api.dependencies import Advances, Employees, SalaryReports
from payroll_admin.api.schemas import (
    AdvanceCreate,
    AdvanceResponse,
    EmployeeCreate,
    EmployeeResponse,
    ErrorResponse,
    SalaryReportCreate,
    SalaryReportResponse,
)

router = APIRouter(tags=["employees"])


# ============================================================================
# Employees
# ============================================================================


@router.get("/employees", response_model=list[EmployeeResponse])
async def list_employees(service: Employees) -> list[EmployeeResponse]:
    """All employees ordered by name."""
    employees = await service.list_employees()
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get(
    "/employees/{code}",
    response_model=EmployeeResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_employee(
    service: Employees,
    code: Annotated[str, Path()],
) -> EmployeeResponse:
    """Look up one employee by code."""
    employee = await service.get_by_code(code)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    return EmployeeResponse.model_validate(employee)


@router.post(
    "/employees",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(service: Employees, payload: EmployeeCreate) -> EmployeeResponse:
    employee = await service.create_employee(**payload.model_dump())
    return EmployeeResponse.model_validate(employee)


# ============================================================================
# Advances
# ============================================================================


@router.get("/advances/{employee_id}", response_model=list[AdvanceResponse])
async def list_advances(
    service: Advances,
    employee_id: Annotated[int, Path()],
) -> list[AdvanceResponse]:
    """Advances for an employee, newest first."""
    advances = await service.list_for_employee(employee_id)
    return [AdvanceResponse.model_validate(a) for a in advances]


@router.post(
    "/advances",
    response_model=AdvanceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_advance(service: Advances, payload: AdvanceCreate) -> AdvanceResponse:
    advance = await service.create_advance(**payload.model_dump())
    return AdvanceResponse.model_validate(advance)


# ============================================================================
# Salary reports
# ============================================================================


@router.get("/salary-reports/{employee_id}", response_model=list[SalaryReportResponse])
async def list_salary_reports(
    service: SalaryReports,
    employee_id: Annotated[int, Path()],
) -> list[SalaryReportResponse]:
    """Salary reports for an employee, newest month first."""
    reports = await service.list_for_employee(employee_id)
    return [SalaryReportResponse.model_validate(r) for r in reports]


@router.post(
    "/salary-reports",
    response_model=SalaryReportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_salary_report(
    service: SalaryReports,
    payload: SalaryReportCreate,
) -> SalaryReportResponse:
    report = await service.create_report(**payload.model_dump())
    return SalaryReportResponse.model_validate(report)
