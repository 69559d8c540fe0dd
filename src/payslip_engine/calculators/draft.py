"""Draft slip construction from employee master data."""

from __future__ import annotations

import calendar
import re
from collections.abc import Mapping
from typing import Any

from payslip_engine.calculators.engine import SalaryComputationEngine
from payslip_engine.calculators.validation import InputProblem, InvalidPayrollInput

YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

# Employee fields copied onto the slip
EMPLOYEE_FIELDS = (
    "employeeId",
    "firstName",
    "lastName",
    "email",
    "department",
    "designation",
    "baseSalary",
    "pfApplicable",
    "totalLeaves",
    "casualLeavesTotal",
    "sickLeavesTotal",
)


def parse_year_month(year_month: str) -> tuple[int, int]:
    """Parse ``YYYY-MM`` into (year, month)."""
    match = YEAR_MONTH_PATTERN.match(year_month or "")
    if match is None:
        raise InvalidPayrollInput(
            [InputProblem("yearMonth", f"expected YYYY-MM, got {year_month!r}")]
        )
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidPayrollInput(
            [InputProblem("yearMonth", f"month out of range in {year_month!r}")]
        )
    return year, month


def days_in_month(year_month: str) -> int:
    """Calendar days in the month, e.g. 29 for ``2024-02``."""
    year, month = parse_year_month(year_month)
    return calendar.monthrange(year, month)[1]


def build_draft_slip(
    employee: Mapping[str, Any],
    year_month: str,
    lop_days: int = 0,
    paid_leave_used: int = 0,
    bonus: int = 0,
    engine: SalaryComputationEngine | None = None,
) -> dict[str, Any]:
    """Build and normalize a slip for ``employee`` in ``year_month``."""
    engine = engine or SalaryComputationEngine()
    slip = {key: employee[key] for key in EMPLOYEE_FIELDS if employee.get(key) is not None}
    names = [employee.get("firstName"), employee.get("lastName")]
    employee_name = " ".join(n for n in names if n)
    if employee_name:
        slip["employeeName"] = employee_name
    slip.update(
        yearMonth=year_month,
        daysInMonth=days_in_month(year_month),
        lopDays=lop_days,
        paidLeaveUsed=paid_leave_used,
        bonus=bonus,
    )
    return engine.normalize(slip)
