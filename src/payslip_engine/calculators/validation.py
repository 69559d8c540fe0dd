"""Boundary validation for payroll input records.

The engine itself is total and accepts anything record-shaped. Callers that
accept slips from outside (the HTTP service) validate first so that negative
salaries or impossible loss-of-pay counts are rejected instead of producing
meaningless slips.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from payslip_engine.calculators.policy import DEFAULT_POLICY, CompensationPolicy
from payslip_engine.calculators.rounding import to_decimal


@dataclass(frozen=True)
class InputProblem:
    """One rejected field."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class InvalidPayrollInput(ValueError):
    """Raised when a payroll record fails boundary validation."""

    def __init__(self, problems: list[InputProblem]):
        self.problems = problems
        details = "; ".join(f"{p.field}: {p.message}" for p in problems)
        super().__init__(f"Invalid payroll input: {details}")


NON_NEGATIVE_FIELDS = ("baseSalary", "bonus", "lopDays", "paidLeaveUsed")
NUMERIC_FIELDS = NON_NEGATIVE_FIELDS + (
    "daysInMonth",
    "totalLeaves",
    "casualLeavesTotal",
    "sickLeavesTotal",
    "leavesRemaining",
)

# Largest magnitude accepted for any numeric field
MAX_MAGNITUDE = Decimal("1e12")


def find_problems(
    record: Mapping[str, Any], policy: CompensationPolicy = DEFAULT_POLICY
) -> list[InputProblem]:
    """Return every validation problem in ``record`` (empty if valid)."""
    problems: list[InputProblem] = []
    values = {}

    for name in NUMERIC_FIELDS:
        raw = record.get(name)
        if raw is None:
            continue
        value = to_decimal(raw)
        if value is None:
            problems.append(InputProblem(name, f"must be a number, got {raw!r}"))
            continue
        values[name] = value

    for name, value in values.items():
        if abs(value) > MAX_MAGNITUDE:
            problems.append(InputProblem(name, f"must not exceed {MAX_MAGNITUDE:,f}"))

    for name in NON_NEGATIVE_FIELDS:
        if name in values and values[name] < 0:
            problems.append(InputProblem(name, "must not be negative"))

    days = values.get("daysInMonth")
    if days is not None and days <= 0:
        problems.append(InputProblem("daysInMonth", "must be positive"))

    if days is None:
        days = policy.default_days_in_month
    lop_days = values.get("lopDays")
    if lop_days is not None and days > 0 and lop_days > days:
        problems.append(
            InputProblem("lopDays", f"cannot exceed daysInMonth ({days})")
        )

    return problems


def validate_payroll_input(
    record: Mapping[str, Any], policy: CompensationPolicy = DEFAULT_POLICY
) -> None:
    """Raise InvalidPayrollInput if ``record`` has any problem."""
    problems = find_problems(record, policy)
    if problems:
        raise InvalidPayrollInput(problems)
