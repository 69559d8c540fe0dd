"""Pytest fixtures for payslip engine tests."""

from __future__ import annotations

from typing import Any

import pytest

from payslip_engine.calculators.engine import SalaryComputationEngine


@pytest.fixture
def engine() -> SalaryComputationEngine:
    """Engine under the default compensation policy."""
    return SalaryComputationEngine()


@pytest.fixture
def sample_slip() -> dict[str, Any]:
    """A raw slip as fetched from the payroll store."""
    return {
        "employeeId": "EMP001",
        "employeeName": "Asha Rao",
        "department": "Engineering",
        "designation": "Senior Engineer",
        "yearMonth": "2026-01",
        "baseSalary": 50000,
        "pfApplicable": True,
        "lopDays": 2,
        "daysInMonth": 31,
        "bonus": 1000,
        "paidLeaveUsed": 1,
    }


@pytest.fixture
def sample_employee() -> dict[str, Any]:
    """Employee master data used to build draft slips."""
    return {
        "employeeId": "EMP002",
        "email": "ravi@example.com",
        "firstName": "Ravi",
        "lastName": "Kumar",
        "role": "employee",
        "department": "Finance",
        "designation": "Analyst",
        "baseSalary": 24000,
        "pfApplicable": False,
        "totalLeaves": 8,
        "casualLeavesTotal": 5,
        "sickLeavesTotal": 3,
        "status": "active",
    }
