"""Salary slip normalization engine."""

from payslip_engine.calculators import (
    CompensationPolicy,
    InvalidPayrollInput,
    PFApplicability,
    SalaryComputationEngine,
    normalize_salary_slip,
)

__version__ = "0.1.0"

__all__ = [
    "CompensationPolicy",
    "InvalidPayrollInput",
    "PFApplicability",
    "SalaryComputationEngine",
    "normalize_salary_slip",
]
