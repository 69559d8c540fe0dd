"""Salary slip computation."""

from payslip_engine.calculators.draft import build_draft_slip, days_in_month
from payslip_engine.calculators.engine import (
    SalaryComputationEngine,
    calculate_pf,
    normalize_salary_slip,
)
from payslip_engine.calculators.policy import CompensationPolicy
from payslip_engine.calculators.summary import SalaryHistorySummary, summarize_slips
from payslip_engine.calculators.types import PFApplicability, SalarySlipInput
from payslip_engine.calculators.validation import (
    InvalidPayrollInput,
    validate_payroll_input,
)

__all__ = [
    "SalaryComputationEngine",
    "CompensationPolicy",
    "InvalidPayrollInput",
    "PFApplicability",
    "SalaryHistorySummary",
    "SalarySlipInput",
    "build_draft_slip",
    "calculate_pf",
    "days_in_month",
    "normalize_salary_slip",
    "summarize_slips",
    "validate_payroll_input",
]
