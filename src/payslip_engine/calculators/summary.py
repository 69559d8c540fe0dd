"""Totals over a salary history listing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from payslip_engine.calculators.engine import SalaryComputationEngine, SlipLike
from payslip_engine.calculators.rounding import round_currency, to_decimal, to_number


@dataclass
class SalaryHistorySummary:
    """Aggregate figures shown above a salary history list."""

    total_slips: int = 0
    total_gross: Decimal = Decimal("0")
    total_net_salary: Decimal = Decimal("0")
    total_pf: Decimal = Decimal("0")
    total_bonus: Decimal = Decimal("0")

    @property
    def average_net_salary(self) -> Decimal:
        if self.total_slips == 0:
            return Decimal("0")
        return round_currency(self.total_net_salary / self.total_slips)

    def to_record(self) -> dict[str, Any]:
        return {
            "totalSlips": self.total_slips,
            "totalGross": to_number(self.total_gross),
            "totalNetSalary": to_number(self.total_net_salary),
            "averageNetSalary": to_number(self.average_net_salary),
            "totalPF": to_number(self.total_pf),
            "totalBonus": to_number(self.total_bonus),
        }


def summarize_slips(
    slips: Iterable[SlipLike], engine: SalaryComputationEngine | None = None
) -> SalaryHistorySummary:
    """Normalize every slip and total the figures."""
    engine = engine or SalaryComputationEngine()
    summary = SalaryHistorySummary()
    for slip in engine.normalize_many(slips):
        summary.total_slips += 1
        summary.total_gross += to_decimal(slip["grossSalary"])
        summary.total_net_salary += to_decimal(slip["netSalary"])
        summary.total_pf += to_decimal(slip["pfAmount"])
        summary.total_bonus += to_decimal(slip.get("bonus")) or Decimal("0")
    return summary
