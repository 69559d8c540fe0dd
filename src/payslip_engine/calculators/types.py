"""Type definitions for the salary computation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


class PFApplicability(str, Enum):
    """Provident Fund applicability of a slip."""

    APPLICABLE = "APPLICABLE"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    PENDING = "PENDING"

    @classmethod
    def parse(cls, raw: Any) -> PFApplicability:
        """Convert the raw boolean/string record value.

        Only an explicit ``False`` or ``"false"`` disables PF. ``"pending"``
        is kept distinct but is charged like ``APPLICABLE``.
        """
        if isinstance(raw, PFApplicability):
            return raw
        if raw is False or raw == "false":
            return cls.NOT_APPLICABLE
        if raw == "pending":
            return cls.PENDING
        return cls.APPLICABLE

    @property
    def is_charged(self) -> bool:
        return self is not PFApplicability.NOT_APPLICABLE


# Record keys (wire names) for the fields the engine reads
BASE_INPUT_FIELDS = {
    "base_salary": "baseSalary",
    "pf_applicable": "pfApplicable",
    "lop_days": "lopDays",
    "days_in_month": "daysInMonth",
    "bonus": "bonus",
    "paid_leave_used": "paidLeaveUsed",
    "total_leaves": "totalLeaves",
    "casual_leaves_total": "casualLeavesTotal",
    "sick_leaves_total": "sickLeavesTotal",
    "leaves_remaining": "leavesRemaining",
}

# Record keys the engine always overwrites
DERIVED_FIELDS = (
    "pfAmount",
    "professionalTax",
    "perDaySalary",
    "absentDeduction",
    "basic",
    "hra",
    "fuelAllowance",
    "grossSalary",
    "netSalary",
)


@dataclass(frozen=True)
class SalarySlipInput:
    """A raw slip record with every field optional.

    ``extra`` holds every other record key (employee name, department,
    month label, previously derived values, ...) so it can be passed through.
    """

    base_salary: Any = None
    pf_applicable: Any = None
    lop_days: Any = None
    days_in_month: Any = None
    bonus: Any = None
    paid_leave_used: Any = None
    total_leaves: Any = None
    casual_leaves_total: Any = None
    sick_leaves_total: Any = None
    leaves_remaining: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> SalarySlipInput:
        """Build from a wire record keyed by camelCase field names."""
        known = set(BASE_INPUT_FIELDS.values())
        values = {attr: record.get(key) for attr, key in BASE_INPUT_FIELDS.items()}
        extra = {key: value for key, value in record.items() if key not in known}
        return cls(**values, extra=extra)

    def to_record(self) -> dict[str, Any]:
        """Return the wire record, omitting fields that were never set."""
        record = dict(self.extra)
        for attr, key in BASE_INPUT_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                record[key] = value
        return record


@dataclass(frozen=True)
class ResolvedInputs:
    """Inputs after the defaulting pass; nothing here is missing."""

    base_salary: Decimal
    lop_days: Decimal
    days_in_month: Decimal
    bonus: Decimal
    pf_applicability: PFApplicability
    paid_leave_used: Decimal
    total_leaves: Decimal
    casual_leaves_total: Decimal
    sick_leaves_total: Decimal
    leaves_remaining: Decimal | None  # None = derive from total - used


@dataclass(frozen=True)
class LeaveBalances:
    """Leave fields after defaults are applied."""

    total_leaves: Decimal
    casual_leaves_total: Decimal
    sick_leaves_total: Decimal
    leaves_remaining: Decimal


@dataclass(frozen=True)
class SalaryBreakdown:
    """Every derived monetary field of one slip."""

    pf_amount: Decimal
    professional_tax: Decimal
    per_day_salary: Decimal
    absent_deduction: Decimal
    net_pay: Decimal  # before bonus, clamped at zero
    basic: Decimal
    hra: Decimal
    fuel_allowance: Decimal
    gross_salary: Decimal
    net_salary: Decimal

    def to_record(self) -> dict[str, Decimal]:
        """Return derived values keyed by wire field name (net_pay excluded)."""
        return {
            "pfAmount": self.pf_amount,
            "professionalTax": self.professional_tax,
            "perDaySalary": self.per_day_salary,
            "absentDeduction": self.absent_deduction,
            "basic": self.basic,
            "hra": self.hra,
            "fuelAllowance": self.fuel_allowance,
            "grossSalary": self.gross_salary,
            "netSalary": self.net_salary,
        }
