"""Salary computation engine - derives every dependent slip field."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, Union

from payslip_engine.calculators.policy import DEFAULT_POLICY, CompensationPolicy
from payslip_engine.calculators.rounding import (
    money_context,
    round_currency,
    to_decimal,
    to_number,
)
from payslip_engine.calculators.types import (
    BASE_INPUT_FIELDS,
    LeaveBalances,
    PFApplicability,
    ResolvedInputs,
    SalaryBreakdown,
    SalarySlipInput,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

SlipLike = Union[Mapping[str, Any], SalarySlipInput]


def calculate_pf(
    base_salary: Decimal,
    pf_applicability: PFApplicability,
    policy: CompensationPolicy = DEFAULT_POLICY,
) -> Decimal:
    """Provident Fund deduction for one month.

    12% of base salary below the wage threshold, a flat amount at or above
    it, nothing when PF is explicitly not applicable.
    """
    if not pf_applicability.is_charged:
        return ZERO
    if base_salary < policy.pf_wage_threshold:
        return round_currency(base_salary * policy.pf_rate)
    return policy.pf_flat_amount


class SalaryComputationEngine:
    """Normalizes raw salary slips under a compensation policy.

    Pipeline (stable order, each step consumes rounded prior values):
    1) Resolve inputs and defaults
    2) PF deduction
    3) Per-day salary
    4) Absent (loss of pay) deduction
    5) Professional tax
    6) Net pay before bonus, clamped at zero
    7) Basic = 30% of net pay
    8) HRA = 70% of basic
    9) Fuel allowance = remainder, clamped at zero
    10) Gross = basic + HRA + fuel
    11) Net salary = gross + bonus
    12) Leave defaults

    The engine holds no state besides its policy and never mutates its input,
    so a single instance can be shared across threads.
    """

    def __init__(self, policy: CompensationPolicy | None = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def resolve(self, slip: SalarySlipInput) -> ResolvedInputs:
        """Apply defaults to every field the computation reads."""
        policy = self.policy

        def _resolve(attr: str, default: Decimal) -> Decimal:
            raw = getattr(slip, attr)
            value = to_decimal(raw)
            if value is None:
                if raw is not None:
                    logger.warning(
                        "Ignoring non-numeric %s=%r, using default %s",
                        BASE_INPUT_FIELDS[attr],
                        raw,
                        default,
                    )
                return default
            return value

        leaves_remaining = None
        if slip.leaves_remaining is not None:
            leaves_remaining = to_decimal(slip.leaves_remaining)

        return ResolvedInputs(
            base_salary=_resolve("base_salary", ZERO),
            lop_days=_resolve("lop_days", ZERO),
            days_in_month=_resolve("days_in_month", policy.default_days_in_month),
            bonus=_resolve("bonus", ZERO),
            pf_applicability=PFApplicability.parse(slip.pf_applicable),
            paid_leave_used=_resolve("paid_leave_used", ZERO),
            total_leaves=_resolve("total_leaves", policy.default_total_leaves),
            casual_leaves_total=_resolve(
                "casual_leaves_total", policy.default_casual_leaves
            ),
            sick_leaves_total=_resolve("sick_leaves_total", policy.default_sick_leaves),
            leaves_remaining=leaves_remaining,
        )

    def compute(self, inputs: ResolvedInputs) -> SalaryBreakdown:
        """Run the arithmetic pipeline on resolved inputs."""
        policy = self.policy

        with money_context(inputs.base_salary, inputs.lop_days, inputs.bonus):
            return self._compute(inputs, policy)

    def _compute(
        self, inputs: ResolvedInputs, policy: CompensationPolicy
    ) -> SalaryBreakdown:
        pf_amount = calculate_pf(inputs.base_salary, inputs.pf_applicability, policy)

        # A zero-day month has no per-day rate to deduct against
        if inputs.days_in_month > 0:
            per_day_salary = round_currency(inputs.base_salary / inputs.days_in_month)
        else:
            per_day_salary = ZERO
        absent_deduction = round_currency(per_day_salary * inputs.lop_days)
        professional_tax = policy.professional_tax

        net_pay = max(
            inputs.base_salary - pf_amount - professional_tax - absent_deduction,
            ZERO,
        )

        basic = round_currency(net_pay * policy.basic_ratio)
        hra = round_currency(basic * policy.hra_ratio)
        fuel_allowance = max(net_pay - basic - hra, ZERO)
        gross_salary = basic + hra + fuel_allowance

        return SalaryBreakdown(
            pf_amount=pf_amount,
            professional_tax=professional_tax,
            per_day_salary=per_day_salary,
            absent_deduction=absent_deduction,
            net_pay=net_pay,
            basic=basic,
            hra=hra,
            fuel_allowance=fuel_allowance,
            gross_salary=gross_salary,
            net_salary=gross_salary + inputs.bonus,
        )

    def leave_balances(self, inputs: ResolvedInputs) -> LeaveBalances:
        remaining = inputs.leaves_remaining
        if remaining is None:
            remaining = inputs.total_leaves - inputs.paid_leave_used
        return LeaveBalances(
            total_leaves=inputs.total_leaves,
            casual_leaves_total=inputs.casual_leaves_total,
            sick_leaves_total=inputs.sick_leaves_total,
            leaves_remaining=remaining,
        )

    def normalize(self, slip: SlipLike) -> dict[str, Any]:
        """Return a new record with every derived field recomputed.

        Fields outside the engine's concern pass through unchanged. Leave
        fields keep their input value when present and get defaults otherwise.
        Previously derived values on the input are ignored.
        """
        if isinstance(slip, SalarySlipInput):
            slip_input = slip
            record = slip.to_record()
        else:
            slip_input = SalarySlipInput.from_record(slip)
            record = dict(slip)

        inputs = self.resolve(slip_input)
        breakdown = self.compute(inputs)
        leaves = self.leave_balances(inputs)

        for key, amount in breakdown.to_record().items():
            record[key] = to_number(amount)

        leave_values = {
            "totalLeaves": leaves.total_leaves,
            "casualLeavesTotal": leaves.casual_leaves_total,
            "sickLeavesTotal": leaves.sick_leaves_total,
            "leavesRemaining": leaves.leaves_remaining,
        }
        for key, value in leave_values.items():
            if record.get(key) is None:
                record[key] = to_number(value)

        logger.debug(
            "Normalized slip employee=%s base=%s gross=%s net=%s",
            record.get("employeeId"),
            inputs.base_salary,
            breakdown.gross_salary,
            breakdown.net_salary,
        )
        return record

    def normalize_many(self, slips: Iterable[SlipLike]) -> list[dict[str, Any]]:
        """Normalize each slip independently, preserving order."""
        return [self.normalize(slip) for slip in slips]


_default_engine = SalaryComputationEngine()


def normalize_salary_slip(
    slip: SlipLike, policy: CompensationPolicy | None = None
) -> dict[str, Any]:
    """Normalize one slip under ``policy`` (the default policy if omitted)."""
    if policy is None:
        return _default_engine.normalize(slip)
    return SalaryComputationEngine(policy).normalize(slip)
