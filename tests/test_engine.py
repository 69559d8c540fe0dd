"""Unit tests for SalaryComputationEngine.

Expected figures are worked by hand from the compensation policy.
"""

import copy
from decimal import Decimal

import pytest

from payslip_engine.calculators.engine import (
    SalaryComputationEngine,
    calculate_pf,
    normalize_salary_slip,
)
from payslip_engine.calculators.policy import CompensationPolicy
from payslip_engine.calculators.types import DERIVED_FIELDS, PFApplicability, SalarySlipInput


class TestEmptyInput:
    """An empty record is valid and yields an all-default slip."""

    def test_zero_input_defaults(self):
        result = normalize_salary_slip({})

        assert result == {
            "pfAmount": 0,
            "professionalTax": 200,
            "perDaySalary": 0,
            "absentDeduction": 0,
            "basic": 0,
            "hra": 0,
            "fuelAllowance": 0,
            "grossSalary": 0,
            "netSalary": 0,
            "totalLeaves": 6,
            "casualLeavesTotal": 4,
            "sickLeavesTotal": 2,
            "leavesRemaining": 6,
        }

    def test_null_fields_treated_as_absent(self):
        result = normalize_salary_slip(
            {"baseSalary": None, "daysInMonth": None, "bonus": None, "totalLeaves": None}
        )

        assert result["netSalary"] == 0
        assert result["perDaySalary"] == 0
        assert result["totalLeaves"] == 6
        # Null keys stay on the copy
        assert result["bonus"] is None


class TestPFCalculation:
    """Test PF tiering and applicability."""

    def test_below_threshold_is_percentage(self):
        assert normalize_salary_slip(
            {"baseSalary": 20000, "pfApplicable": True}
        )["pfAmount"] == 2400

    def test_at_or_above_threshold_is_flat(self):
        assert normalize_salary_slip(
            {"baseSalary": 50000, "pfApplicable": True}
        )["pfAmount"] == 3600
        assert normalize_salary_slip(
            {"baseSalary": 30000, "pfApplicable": True}
        )["pfAmount"] == 3600

    def test_just_below_threshold_rounds(self):
        # 29999 * 0.12 = 3599.88
        assert normalize_salary_slip({"baseSalary": 29999})["pfAmount"] == 3600

    @pytest.mark.parametrize("flag", [False, "false"])
    def test_explicit_false_disables_pf(self, flag):
        assert normalize_salary_slip(
            {"baseSalary": 50000, "pfApplicable": flag}
        )["pfAmount"] == 0

    @pytest.mark.parametrize("flag", ["pending", None, True, "true", "yes"])
    def test_anything_else_is_charged(self, flag):
        assert normalize_salary_slip(
            {"baseSalary": 50000, "pfApplicable": flag}
        )["pfAmount"] == 3600

    def test_missing_flag_is_charged(self):
        assert normalize_salary_slip({"baseSalary": 50000})["pfAmount"] == 3600

    def test_calculate_pf_helper(self):
        assert calculate_pf(Decimal("10000"), PFApplicability.PENDING) == Decimal("1200")
        assert calculate_pf(Decimal("10000"), PFApplicability.NOT_APPLICABLE) == 0


class TestPFApplicabilityParsing:
    """Test conversion from raw record values."""

    def test_parse(self):
        assert PFApplicability.parse(False) is PFApplicability.NOT_APPLICABLE
        assert PFApplicability.parse("false") is PFApplicability.NOT_APPLICABLE
        assert PFApplicability.parse("pending") is PFApplicability.PENDING
        assert PFApplicability.parse(True) is PFApplicability.APPLICABLE
        assert PFApplicability.parse(None) is PFApplicability.APPLICABLE
        assert PFApplicability.parse(0) is PFApplicability.APPLICABLE

    def test_pending_charged_like_applicable(self):
        assert PFApplicability.PENDING.is_charged
        assert PFApplicability.APPLICABLE.is_charged
        assert not PFApplicability.NOT_APPLICABLE.is_charged


class TestFullComputation:
    """Test the whole pipeline on realistic slips."""

    def test_slip_with_lop_and_bonus(self):
        result = normalize_salary_slip(
            {
                "employeeId": "EMP001",
                "baseSalary": 50000,
                "pfApplicable": True,
                "lopDays": 2,
                "daysInMonth": 30,
                "bonus": 1000,
            }
        )

        assert result["pfAmount"] == 3600
        assert result["perDaySalary"] == 1667  # 1666.67
        assert result["absentDeduction"] == 3334
        assert result["professionalTax"] == 200
        # net pay 50000 - 3600 - 200 - 3334 = 42866
        assert result["basic"] == 12860  # 12859.8
        assert result["hra"] == 9002
        assert result["fuelAllowance"] == 21004
        assert result["grossSalary"] == 42866
        assert result["netSalary"] == 43866

    def test_slip_without_lop(self):
        result = normalize_salary_slip({"baseSalary": 20000})

        assert result["perDaySalary"] == 667
        assert result["absentDeduction"] == 0
        assert result["basic"] == 5220
        assert result["hra"] == 3654
        assert result["fuelAllowance"] == 8526
        assert result["grossSalary"] == 17400
        assert result["netSalary"] == 17400

    def test_heavy_deduction_clamps_to_zero(self):
        result = normalize_salary_slip(
            {
                "baseSalary": 1000,
                "pfApplicable": True,
                "lopDays": 30,
                "daysInMonth": 30,
                "bonus": 500,
            }
        )

        assert result["pfAmount"] == 120
        assert result["perDaySalary"] == 33
        assert result["absentDeduction"] == 990
        assert result["basic"] == 0
        assert result["hra"] == 0
        assert result["fuelAllowance"] == 0
        assert result["grossSalary"] == 0
        assert result["netSalary"] == 500

    def test_rounding_ties_go_away_from_zero(self):
        # 75 / 30 = 2.5 rounds to 3, not to the even 2
        result = normalize_salary_slip(
            {"baseSalary": 75, "daysInMonth": 30, "pfApplicable": False}
        )
        assert result["perDaySalary"] == 3

    def test_zero_day_month_has_no_absent_deduction(self):
        result = normalize_salary_slip(
            {"baseSalary": 30000, "daysInMonth": 0, "lopDays": 3}
        )

        assert result["perDaySalary"] == 0
        assert result["absentDeduction"] == 0
        assert result["grossSalary"] == 30000 - 3600 - 200

    def test_numeric_strings_are_accepted(self):
        result = normalize_salary_slip({"baseSalary": "20000", "bonus": "100"})
        assert result["netSalary"] == 17500

    def test_garbage_numbers_fall_back_to_default(self, caplog):
        result = normalize_salary_slip({"baseSalary": "lots", "daysInMonth": "x"})

        assert result["grossSalary"] == 0
        assert "Ignoring non-numeric baseSalary" in caplog.text

    @pytest.mark.parametrize("base", [10**30, 1e300])
    def test_huge_salary_still_computes(self, base):
        result = normalize_salary_slip({"baseSalary": base, "lopDays": 3, "bonus": 7})

        assert result["pfAmount"] == 3600
        assert result["absentDeduction"] == result["perDaySalary"] * 3
        assert result["basic"] + result["hra"] + result["fuelAllowance"] == result["grossSalary"]
        assert result["netSalary"] == result["grossSalary"] + 7

    def test_huge_salary_split_is_exact(self):
        result = normalize_salary_slip({"baseSalary": 10**30})

        assert result["perDaySalary"] == 33333333333333333333333333333
        assert result["grossSalary"] == 10**30 - 3600 - 200
        assert result["basic"] == 299999999999999999999999998860
        assert result["hra"] == 209999999999999999999999999202

    def test_derived_inputs_are_ignored(self):
        stale = {"baseSalary": 20000, "grossSalary": 1, "netSalary": 2, "pfAmount": 3}
        result = normalize_salary_slip(stale)

        assert result["pfAmount"] == 2400
        assert result["grossSalary"] == 17400


class TestLeaveDefaults:
    """Leave fields default only when absent."""

    def test_remaining_derived_from_used(self):
        result = normalize_salary_slip({"totalLeaves": 10, "paidLeaveUsed": 3})
        assert result["leavesRemaining"] == 7

    def test_remaining_uses_default_total(self):
        result = normalize_salary_slip({"paidLeaveUsed": 2})
        assert result["leavesRemaining"] == 4

    def test_explicit_remaining_is_preserved(self):
        result = normalize_salary_slip(
            {"leavesRemaining": 2, "totalLeaves": 10, "paidLeaveUsed": 3}
        )
        assert result["leavesRemaining"] == 2

    def test_explicit_zero_is_not_replaced(self):
        result = normalize_salary_slip({"leavesRemaining": 0, "sickLeavesTotal": 0})
        assert result["leavesRemaining"] == 0
        assert result["sickLeavesTotal"] == 0


class TestRecordHandling:
    """Pass-through, copying and input types."""

    def test_input_not_mutated(self, sample_slip):
        original = copy.deepcopy(sample_slip)
        result = normalize_salary_slip(sample_slip)

        assert sample_slip == original
        assert result is not sample_slip

    def test_other_fields_pass_through(self, sample_slip):
        result = normalize_salary_slip(sample_slip)

        assert result["employeeName"] == "Asha Rao"
        assert result["department"] == "Engineering"
        assert result["yearMonth"] == "2026-01"

    def test_every_derived_field_present(self, sample_slip):
        result = normalize_salary_slip(sample_slip)
        for name in DERIVED_FIELDS:
            assert isinstance(result[name], int)

    def test_accepts_slip_input(self):
        slip = SalarySlipInput(base_salary=20000, extra={"employeeId": "EMP9"})
        result = normalize_salary_slip(slip)

        assert result["employeeId"] == "EMP9"
        assert result["baseSalary"] == 20000
        assert result["grossSalary"] == 17400

    def test_from_record_splits_extra(self, sample_slip):
        slip = SalarySlipInput.from_record(sample_slip)

        assert slip.base_salary == 50000
        assert "baseSalary" not in slip.extra
        assert slip.extra["employeeId"] == "EMP001"


class TestCustomPolicy:
    """Policy figures flow into the computation."""

    def test_engine_uses_policy(self):
        policy = CompensationPolicy(
            professional_tax=Decimal("0"),
            pf_rate=Decimal("0.10"),
            default_total_leaves=Decimal("12"),
        )
        engine = SalaryComputationEngine(policy)
        result = engine.normalize({"baseSalary": 10000})

        assert result["pfAmount"] == 1000
        assert result["professionalTax"] == 0
        assert result["grossSalary"] == 9000
        assert result["totalLeaves"] == 12

    def test_module_function_accepts_policy(self):
        policy = CompensationPolicy(pf_flat_amount=Decimal("1800"))
        result = normalize_salary_slip({"baseSalary": 60000}, policy)
        assert result["pfAmount"] == 1800

    def test_normalize_many_preserves_order(self, engine):
        results = engine.normalize_many(
            [{"employeeId": "A", "baseSalary": 20000}, {"employeeId": "B"}]
        )

        assert [r["employeeId"] for r in results] == ["A", "B"]
        assert results[0]["grossSalary"] == 17400
        assert results[1]["grossSalary"] == 0
