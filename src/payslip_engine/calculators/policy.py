"""Compensation policy: the rates and defaults the engine applies."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CompensationPolicy:
    """Business policy figures for salary computation.

    These are tax-law and HR policy values, not constants of the algorithm.
    """

    pf_rate: Decimal = Decimal("0.12")
    pf_wage_threshold: Decimal = Decimal("30000")  # at or above: flat PF
    pf_flat_amount: Decimal = Decimal("3600")
    professional_tax: Decimal = Decimal("200")
    basic_ratio: Decimal = Decimal("0.30")  # share of net pay
    hra_ratio: Decimal = Decimal("0.70")  # share of basic
    default_days_in_month: Decimal = Decimal("30")
    default_total_leaves: Decimal = Decimal("6")
    default_casual_leaves: Decimal = Decimal("4")
    default_sick_leaves: Decimal = Decimal("2")

    @classmethod
    def from_env(cls) -> CompensationPolicy:
        """Load policy overrides from environment variables."""
        defaults = cls()

        def _get(name: str, default: Decimal) -> Decimal:
            raw = os.getenv(name)
            return Decimal(raw) if raw else default

        return cls(
            pf_rate=_get("PF_RATE", defaults.pf_rate),
            pf_wage_threshold=_get("PF_WAGE_THRESHOLD", defaults.pf_wage_threshold),
            pf_flat_amount=_get("PF_FLAT_AMOUNT", defaults.pf_flat_amount),
            professional_tax=_get("PROFESSIONAL_TAX", defaults.professional_tax),
            basic_ratio=_get("BASIC_RATIO", defaults.basic_ratio),
            hra_ratio=_get("HRA_RATIO", defaults.hra_ratio),
            default_days_in_month=_get(
                "DEFAULT_DAYS_IN_MONTH", defaults.default_days_in_month
            ),
            default_total_leaves=_get(
                "DEFAULT_TOTAL_LEAVES", defaults.default_total_leaves
            ),
            default_casual_leaves=_get(
                "DEFAULT_CASUAL_LEAVES", defaults.default_casual_leaves
            ),
            default_sick_leaves=_get("DEFAULT_SICK_LEAVES", defaults.default_sick_leaves),
        )


DEFAULT_POLICY = CompensationPolicy()
