"""Pydantic schemas for API request/response models.

Slip records themselves stay free-form dicts: the engine passes through any
field it does not compute, so the API does not constrain their shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Slip schemas
# ============================================================================


class SlipBatchRequest(BaseModel):
    """Schema for a list of raw slips."""

    slips: list[dict[str, Any]]


class SlipBatchResponse(BaseModel):
    """Schema for a list of normalized slips."""

    items: list[dict[str, Any]]
    total: int


class SummaryResponse(BaseModel):
    """Schema for salary history totals."""

    model_config = ConfigDict(populate_by_name=True)

    total_slips: int = Field(alias="totalSlips")
    total_gross: int | float = Field(alias="totalGross")
    total_net_salary: int | float = Field(alias="totalNetSalary")
    average_net_salary: int | float = Field(alias="averageNetSalary")
    total_pf: int | float = Field(alias="totalPF")
    total_bonus: int | float = Field(alias="totalBonus")


class DraftSlipRequest(BaseModel):
    """Schema for building a draft slip from employee data."""

    model_config = ConfigDict(populate_by_name=True)

    employee: dict[str, Any]
    year_month: str = Field(alias="yearMonth")
    lop_days: int = Field(default=0, alias="lopDays")
    paid_leave_used: int = Field(default=0, alias="paidLeaveUsed")
    bonus: int = 0


# ============================================================================
# Error schemas
# ============================================================================


class ProblemDetail(BaseModel):
    """One rejected input field."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str
    problems: list[ProblemDetail] = []
