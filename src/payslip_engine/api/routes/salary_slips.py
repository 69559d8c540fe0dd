"""Salary slip API endpoints."""

from typing import Any

from fastapi import APIRouter, Body, status

from payslip_engine.api.dependencies import AppSettings, Engine
from payslip_engine.api.schemas import (
    DraftSlipRequest,
    ErrorResponse,
    SlipBatchRequest,
    SlipBatchResponse,
    SummaryResponse,
)
from payslip_engine.calculators.draft import build_draft_slip
from payslip_engine.calculators.summary import summarize_slips
from payslip_engine.calculators.validation import (
    InputProblem,
    InvalidPayrollInput,
    find_problems,
)
from payslip_engine.config import Settings

router = APIRouter(prefix="/salary-slips", tags=["salary-slips"])


def _check_slips(
    app_settings: Settings, slips: list[dict[str, Any]], indexed: bool = True
) -> None:
    """Reject the whole request if any slip fails validation.

    Batch problems are reported as ``slips[i].field``; a single slip
    (``indexed=False``) reports the bare field name.
    """
    if not app_settings.strict_validation:
        return
    problems: list[InputProblem] = []
    for index, slip in enumerate(slips):
        path = f"slips[{index}]." if indexed else ""
        for problem in find_problems(slip, app_settings.policy):
            problems.append(InputProblem(f"{path}{problem.field}", problem.message))
    if problems:
        raise InvalidPayrollInput(problems)


@router.post(
    "/normalize",
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def normalize_slip(
    engine: Engine,
    app_settings: AppSettings,
    slip: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """Recompute every derived field of one slip."""
    _check_slips(app_settings, [slip], indexed=False)
    return engine.normalize(slip)


@router.post(
    "/normalize-batch",
    response_model=SlipBatchResponse,
    responses={422: {"model": ErrorResponse}},
)
async def normalize_batch(
    engine: Engine,
    app_settings: AppSettings,
    payload: SlipBatchRequest,
) -> SlipBatchResponse:
    """Normalize many slips; each is computed independently."""
    _check_slips(app_settings, payload.slips)
    items = engine.normalize_many(payload.slips)
    return SlipBatchResponse(items=items, total=len(items))


@router.post(
    "/summary",
    response_model=SummaryResponse,
    response_model_by_alias=True,
    responses={422: {"model": ErrorResponse}},
)
async def summarize(
    engine: Engine,
    app_settings: AppSettings,
    payload: SlipBatchRequest,
) -> SummaryResponse:
    """Totals over a salary history listing."""
    _check_slips(app_settings, payload.slips)
    summary = summarize_slips(payload.slips, engine)
    return SummaryResponse.model_validate(summary.to_record())


@router.post(
    "/draft",
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_draft(
    engine: Engine,
    app_settings: AppSettings,
    payload: DraftSlipRequest,
) -> dict[str, Any]:
    """Build a normalized draft slip for an employee and month."""
    draft = build_draft_slip(
        payload.employee,
        payload.year_month,
        lop_days=payload.lop_days,
        paid_leave_used=payload.paid_leave_used,
        bonus=payload.bonus,
        engine=engine,
    )
    # Validated after construction so daysInMonth reflects the calendar
    _check_slips(app_settings, [draft], indexed=False)
    return draft
