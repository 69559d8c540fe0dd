"""Currency rounding and numeric coercion.

Rounding policy: every derived amount is rounded to a whole currency unit
with ROUND_HALF_UP, which on Decimal rounds ties away from zero
(2.5 -> 3, -2.5 -> -3). Each step rounds its own result; intermediate ratios
are never rounded before multiplication.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext, localcontext
from typing import Any

WHOLE_UNIT = Decimal("1")


def round_currency(amount: Decimal) -> Decimal:
    """Round to a whole currency unit, half away from zero.

    quantize needs every integer digit to fit the context precision, so the
    precision is widened for amounts larger than the current context allows.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 2)
        return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def money_context(*amounts: Decimal):
    """Decimal context wide enough for exact arithmetic on ``amounts``.

    Sums and products of the inputs keep every integer digit, so the
    component split of a very large salary still adds up exactly.
    """
    ctx = getcontext().copy()
    ctx.prec += sum(max(a.adjusted(), 0) + 1 for a in amounts)
    return localcontext(ctx)


def to_decimal(value: Any) -> Decimal | None:
    """Coerce a record value to Decimal.

    Returns None for missing values and for anything that is not a finite
    number (booleans included), so callers fall back to their default.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    try:
        # str() keeps float literals exact as written (0.1 -> "0.1")
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def to_number(amount: Decimal) -> int | float:
    """Convert a Decimal amount to a JSON-friendly number."""
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)
