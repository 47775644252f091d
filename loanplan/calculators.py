from __future__ import annotations

import logging
import math
from typing import Optional

from loanplan.models import PovertyGuidelineTable, RepaymentResult
from loanplan.presets import (
    BALANCE_EPSILON,
    DEFAULT_GUIDELINE_YEAR,
    MINIMUM_PAYMENT,
    POVERTY_GUIDELINES,
    STANDARD_TERM_MONTHS,
)

logger = logging.getLogger(__name__)


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form inputs arrive as ``None`` or ``NaN`` when a field is left blank.
    This helper mirrors the spreadsheet ``NZ()`` function so the payment
    math never has to special-case a missing number.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except Exception:
        return default


def guideline_table(year: Optional[int] = None) -> PovertyGuidelineTable:
    """Return the poverty guideline table for a benefit year (default 2024)."""

    return POVERTY_GUIDELINES[DEFAULT_GUIDELINE_YEAR if year is None else year]


def poverty_line(household_size, table: Optional[PovertyGuidelineTable] = None) -> float:
    """Federal poverty line for a household.

    Sizes above 8 add ``per_additional_person`` for each extra member.
    Sizes of zero or less are clamped to a single-person household.
    """

    tbl = table or guideline_table()
    size = int(nz(household_size, 1))
    if size <= 0:
        logger.warning("household size %s clamped to 1", size)
        size = 1
    if size <= 8:
        return float(tbl.amounts[size])
    return float(tbl.amounts[8] + (size - 8) * tbl.per_additional_person)


def amortized_payment(principal, annual_rate_pct, term_months):
    """Fully amortizing monthly payment for ``principal`` over ``term_months``.

    ``annual_rate_pct`` is the nominal yearly rate (``5.5`` for 5.5%).
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_months))
    if n <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return L / n
    return (r * L) / (1 - (1 + r) ** (-n))


def standard_payment(balance, annual_rate_pct, term_months=STANDARD_TERM_MONTHS):
    """Monthly payment on the 10-year Standard plan.

    Never below the $50 federal minimum when interest accrues. At a zero
    rate the balance is simply split over the term. Rates are not checked
    here; ``rules.validate`` is the gate for user input.
    """

    L = nz(balance)
    if L <= 0:
        return 0.0
    if abs(nz(annual_rate_pct)) < 1e-9:
        return amortized_payment(L, 0, term_months)
    payment = max(MINIMUM_PAYMENT, amortized_payment(L, annual_rate_pct, term_months))
    logger.debug("standard payment %.2f for balance %.2f at %s%%", payment, L, annual_rate_pct)
    return payment


def idr_payment(
    income,
    household_size,
    percentage,
    poverty_multiplier,
    table: Optional[PovertyGuidelineTable] = None,
):
    """Income-driven monthly payment.

    ``(income - poverty_line * poverty_multiplier) * percentage / 12``, with
    the discretionary part floored at zero. Every IDR variant (SAVE, PAYE,
    IBR, ICR) is this formula with different ``percentage`` and
    ``poverty_multiplier`` values. Degenerate inputs return 0 rather than
    raising since plan comparison calls this speculatively.
    """

    inc = nz(income)
    size = int(nz(household_size))
    pct = nz(percentage)
    if inc < 0 or size < 1 or pct <= 0:
        return 0.0
    protected = poverty_line(size, table) * nz(poverty_multiplier)
    discretionary = max(0.0, inc - protected)
    annual = discretionary * (pct / 100)
    return max(0.0, annual / 12)


def simulate(
    balance,
    annual_rate_pct,
    monthly_payment,
    max_months,
    forgiveness_month: Optional[int] = None,
) -> RepaymentResult:
    """Project a balance month by month under a fixed monthly payment.

    Interest accrues on the opening balance each month. When
    ``forgiveness_month`` is reached the remaining balance is forgiven; the
    interest charged in that month is forgiven with it and is left out of
    ``total_interest``. If neither payoff nor forgiveness happens within
    ``max_months`` the totals so far are returned with ``payoff_months ==
    max_months`` and the unpaid amount in ``remaining_balance``.

    A ``forgiveness_month`` of ``None`` or ``0`` disables forgiveness; a
    negative month forgives in the first month.
    """

    L = nz(balance)
    pmt = nz(monthly_payment)
    if L <= 0 or pmt < 0:
        return RepaymentResult()

    r = nz(annual_rate_pct) / 100 / 12
    horizon = int(nz(max_months))
    current = L
    total_paid = 0.0
    total_interest = 0.0
    month = 0

    while current > 0 and month < horizon:
        month += 1
        interest = current * r
        total_interest += interest

        if (
            forgiveness_month is not None
            and forgiveness_month != 0
            and month >= forgiveness_month
        ):
            logger.debug("forgiving %.2f at month %d", current, month)
            return RepaymentResult(
                monthly_payment=pmt,
                total_paid=total_paid,
                total_interest=total_interest - interest,
                payoff_months=month,
                forgiveness_amount=current,
            )

        payment = min(pmt, current + interest)
        total_paid += payment
        current = current + interest - payment
        if current < BALANCE_EPSILON:
            current = 0.0

    if current > 0:
        logger.warning(
            "balance %.2f not paid off or forgiven within %d months", current, horizon
        )
    return RepaymentResult(
        monthly_payment=pmt,
        total_paid=total_paid,
        total_interest=total_interest,
        payoff_months=month,
        forgiveness_amount=0.0,
        remaining_balance=current,
    )
