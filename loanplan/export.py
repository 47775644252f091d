"""Plan comparison export."""
from __future__ import annotations

import logging
from typing import List

import pandas as pd

from loanplan.models import PlanComparison, SimulationRequest
from loanplan.presets import DISCLAIMER
from loanplan.rules import validate
from loanplan.utils import format_currency, format_months

logger = logging.getLogger(__name__)

COLUMNS = [
    "Plan Name",
    "Monthly Payment",
    "Total Paid",
    "Total Interest",
    "Payoff Time (months)",
    "Forgiveness Amount",
    "Eligible",
]


def comparison_frame(comparisons: List[PlanComparison]) -> pd.DataFrame:
    """One row per plan with the headline numbers."""

    if not comparisons:
        return pd.DataFrame(columns=COLUMNS)
    rows = [
        {
            "Plan Name": c.plan_name,
            "Monthly Payment": c.result.monthly_payment,
            "Total Paid": c.result.total_paid,
            "Total Interest": c.result.total_interest,
            "Payoff Time (months)": c.result.payoff_months,
            "Forgiveness Amount": c.result.forgiveness_amount,
            "Eligible": c.is_eligible,
        }
        for c in comparisons
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def build_comparison_csv(comparisons: List[PlanComparison]) -> str:
    """CSV text of ``comparison_frame`` with money to the cent."""

    return comparison_frame(comparisons).to_csv(index=False, float_format="%.2f")


def build_comparison_report(request: SimulationRequest, comparisons: List[PlanComparison]) -> bytes:
    """Build a plain-text repayment summary.

    A report is only produced for a request that passes validation; any
    issue raises ``ValueError`` naming the offending fields.
    """

    issues = validate(request)
    if issues:
        fields = ", ".join(i.field for i in issues)
        raise ValueError(f"cannot build report for invalid request: {fields}")

    lines = ["Repayment Plan Comparison:"]
    lines.append(f"Loan balance: {format_currency(request.total_balance)}")
    lines.append(f"Interest rate: {request.annual_interest_rate_percent:.2f}%")
    lines.append(f"Annual income: {format_currency(request.annual_income)}")
    lines.append(f"Family size: {request.household_size}")
    lines.append(f"Filing status: {request.filing_status}")

    for c in comparisons:
        r = c.result
        box = "[x]" if c.is_eligible else "[ ]"
        lines.append(
            f"{box} {c.plan_name}: {format_currency(r.monthly_payment)}/mo, "
            f"total {format_currency(r.total_paid)}, "
            f"interest {format_currency(r.total_interest)}, "
            f"{format_months(r.payoff_months)}, "
            f"forgiven {format_currency(r.forgiveness_amount)}"
        )
        for note in c.notes:
            lines.append(f"    - {note}")

    lines.append(f"Disclaimer: {DISCLAIMER}")
    logger.debug("report built for %d plans", len(comparisons))
    return "\n".join(lines).encode()
