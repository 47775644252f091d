"""Side-by-side comparison of federal repayment plans.

Each plan is a ``RepaymentPlanParameters`` row. Fixed plans amortize the
balance over ``term_months``; income-driven plans take a share of
discretionary income and forgive what is left at ``forgiveness_months``.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional

from loanplan.calculators import idr_payment, simulate, standard_payment
from loanplan.models import (
    PlanComparison,
    PovertyGuidelineTable,
    RepaymentPlanParameters,
    SimulationRequest,
)
from loanplan.presets import REPAYMENT_PLANS
from loanplan.utils import format_currency

logger = logging.getLogger(__name__)


def combined_income(request: SimulationRequest) -> float:
    """AGI used by the income-driven formulas.

    Joint filers report household AGI, so the spouse's income is added.
    """

    if request.filing_status == "married-joint":
        return request.annual_income + request.spouse_income
    return request.annual_income


def forgiveness_month_for(plan: RepaymentPlanParameters, balance: float) -> Optional[int]:
    """Month at which ``plan`` forgives the remaining balance, if ever."""

    if (
        plan.small_balance_threshold is not None
        and plan.small_balance_forgiveness_months is not None
        and balance <= plan.small_balance_threshold
    ):
        return plan.small_balance_forgiveness_months
    return plan.forgiveness_months


def evaluate_plan(
    request: SimulationRequest,
    plan: RepaymentPlanParameters,
    table: Optional[PovertyGuidelineTable] = None,
) -> PlanComparison:
    balance = request.total_balance
    rate = request.annual_interest_rate_percent
    standard = standard_payment(balance, rate)
    notes = list(plan.notes)

    if not plan.income_driven:
        payment = standard_payment(balance, rate, plan.term_months)
        result = simulate(balance, rate, payment, plan.horizon_months, None)
        eligible = balance >= plan.minimum_balance
        return PlanComparison(
            plan_key=plan.key,
            plan_name=plan.name,
            result=result,
            is_eligible=eligible,
            notes=notes,
        )

    payment = idr_payment(
        combined_income(request),
        request.household_size,
        plan.percentage_of_discretionary_income,
        plan.poverty_line_multiplier,
        table,
    )
    eligible = True
    if plan.capped_at_standard:
        eligible = payment < standard
        payment = min(payment, standard)

    month = forgiveness_month_for(plan, balance)
    result = simulate(balance, rate, payment, plan.horizon_months, month)
    forgiveness_year = None
    if result.forgiveness_amount > 0 and month:
        forgiveness_year = math.ceil(month / 12)

    if plan.capped_at_standard and not eligible:
        notes = ["May not qualify - payment exceeds Standard Plan"]
    elif forgiveness_year is not None:
        notes.append(
            f"{format_currency(result.forgiveness_amount)} forgiven after {forgiveness_year} years"
        )
    elif month:
        notes.append("Paid in full before forgiveness")

    logger.debug(
        "%s: payment %.2f, paid %.2f, forgiven %.2f",
        plan.key,
        payment,
        result.total_paid,
        result.forgiveness_amount,
    )
    return PlanComparison(
        plan_key=plan.key,
        plan_name=plan.name,
        result=result,
        forgiveness_year=forgiveness_year,
        is_eligible=eligible,
        notes=notes,
    )


def compare_plans(
    request: SimulationRequest,
    plan_keys: Optional[Iterable[str]] = None,
    plans: Dict[str, RepaymentPlanParameters] = REPAYMENT_PLANS,
    table: Optional[PovertyGuidelineTable] = None,
) -> List[PlanComparison]:
    """Simulate ``request`` under each selected plan.

    ``plan_keys`` picks rows from ``plans`` in the given order (all rows when
    omitted); an unknown key raises ``KeyError``. The request is not
    validated here; run ``rules.validate`` first.
    """

    keys = list(plans) if plan_keys is None else list(plan_keys)
    selected = [plans[k] for k in keys]
    logger.info("comparing %d repayment plans", len(selected))
    return [evaluate_plan(request, plan, table) for plan in selected]


def cheapest_plan(comparisons: List[PlanComparison]) -> Optional[PlanComparison]:
    """Eligible plan with the lowest total paid, or ``None``."""

    eligible = [c for c in comparisons if c.is_eligible]
    if not eligible:
        return None
    return min(eligible, key=lambda c: c.result.total_paid)


def lowest_payment_plan(comparisons: List[PlanComparison]) -> Optional[PlanComparison]:
    """Eligible plan with the smallest monthly payment, or ``None``."""

    eligible = [c for c in comparisons if c.is_eligible]
    if not eligible:
        return None
    return min(eligible, key=lambda c: c.result.monthly_payment)


def fastest_payoff_plan(comparisons: List[PlanComparison]) -> Optional[PlanComparison]:
    """Eligible plan that ends soonest (payoff or forgiveness), or ``None``."""

    eligible = [c for c in comparisons if c.is_eligible]
    if not eligible:
        return None
    return min(eligible, key=lambda c: c.result.payoff_months)


def best_options(comparisons: List[PlanComparison]) -> Dict[str, Optional[PlanComparison]]:
    """Headline picks shown above the comparison table."""

    return {
        "lowest_payment": lowest_payment_plan(comparisons),
        "lowest_total": cheapest_plan(comparisons),
        "fastest_payoff": fastest_payoff_plan(comparisons),
    }
