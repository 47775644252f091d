from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from loanplan.models import SimulationRequest
from loanplan.presets import VALIDATION_LIMITS


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


def validate(request: SimulationRequest, limits: Optional[dict] = None) -> List[ValidationIssue]:
    limits = VALIDATION_LIMITS if limits is None else limits
    res: List[ValidationIssue] = []

    balance = float(request.total_balance)
    rate = float(request.annual_interest_rate_percent)
    income = float(request.annual_income)
    family = int(request.household_size)

    if balance <= 0:
        res.append(
            ValidationIssue(
                field="totalBalance",
                message="Loan balance must be greater than $0",
            )
        )
    elif balance > limits["max_balance"]:
        res.append(
            ValidationIssue(
                field="totalBalance",
                message=f"Please enter a realistic loan balance (under ${limits['max_balance']:,})",
            )
        )

    if rate <= 0:
        res.append(
            ValidationIssue(
                field="weightedInterestRate",
                message="Interest rate must be greater than 0%",
            )
        )
    elif rate > limits["max_rate_pct"]:
        res.append(
            ValidationIssue(
                field="weightedInterestRate",
                message="Interest rate seems too high. Federal rates are typically 3-9%",
            )
        )

    if income < 0:
        res.append(
            ValidationIssue(
                field="annualIncome",
                message="Income cannot be negative",
            )
        )
    elif income > limits["max_income"]:
        res.append(
            ValidationIssue(
                field="annualIncome",
                message="Please enter a realistic income amount",
            )
        )

    if family < limits["min_family_size"] or family > limits["max_family_size"]:
        res.append(
            ValidationIssue(
                field="familySize",
                message=(
                    f"Family size must be between {limits['min_family_size']} "
                    f"and {limits['max_family_size']}"
                ),
            )
        )

    # Spouse income only feeds the calculation on a joint return.
    if request.filing_status == "married-joint" and float(request.spouse_income) < 0:
        res.append(
            ValidationIssue(
                field="spouseIncome",
                message="Spouse income cannot be negative",
            )
        )

    return res


def is_valid(res: List[ValidationIssue]) -> bool:
    return not res
