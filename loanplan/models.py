from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

FilingStatus = Literal["single", "married-joint", "married-separate"]


class SimulationRequest(BaseModel):
    """Borrower inputs for one repayment calculation.

    Fields accept either the Python name or the camelCase key used by the
    simulator form. Ranges are not enforced here; ``rules.validate`` reports
    them as issues instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_balance: float = Field(35000.0, alias="totalBalance")
    annual_interest_rate_percent: float = Field(5.5, alias="weightedInterestRate")
    annual_income: float = Field(50000.0, alias="annualIncome")
    household_size: int = Field(1, alias="familySize")
    filing_status: FilingStatus = Field("single", alias="filingStatus")
    spouse_income: float = Field(0.0, alias="spouseIncome")
    spouse_loan_balance: float = Field(0.0, alias="spouseLoanBalance")


class PovertyGuidelineTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    amounts: Dict[int, float]
    per_additional_person: float

    @field_validator("amounts")
    @classmethod
    def _sizes_one_through_eight(cls, v: Dict[int, float]) -> Dict[int, float]:
        if sorted(v) != list(range(1, 9)):
            raise ValueError("guideline table must cover household sizes 1 through 8")
        values = [v[size] for size in range(1, 9)]
        if any(b < a for a, b in zip(values, values[1:])):
            raise ValueError("guideline amounts must not decrease with household size")
        return v


class RepaymentPlanParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    percentage_of_discretionary_income: float = 0.0
    poverty_line_multiplier: float = 0.0
    forgiveness_months: Optional[int] = None
    term_months: int = 120
    horizon_months: int = 120
    capped_at_standard: bool = False
    minimum_balance: float = 0.0
    small_balance_threshold: Optional[float] = None
    small_balance_forgiveness_months: Optional[int] = None
    notes: List[str] = Field(default_factory=list)

    @property
    def income_driven(self) -> bool:
        return self.percentage_of_discretionary_income > 0


class RepaymentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_payment: float = 0.0
    total_paid: float = 0.0
    total_interest: float = 0.0
    payoff_months: int = 0
    forgiveness_amount: float = 0.0
    remaining_balance: float = 0.0

    @property
    def is_complete(self) -> bool:
        """True when the balance was paid off or forgiven within the horizon."""
        return self.remaining_balance <= 0


class PlanComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    plan_key: str
    plan_name: str
    result: RepaymentResult
    forgiveness_year: Optional[int] = None
    is_eligible: bool = True
    notes: List[str] = Field(default_factory=list)

    @property
    def monthly_payment(self) -> float:
        return self.result.monthly_payment
