"""Federal student loan repayment calculations.

Payment formulas, month-by-month simulation, input validation and plan
comparison. This module also exposes the package version for runtime
display."""

from importlib import metadata

from loanplan.calculators import idr_payment, poverty_line, simulate, standard_payment
from loanplan.models import (
    PlanComparison,
    PovertyGuidelineTable,
    RepaymentPlanParameters,
    RepaymentResult,
    SimulationRequest,
)
from loanplan.plans import best_options, cheapest_plan, compare_plans
from loanplan.presets import (
    POVERTY_GUIDELINES,
    POVERTY_GUIDELINES_2024,
    POVERTY_PER_ADDITIONAL,
    REPAYMENT_PLANS,
)
from loanplan.rules import ValidationIssue, validate
from loanplan.utils import format_currency, format_months

try:
    __version__ = metadata.version("loanplan")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "PlanComparison",
    "PovertyGuidelineTable",
    "RepaymentPlanParameters",
    "RepaymentResult",
    "SimulationRequest",
    "ValidationIssue",
    "POVERTY_GUIDELINES",
    "POVERTY_GUIDELINES_2024",
    "POVERTY_PER_ADDITIONAL",
    "REPAYMENT_PLANS",
    "best_options",
    "cheapest_plan",
    "compare_plans",
    "format_currency",
    "format_months",
    "idr_payment",
    "poverty_line",
    "simulate",
    "standard_payment",
    "validate",
]
