from loanplan.models import PovertyGuidelineTable, RepaymentPlanParameters

DISCLAIMER = (
    "This tool implements the federal Standard, Extended and income-driven repayment formulas "
    "(SAVE, PAYE, IBR, ICR) using a fixed snapshot of HHS poverty guidelines. "
    "Results are estimates only; your servicer's calculation, recertified income and "
    "current regulations prevail."
)

# HHS poverty guidelines, 48 contiguous states and DC.
POVERTY_GUIDELINES = {
    2023: PovertyGuidelineTable(
        year=2023,
        amounts={1: 14580, 2: 19720, 3: 24860, 4: 30000, 5: 35140, 6: 40280, 7: 45420, 8: 50560},
        per_additional_person=5140,
    ),
    2024: PovertyGuidelineTable(
        year=2024,
        amounts={1: 15060, 2: 20440, 3: 25820, 4: 31200, 5: 36580, 6: 41960, 7: 47340, 8: 52720},
        per_additional_person=5380,
    ),
}
DEFAULT_GUIDELINE_YEAR = 2024
POVERTY_GUIDELINES_2024 = POVERTY_GUIDELINES[2024].amounts
POVERTY_PER_ADDITIONAL = POVERTY_GUIDELINES[2024].per_additional_person

MINIMUM_PAYMENT = 50.0
STANDARD_TERM_MONTHS = 120
BALANCE_EPSILON = 0.01

VALIDATION_LIMITS = {
    "max_balance": 1_000_000,
    "max_rate_pct": 15.0,
    "max_income": 10_000_000,
    "min_family_size": 1,
    "max_family_size": 20,
}

# Plan rows. A plan with no discretionary-income percentage amortizes over
# ``term_months``; every other row goes through the income-driven formula.
REPAYMENT_PLANS = {
    "standard": RepaymentPlanParameters(
        key="standard",
        name="Standard (10-Year)",
        term_months=120,
        horizon_months=120,
        notes=["Fixed payments", "Lowest total interest", "Fastest payoff"],
    ),
    "extended": RepaymentPlanParameters(
        key="extended",
        name="Extended (25-Year)",
        term_months=300,
        horizon_months=300,
        minimum_balance=30000,
        notes=["Requires $30,000+ in loans", "Lower payments but more interest"],
    ),
    "save": RepaymentPlanParameters(
        key="save",
        name="SAVE Plan",
        percentage_of_discretionary_income=10.0,
        poverty_line_multiplier=2.25,
        forgiveness_months=240,
        horizon_months=300,
        small_balance_threshold=12000,
        small_balance_forgiveness_months=120,
        notes=[
            "10% of discretionary income",
            "Largest income protection (225% poverty)",
            "Government covers unpaid interest",
        ],
    ),
    "paye": RepaymentPlanParameters(
        key="paye",
        name="PAYE Plan",
        percentage_of_discretionary_income=10.0,
        poverty_line_multiplier=1.5,
        forgiveness_months=240,
        horizon_months=300,
        capped_at_standard=True,
        notes=["10% of discretionary income (capped)", 'Must be "new borrower" as of Oct 2007'],
    ),
    "ibr": RepaymentPlanParameters(
        key="ibr",
        name="IBR Plan (New Borrower)",
        percentage_of_discretionary_income=10.0,
        poverty_line_multiplier=1.5,
        forgiveness_months=240,
        horizon_months=300,
        capped_at_standard=True,
        notes=["10% of discretionary income for new borrowers", "15% for borrowers before July 2014"],
    ),
    "icr": RepaymentPlanParameters(
        key="icr",
        name="ICR Plan",
        percentage_of_discretionary_income=20.0,
        poverty_line_multiplier=1.0,
        forgiveness_months=300,
        horizon_months=300,
        notes=[
            "20% of discretionary income",
            "Only IDR option for Parent PLUS (after consolidation)",
            "Highest payments among IDR plans",
        ],
    ),
}
