import pytest

from loanplan.calculators import (
    amortized_payment,
    guideline_table,
    idr_payment,
    nz,
    poverty_line,
    standard_payment,
)
from loanplan.presets import POVERTY_GUIDELINES, POVERTY_GUIDELINES_2024, POVERTY_PER_ADDITIONAL


def test_nz_handles_blanks():
    assert nz(None) == 0.0
    assert nz(float("nan"), 5.0) == 5.0
    assert nz("12.5") == 12.5
    assert nz("abc", 1.0) == 1.0


def test_poverty_line_table_lookup():
    for size in range(1, 9):
        assert poverty_line(size) == POVERTY_GUIDELINES_2024[size]
    assert poverty_line(1) == 15060
    assert poverty_line(4) == 31200
    assert poverty_line(8) == 52720


def test_poverty_line_above_eight():
    assert poverty_line(9) == 52720 + 5380
    assert poverty_line(10) == 52720 + 2 * POVERTY_PER_ADDITIONAL


def test_poverty_line_clamps_small_households():
    assert poverty_line(0) == 15060
    assert poverty_line(-1) == 15060


def test_poverty_line_other_year():
    tbl = POVERTY_GUIDELINES[2023]
    assert guideline_table(2023) is tbl
    assert poverty_line(1, tbl) == 14580
    assert poverty_line(9, tbl) == 50560 + 5140


def test_standard_payment_reference_values():
    assert standard_payment(35000, 5.5) == pytest.approx(379.61, abs=0.5)
    assert standard_payment(200000, 7) == pytest.approx(2322.17, abs=0.05)


def test_standard_payment_zero_and_negative_balance():
    assert standard_payment(0, 5.5) == 0
    assert standard_payment(-1000, 5.5) == 0
    assert standard_payment(0, 0) == 0


def test_standard_payment_zero_rate():
    assert standard_payment(12000, 0) == 100
    assert standard_payment(60000, 0) == 500
    # no $50 floor when nothing accrues
    assert standard_payment(1200, 0) == 1200 / 120
    assert standard_payment(1200, 0) == 10


def test_standard_payment_minimum():
    assert standard_payment(500, 5) >= 50
    assert standard_payment(500, 5) == 50
    for balance in [1, 100, 2500, 5000, 90000]:
        assert standard_payment(balance, 4.5) >= 50


def test_amortized_payment_term():
    ten = amortized_payment(35000, 5.5, 120)
    twenty_five = amortized_payment(35000, 5.5, 300)
    assert twenty_five < ten
    assert amortized_payment(35000, 5.5, 0) == 0.0


def test_idr_payment_plan_variants():
    # SAVE: 10% above 225% of poverty
    assert idr_payment(50000, 1, 10, 2.25) == pytest.approx(134.29, abs=0.01)
    # PAYE / IBR: 10% above 150%
    assert idr_payment(50000, 1, 10, 1.5) == pytest.approx(228.42, abs=0.01)
    # ICR: 20% above 100%
    assert idr_payment(50000, 1, 20, 1.0) == pytest.approx(582.33, abs=0.01)


def test_idr_payment_family_of_four():
    assert idr_payment(80000, 4, 10, 2.25) == pytest.approx(81.67, abs=0.01)


def test_idr_payment_below_protected_income():
    assert idr_payment(20000, 1, 10, 2.25) == 0
    assert idr_payment(15060 * 2.25, 1, 10, 2.25) == 0


def test_idr_payment_degenerate_inputs():
    assert idr_payment(-1000, 1, 10, 2.25) == 0
    assert idr_payment(50000, 0, 10, 2.25) == 0
    assert idr_payment(50000, 1, 0, 2.25) == 0
    assert idr_payment(50000, 1, -5, 2.25) == 0


def test_idr_payment_non_decreasing_in_income():
    prev = 0.0
    for income in range(0, 200001, 5000):
        cur = idr_payment(income, 3, 10, 1.5)
        assert cur >= prev
        prev = cur


def test_idr_payment_uses_given_table():
    tbl = POVERTY_GUIDELINES[2023]
    expected = (50000 - 14580 * 2.25) * 0.10 / 12
    assert idr_payment(50000, 1, 10, 2.25, tbl) == pytest.approx(expected)
