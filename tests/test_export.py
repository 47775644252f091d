import pytest

from loanplan.export import COLUMNS, build_comparison_csv, build_comparison_report, comparison_frame
from loanplan.models import SimulationRequest
from loanplan.plans import compare_plans
from loanplan.presets import DISCLAIMER


def test_comparison_frame_rows():
    res = compare_plans(SimulationRequest())
    df = comparison_frame(res)
    assert list(df.columns) == COLUMNS
    assert len(df) == len(res)
    assert df.loc[0, "Plan Name"] == "Standard (10-Year)"
    assert int(df.loc[0, "Payoff Time (months)"]) == 120
    assert round(float(df.loc[2, "Monthly Payment"]), 2) == 134.29


def test_comparison_frame_empty():
    df = comparison_frame([])
    assert list(df.columns) == COLUMNS
    assert df.empty


def test_csv_export():
    res = compare_plans(SimulationRequest(), ["standard", "save"])
    lines = build_comparison_csv(res).splitlines()
    assert lines[0] == ",".join(COLUMNS)
    assert len(lines) == 3
    assert lines[1].startswith("Standard (10-Year),")
    assert lines[2].startswith("SAVE Plan,134.29,")


def test_report_includes_inputs_plans_and_disclaimer():
    req = SimulationRequest()
    output = build_comparison_report(req, compare_plans(req, ["standard", "save"]))
    assert b"Loan balance: $35,000" in output
    assert b"Interest rate: 5.50%" in output
    assert b"[x] Standard (10-Year)" in output
    assert b"[x] SAVE Plan: $134/mo" in output
    assert b"forgiven after 20 years" in output
    assert DISCLAIMER.encode() in output


def test_report_marks_ineligible_plans():
    req = SimulationRequest(total_balance=20000)
    output = build_comparison_report(req, compare_plans(req, ["extended"]))
    assert b"[ ] Extended (25-Year)" in output


def test_report_requires_valid_request():
    req = SimulationRequest(total_balance=0, household_size=0)
    with pytest.raises(ValueError) as exc:
        build_comparison_report(req, [])
    assert "totalBalance" in str(exc.value)
    assert "familySize" in str(exc.value)
