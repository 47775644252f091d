import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from loanplan.utils import format_currency, format_months


def test_format_currency_whole_dollars():
    assert format_currency(1234) == "$1,234"
    assert format_currency(1000000) == "$1,000,000"
    assert format_currency(0) == "$0"


def test_format_currency_rounds_half_up():
    assert format_currency(1234.56) == "$1,235"
    assert format_currency(1234.49) == "$1,234"
    assert format_currency(0.5) == "$1"
    assert format_currency(2.5) == "$3"


def test_format_currency_negative():
    assert format_currency(-500) == "-$500"
    assert format_currency(-1234.5) == "-$1,235"
    assert format_currency(-0.2) == "$0"


def test_format_months():
    assert format_months(6) == "6 months"
    assert format_months(11) == "11 months"
    assert format_months(12) == "1 years"
    assert format_months(24) == "2 years"
    assert format_months(120) == "10 years"
    assert format_months(15) == "1 years, 3 months"
    assert format_months(25) == "2 years, 1 months"


def test_format_months_non_positive():
    assert format_months(0) == "0 months"
    assert format_months(-5) == "0 months"
