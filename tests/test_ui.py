import pytest

from ui import format_bankruptcy_age, format_compact, format_currency, format_years, spending_caption


@pytest.mark.parametrize("value, text", [
    (2_500_000, "$2.5M"),
    (450_000, "$450K"),
    (900, "$900"),
    (-1_200_000, "-$1.2M"),
    (-3_400, "-$3K"),
    (999_999, "$1.0M"),
    (999.7, "$1K"),
])
def test_format_compact(value, text):
    assert format_compact(value) == text


def test_format_currency():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-50) == "-$50.00"
    assert format_currency(4000, annual=True) == "$4,000.00/yr"


def test_format_years_caps_at_fifty():
    assert format_years(18.5833) == "18.6"
    assert format_years(51) == "50+"
    assert format_years(float("inf")) == "50+"


def test_format_bankruptcy_age():
    assert format_bankruptcy_age(None) == "Never!"
    assert format_bankruptcy_age(83) == "83"


def test_spending_caption():
    assert spending_caption(75.2) == "You are spending 75% of your income."
    assert "generating income equal to 20%" in spending_caption(-20)
