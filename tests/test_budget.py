import pytest

from budget import (
    OtherCost,
    category_cost,
    clamp_retirement_age,
    expense_breakdown,
    min_retirement_age,
    new_other_cost,
    remove_other_cost,
    spending_bar_pct,
    summarize,
)
from config import DEFAULTS
from presets import PRESETS


def test_category_cost_ignores_unknown_ids():
    assert category_cost(["apartment", "nope"], PRESETS["housing"]) == 2500


def test_travel_is_averaged_per_month():
    assert category_cost(["road-trip"], PRESETS["travel"], annual=True) == pytest.approx(4000 / 12)


def test_default_household_snapshot():
    snap = summarize([2500, 3000], DEFAULTS["selections"], PRESETS, [])
    expected_expenses = 2500 + 600 + 550 + 150 + 4000 / 12
    assert snap.total_income == 5500
    assert snap.total_expenses == pytest.approx(expected_expenses)
    assert snap.net_income == pytest.approx(5500 - expected_expenses)
    assert snap.expense_ratio_pct == pytest.approx(expected_expenses / 5500 * 100)


def test_other_costs_are_added():
    costs = [OtherCost("other-1", "Gym", 50.0), OtherCost("other-2", "Llama Grooming", 25.0)]
    snap = summarize([1000], {}, PRESETS, costs)
    assert snap.total_expenses == 75.0
    df = expense_breakdown({}, PRESETS, costs)
    assert df.set_index("category").loc["other", "monthly"] == 75.0
    assert df.set_index("category").loc["other", "annual"] == 900.0


def test_no_income_ratio_is_zero():
    snap = summarize([0], {"housing": ["room"]}, PRESETS, [])
    assert snap.expense_ratio_pct == 0.0
    assert spending_bar_pct(snap) == 0.0


def test_spending_bar_is_capped():
    snap = summarize([1000], {"housing": ["mansion"]}, PRESETS, [])
    assert spending_bar_pct(snap) == 100.0


def test_breakdown_has_every_category():
    df = expense_breakdown(DEFAULTS["selections"], PRESETS, [])
    assert list(df["category"]) == ["housing", "groceries", "car", "leisure", "travel", "other"]


def test_new_other_cost():
    c = new_other_cost("  Llama Grooming ", "40", now_ms=123)
    assert c == OtherCost("other-123", "Llama Grooming", 40.0)


@pytest.mark.parametrize("label, cost", [("", 10), ("   ", 10), ("Gym", 0), ("Gym", -5), ("Gym", "abc"), ("Gym", None)])
def test_new_other_cost_rejects_bad_input(label, cost):
    with pytest.raises(ValueError):
        new_other_cost(label, cost)


def test_remove_other_cost():
    costs = [OtherCost("a", "A", 1.0), OtherCost("b", "B", 2.0)]
    assert remove_other_cost(costs, "a") == [OtherCost("b", "B", 2.0)]


def test_min_retirement_age():
    assert min_retirement_age(30, 32) == 33
    assert min_retirement_age(0, 0) == 1


def test_clamp_retirement_age():
    assert clamp_retirement_age(65, 30, 32) == 65
    assert clamp_retirement_age(32, 30, 32) == 33
    assert clamp_retirement_age(0, 0, 0) == 1
