"""
Canned commentary for the budget snapshot and the retirement projection.

Both lookups are pure: the same numbers always pick the same comment.
Severity maps onto Streamlit's alert boxes (success / info / warning / error).
"""

import math
from dataclasses import dataclass
from typing import List, Optional

SEVERITIES = ("success", "info", "warning", "danger")


@dataclass(frozen=True)
class Comment:
    key: str
    title: str
    message: str
    severity: str


BUDGET_COMMENTS = {
    "side_hustle": Comment(
        "side_hustle",
        "The side hustle is strong.",
        "You've managed to get paid for your lifestyle. Are you an influencer, or did you just monetize breathing?",
        "info",
    ),
    "bezos_bozo": Comment(
        "bezos_bozo",
        "Living like Bezos, earning like a bozo.",
        "Your spending habits are writing checks your income can't cash. Time to swap champagne wishes for tap water dreams.",
        "danger",
    ),
    "minimalist": Comment(
        "minimalist",
        "Ah, the 'air and pavement' diet.",
        "It's a bold minimalist strategy. Very chic, very... hungry. Is this voluntary?",
        "warning",
    ),
    "hiring": Comment(
        "hiring",
        "Are you hiring?",
        "Your budget has more room than a mansion. Seriously, asking for a friend... who is me.",
        "success",
    ),
    "tightrope": Comment(
        "tightrope",
        "Walking the financial tightrope.",
        "You're balancing perfectly, for now. One gust of wind (or an unexpected bill) and it's a long way down.",
        "warning",
    ),
    "crying": Comment(
        "crying",
        "Your bank account is crying.",
        "And honestly, so am I. This isn't a budget, it's a cry for help written in red ink.",
        "danger",
    ),
    "thoughts_and_prayers": Comment(
        "thoughts_and_prayers",
        "The 'Thoughts & Prayers' budget plan.",
        "Hoping for the best is not a financial strategy. Unless you're planning to win the lottery, this won't end well.",
        "danger",
    ),
    "sustainable": Comment(
        "sustainable",
        "Solidly Sustainable!",
        "Look at you, being all responsible. Your future selves are already thanking you. Don't get too crazy, now.",
        "success",
    ),
}


def budget_comment(total_income: float, total_expenses: float,
                   housing_ids: List[str], groceries_ids: List[str]) -> Comment:
    net = total_income - total_expenses
    ratio = total_expenses / total_income if total_income > 0 else math.inf

    if total_expenses < 0:
        return BUDGET_COMMENTS["side_hustle"]
    if "homeless" in housing_ids and "no-eating" in groceries_ids:
        return BUDGET_COMMENTS["minimalist"]
    if total_income == 0 and total_expenses > 0:
        return BUDGET_COMMENTS["thoughts_and_prayers"]
    if ratio > 1.2:
        return BUDGET_COMMENTS["bezos_bozo"]
    if net < 0:
        return BUDGET_COMMENTS["crying"]
    if 0 < net < total_income * 0.1:
        return BUDGET_COMMENTS["tightrope"]
    if net > total_income * 0.5:
        return BUDGET_COMMENTS["hiring"]
    return BUDGET_COMMENTS["sustainable"]


# Projection buckets, most severe first. Messages may carry {age} / {years}.
PROJECTION_BUCKETS = {
    "cliff": (
        "The Math Isn't Mathing",
        "You're spending more than you earn and will have no savings for retirement. "
        "This isn't a projection; it's a financial cliff.",
        "danger",
    ),
    "immortal": (
        "Financial Immortality Unlocked",
        "Your money will outlive you, your children, and possibly civilization itself. Well done.",
        "success",
    ),
    "golden": (
        "The Golden Years are... Golden!",
        "You're set for a long and comfortable retirement. Your planning is solid.",
        "success",
    ),
    "cushion": (
        "A Comfortable Cushion",
        "You've got a runway post-retirement, but at age {age}, the party's over. "
        "No sudden super-yacht purchases.",
        "warning",
    ),
    "short-runway": (
        "Dangerously Short Runway",
        "You'll run out of money just {years} years into retirement. Time to rethink... everything.",
        "danger",
    ),
}


def _bucket(key: str, **fmt) -> Comment:
    title, message, severity = PROJECTION_BUCKETS[key]
    return Comment(key, title, message.format(**fmt), severity)


def projection_comment(net_income: float, savings_at_retirement: float,
                       age_at_bankruptcy: Optional[float], retirement_age: int,
                       years_of_savings: float) -> Comment:
    """
    age_at_bankruptcy is the raw (unfloored) age, None when savings never run out.
    """
    if net_income < 0 and savings_at_retirement <= 0:
        return _bucket("cliff")
    if age_at_bankruptcy is None:
        return _bucket("immortal")
    if age_at_bankruptcy > 85:
        return _bucket("golden")
    if age_at_bankruptcy > retirement_age + 5:
        return _bucket("cushion", age=math.floor(age_at_bankruptcy))
    return _bucket("short-runway", years=f"{years_of_savings:.1f}")
