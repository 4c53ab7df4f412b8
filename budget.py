import time
from dataclasses import dataclass
from typing import Dict, List

import numpy as np
import pandas as pd

from presets import ANNUAL_CATEGORIES, CATEGORIES, CATEGORY_LABELS, Preset, find_preset


@dataclass(frozen=True)
class OtherCost:
    id: str
    label: str
    cost: float   # monthly


@dataclass(frozen=True)
class BudgetSnapshot:
    total_income: float
    total_expenses: float
    net_income: float
    expense_ratio_pct: float   # share of income spent; 0 when there is no income


def new_other_cost(label: str, cost, now_ms: int = None) -> OtherCost:
    label = (label or "").strip()
    try:
        cost = float(cost)
    except (TypeError, ValueError):
        cost = 0.0
    if not label or cost <= 0:
        raise ValueError("Please enter a name and a valid positive cost.")
    now_ms = int(time.time() * 1000) if now_ms is None else now_ms
    return OtherCost(id=f"other-{now_ms}", label=label, cost=cost)


def remove_other_cost(costs: List[OtherCost], cost_id: str) -> List[OtherCost]:
    return [c for c in costs if c.id != cost_id]


def category_cost(ids: List[str], presets: List[Preset], annual: bool = False) -> float:
    """Sum of the selected presets; unknown ids count as zero. Annual totals come back monthly."""
    total = 0.0
    for pid in ids:
        p = find_preset(presets, pid)
        total += p.cost if p is not None else 0.0
    return total / 12 if annual else total


def expense_breakdown(selections: Dict[str, List[str]], catalog: Dict[str, List[Preset]],
                      other_costs: List[OtherCost]) -> pd.DataFrame:
    """
    Monthly cost per category (travel averaged over the year) plus an "other" row.
    """
    rows = []
    for cat in CATEGORIES:
        rows.append({
            "category": cat,
            "label": CATEGORY_LABELS[cat],
            "monthly": category_cost(selections.get(cat, []), catalog.get(cat, []),
                                     annual=cat in ANNUAL_CATEGORIES),
        })
    rows.append({
        "category": "other",
        "label": "Other Costs",
        "monthly": float(sum(c.cost for c in other_costs)),
    })
    out = pd.DataFrame(rows)
    out["annual"] = out["monthly"] * 12
    return out


def summarize(incomes: List[float], selections: Dict[str, List[str]],
              catalog: Dict[str, List[Preset]], other_costs: List[OtherCost]) -> BudgetSnapshot:
    total_income = float(sum(incomes))
    total_expenses = float(expense_breakdown(selections, catalog, other_costs)["monthly"].sum())
    ratio = total_expenses / total_income * 100 if total_income > 0 else 0.0
    return BudgetSnapshot(
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
        expense_ratio_pct=ratio,
    )


def spending_bar_pct(snapshot: BudgetSnapshot) -> float:
    """Width of the "share of income spent" bar, kept within 0..100."""
    return float(np.clip(snapshot.expense_ratio_pct, 0.0, 100.0))


def min_retirement_age(partner1_age: int, partner2_age: int) -> int:
    oldest = max(partner1_age, partner2_age)
    return oldest + 1 if oldest > 0 else 1


def clamp_retirement_age(retirement_age: int, partner1_age: int, partner2_age: int) -> int:
    """The input surface never hands the engine a retirement age at or below the oldest partner."""
    if retirement_age <= max(partner1_age, partner2_age):
        return min_retirement_age(partner1_age, partner2_age)
    return retirement_age
