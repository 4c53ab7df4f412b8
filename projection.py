import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from commentary import Comment, projection_comment
from config import HORIZON_AGE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotPoint:
    age: int
    savings: float


@dataclass
class ProjectionInputs:
    partner1_age: int
    partner2_age: int
    current_savings: float
    retirement_age: int          # caller keeps this above the oldest partner's age
    net_monthly_income: float    # drives saving before retirement
    total_monthly_expenses: float  # drives spending after retirement (may be negative)
    annual_return: float = 0.0   # fraction per year, applied to the balance before each year's flow


@dataclass(frozen=True)
class ProjectionResult:
    plot_data: Tuple[PlotPoint, ...]
    savings_at_retirement: float
    years_of_savings_post_retirement: float  # math.inf when savings never run out
    age_at_bankruptcy: Optional[int]          # None = never
    commentary: Comment
    start_age: int
    retirement_age: int

    @property
    def never_bankrupt(self) -> bool:
        return self.age_at_bankruptcy is None

    def to_frame(self) -> pd.DataFrame:
        """Plot series as a DataFrame with a phase label per age."""
        df = pd.DataFrame({
            "age": [p.age for p in self.plot_data],
            "savings": [p.savings for p in self.plot_data],
        })
        df["phase"] = "retirement"
        df.loc[df["age"] <= self.retirement_age, "phase"] = "accumulation"
        if not self.never_bankrupt:
            depleted = (df["age"] > self.retirement_age) & (df["savings"] <= 0)
            df.loc[depleted, "phase"] = "depleted"
        df.loc[df["age"] == self.start_age, "phase"] = "start"
        return df


def _grow(balance: float, rate: float) -> float:
    # Only savings earn a return; a shortfall is carried as is
    return balance * (1 + rate) if rate and balance > 0 else balance


def _append(points: List[PlotPoint], age: int, savings: float):
    # Ages already on the plot (retirement age below the starting age) are not repeated
    if age > points[-1].age:
        points.append(PlotPoint(age, savings))


def _runway_years(savings: float, annual_expense: float, rate: float) -> float:
    """
    Years a pot lasts when `annual_expense` (> 0) is drawn each year.
    Linear model: plain division. With a return rate: never, if the yearly return
    alone covers the expense; otherwise whole years while the grown balance still
    covers the expense, plus the fraction of the final year. The balance shrinks
    every year in that case, so the loop ends.
    """
    if not rate:
        return savings / annual_expense
    if rate > 0 and savings * rate >= annual_expense:
        return math.inf

    years = 0.0
    balance = savings
    while True:
        grown = _grow(balance, rate)
        if grown <= annual_expense:
            return years + max(grown, 0.0) / annual_expense
        balance = grown - annual_expense
        years += 1


def run_projection(inputs: ProjectionInputs) -> ProjectionResult:
    start_age = max(inputs.partner1_age, inputs.partner2_age, 1)  # avoid a zero-age start
    retire = inputs.retirement_age
    years_to_retirement = max(0, retire - start_age)
    rate = inputs.annual_return

    # Accumulation: the running balance is never clamped, only the plotted value
    balance = inputs.current_savings
    points = [PlotPoint(start_age, balance)]
    annual_net = inputs.net_monthly_income * 12
    for i in range(1, years_to_retirement + 1):
        balance = _grow(balance, rate) + annual_net
        if start_age + i <= HORIZON_AGE:
            points.append(PlotPoint(start_age + i, max(0.0, balance)))

    savings_at_retirement = max(0.0, balance)

    # Depletion
    annual_expense = inputs.total_monthly_expenses * 12
    years_of_savings = 0.0
    bankrupt_at: Optional[float] = None

    if annual_expense <= 0:
        # Other income covers costs: the pot only grows
        years_of_savings = math.inf
        for age in range(retire + 1, HORIZON_AGE + 1):
            balance = _grow(balance, rate) - annual_expense
            _append(points, age, balance)
    elif savings_at_retirement > 0:
        years_of_savings = _runway_years(savings_at_retirement, annual_expense, rate)
        if not math.isinf(years_of_savings):
            bankrupt_at = retire + years_of_savings

        remaining = savings_at_retirement
        for age in range(retire + 1, HORIZON_AGE + 1):
            remaining = _grow(remaining, rate) - annual_expense
            _append(points, age, max(0.0, remaining))
            if remaining <= 0:
                break
    else:
        # Broke on day one of retirement
        bankrupt_at = float(retire)

    # Pad with zeros so the series always reaches the horizon
    for age in range(points[-1].age + 1, HORIZON_AGE + 1):
        points.append(PlotPoint(age, 0.0))

    commentary = projection_comment(
        net_income=inputs.net_monthly_income,
        savings_at_retirement=savings_at_retirement,
        age_at_bankruptcy=bankrupt_at,
        retirement_age=retire,
        years_of_savings=years_of_savings,
    )

    result = ProjectionResult(
        plot_data=tuple(points),
        savings_at_retirement=savings_at_retirement,
        years_of_savings_post_retirement=years_of_savings,
        age_at_bankruptcy=None if bankrupt_at is None else math.floor(bankrupt_at),
        commentary=commentary,
        start_age=start_age,
        retirement_age=retire,
    )
    logger.debug(
        "projection start=%s retire=%s at_retirement=%.2f runway=%s bankrupt=%s bucket=%s",
        start_age, retire, savings_at_retirement, years_of_savings,
        result.age_at_bankruptcy, commentary.key,
    )
    return result


def project_retirement(net_monthly_income: float, total_monthly_expenses: float,
                       partner_ages: Sequence[int], current_savings: float,
                       retirement_age: int, annual_return: float = 0.0) -> ProjectionResult:
    p1, p2 = partner_ages
    return run_projection(ProjectionInputs(
        partner1_age=p1,
        partner2_age=p2,
        current_savings=current_savings,
        retirement_age=retirement_age,
        net_monthly_income=net_monthly_income,
        total_monthly_expenses=total_monthly_expenses,
        annual_return=annual_return,
    ))
