from dataclasses import asdict
from typing import Dict, List, Tuple

from projection import ProjectionInputs, ProjectionResult, run_projection


def clone_inputs(inputs: ProjectionInputs, **overrides) -> ProjectionInputs:
    base = asdict(inputs)
    base.update(overrides)
    return ProjectionInputs(**base)


def default_what_ifs(inputs: ProjectionInputs, save_more: float, retire_later: int,
                     spend_less_pct: float) -> List[Tuple[str, dict]]:
    """The three quick what-ifs: save more now, work longer, spend less in retirement."""
    return [
        ("Save more", {"net_monthly_income": inputs.net_monthly_income + save_more}),
        ("Retire later", {"retirement_age": inputs.retirement_age + retire_later}),
        ("Spend less", {"total_monthly_expenses": inputs.total_monthly_expenses * (1 - spend_less_pct / 100.0)}),
    ]


def compare(inputs: ProjectionInputs, variants: List[Tuple[str, dict]]) -> Dict[str, ProjectionResult]:
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> projection (baseline included under "Baseline")
    """
    res = {"Baseline": run_projection(inputs)}
    for name, edits in variants:
        res[name] = run_projection(clone_inputs(inputs, **edits))
    return res
