from projection import ProjectionInputs
from scenarios import clone_inputs, compare, default_what_ifs


def _base():
    return ProjectionInputs(
        partner1_age=30,
        partner2_age=32,
        current_savings=50_000.0,
        retirement_age=65,
        net_monthly_income=1_000.0,
        total_monthly_expenses=2_000.0,
    )


def test_clone_inputs_leaves_original_alone():
    base = _base()
    later = clone_inputs(base, retirement_age=70)
    assert later.retirement_age == 70
    assert base.retirement_age == 65
    assert later.current_savings == base.current_savings


def test_default_what_ifs():
    variants = dict(default_what_ifs(_base(), save_more=500, retire_later=2, spend_less_pct=25))
    assert variants["Save more"] == {"net_monthly_income": 1_500.0}
    assert variants["Retire later"] == {"retirement_age": 67}
    assert variants["Spend less"] == {"total_monthly_expenses": 1_500.0}


def test_compare_every_what_if_helps():
    base = _base()
    res = compare(base, default_what_ifs(base, save_more=500, retire_later=2, spend_less_pct=25))
    assert list(res) == ["Baseline", "Save more", "Retire later", "Spend less"]
    baseline = res["Baseline"]
    assert res["Save more"].savings_at_retirement > baseline.savings_at_retirement
    assert res["Retire later"].savings_at_retirement == baseline.savings_at_retirement + 24_000
    assert res["Spend less"].savings_at_retirement == baseline.savings_at_retirement
    for name in ["Save more", "Retire later", "Spend less"]:
        assert res[name].age_at_bankruptcy > baseline.age_at_bankruptcy
