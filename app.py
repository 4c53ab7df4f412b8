# app.py
import logging

import numpy as np
import plotly.graph_objects as go
import streamlit as st

from budget import clamp_retirement_age, min_retirement_age, new_other_cost, remove_other_cost, spending_bar_pct, summarize, expense_breakdown
from commentary import budget_comment
from config import APP_NAME, DEFAULTS, HORIZON_AGE, MAX_RETIREMENT_AGE, MAX_RETURN_PCT
from exporters import export_config, export_custom_presets, export_projection_series, import_custom_presets
from presets import CATEGORIES, CATEGORY_LABELS, catalog_with_custom, combined_other_cost_presets, custom_only, new_custom_preset, search_presets
from projection import ProjectionInputs, run_projection
from scenarios import compare, default_what_ifs
from ui import app_header, format_bankruptcy_age, format_compact, format_currency, format_years, inject_css, kpi_card, section, show_comment, spending_caption

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="💸", layout="wide")
inject_css()
app_header(APP_NAME, "Pick a lifestyle, see the monthly damage, then see how long the money lasts.")

st.session_state.setdefault("custom_presets", {})
st.session_state.setdefault("other_costs", [])

catalog = catalog_with_custom(st.session_state["custom_presets"])

# ------------- Sidebar (inputs) -------------
st.sidebar.header("Monthly income (net)")
p1_income = st.sidebar.number_input("Partner 1's net monthly income", value=float(DEFAULTS["partner1_income"]), step=100.0)
p2_income = st.sidebar.number_input("Partner 2's net monthly income", value=float(DEFAULTS["partner2_income"]), step=100.0)

st.sidebar.header("Projection")
p1_age = int(st.sidebar.number_input("Partner 1 age", min_value=0, max_value=MAX_RETIREMENT_AGE - 1, value=DEFAULTS["partner1_age"]))
p2_age = int(st.sidebar.number_input("Partner 2 age", min_value=0, max_value=MAX_RETIREMENT_AGE - 1, value=DEFAULTS["partner2_age"]))
current_savings = st.sidebar.number_input(
    "Current combined savings", value=float(DEFAULTS["current_savings"]), step=1000.0)
retirement_age = int(st.sidebar.number_input(
    "Retirement age", min_value=min_retirement_age(p1_age, p2_age), max_value=MAX_RETIREMENT_AGE,
    value=clamp_retirement_age(DEFAULTS["retirement_age"], p1_age, p2_age),
    help="Must be above the older partner's age."))
annual_return_pct = st.sidebar.number_input(
    "Savings return (%/yr)", min_value=0.0, max_value=MAX_RETURN_PCT, value=float(DEFAULTS["annual_return_pct"]), step=0.5, format="%.1f",
    help="0 keeps the plain model: savings only move by what you put in and take out.")

# ------------- Lifestyle -------------
section("1) Lifestyle choices", "Pick one or more presets per category. Travel is priced per year.")
selections = {}
cols = st.columns(2)
for i, cat in enumerate(CATEGORIES):
    presets = catalog[cat]
    by_id = {p.id: p for p in presets}
    with cols[i % 2]:
        selections[cat] = st.multiselect(
            CATEGORY_LABELS[cat],
            options=list(by_id),
            default=[pid for pid in DEFAULTS["selections"][cat] if pid in by_id],
            format_func=lambda pid, by_id=by_id: f"{by_id[pid].label} ({format_currency(by_id[pid].cost, by_id[pid].is_annual)})",
            key=f"sel_{cat}",
        )

# ------------- Other costs -------------
section("2) Other costs", "Anything the presets don't cover. Monthly.")
other_costs = st.session_state["other_costs"]
for c in other_costs:
    left, right = st.columns([6, 1])
    left.write(f"{c.label}: {format_currency(c.cost)}")
    if right.button("Remove", key=f"rm_{c.id}"):
        st.session_state["other_costs"] = remove_other_cost(other_costs, c.id)
        st.rerun()

with st.expander("Add a cost"):
    term = st.text_input("Search presets", key="other_search")
    matches = search_presets(combined_other_cost_presets(catalog), term)
    if matches:
        pick = st.selectbox("Preset", matches, format_func=lambda p: f"{p.label} ({format_currency(p.cost)})")
        if st.button("Add preset cost"):
            st.session_state["other_costs"] = other_costs + [new_other_cost(pick.label, pick.cost)]
            st.rerun()
    with st.form("custom_cost", clear_on_submit=True):
        label = st.text_input("Expense name", placeholder="e.g., Llama Grooming")
        cost = st.number_input("Monthly cost", value=0.0, step=10.0)
        if st.form_submit_button("Add custom cost"):
            try:
                st.session_state["other_costs"] = other_costs + [new_other_cost(label, cost)]
                st.rerun()
            except ValueError as e:
                st.error(str(e))

# ------------- Custom presets -------------
section("3) Custom presets", "Add your own presets, or move them between sessions as CSV.")
form_col, io_col = st.columns(2)
with form_col:
    with st.form("custom_preset", clear_on_submit=True):
        cat = st.selectbox("Category", CATEGORIES, index=CATEGORIES.index("leisure"), format_func=CATEGORY_LABELS.get)
        label = st.text_input("Label", placeholder="e.g., Private Jet Rental")
        cost = st.number_input("Cost (annual for travel, otherwise monthly)", value=0.0, step=10.0)
        icon_url = st.text_input("Icon URL (optional)", placeholder="https://.../image.png")
        if st.form_submit_button("Add custom preset"):
            try:
                preset = new_custom_preset(cat, label, cost, icon_url)
                st.session_state["custom_presets"].setdefault(cat, []).append(preset)
                st.rerun()
            except ValueError as e:
                st.error(str(e))
with io_col:
    try:
        name_csv, data_csv = export_custom_presets(custom_only(catalog))
        st.download_button("⬇️ Export custom presets (CSV)", data_csv, file_name=name_csv, mime="text/csv")
    except ValueError as e:
        st.caption(str(e))
    upload = st.file_uploader("Import presets (CSV)", type="csv")
    if upload is not None and st.button("Import"):
        try:
            imported = import_custom_presets(upload.getvalue())
        except ValueError as e:
            logger.warning("preset import failed: %s", e)
            st.error(f"Error importing presets: {e}")
        else:
            store = st.session_state["custom_presets"]
            for cat, items in imported.items():
                store.setdefault(cat, []).extend(items)
            st.success("Presets imported successfully!")
            st.rerun()

# ------------- Budget snapshot -------------
section("4) Monthly snapshot")
snapshot = summarize([p1_income, p2_income], selections, catalog, st.session_state["other_costs"])
c1, c2, c3 = st.columns(3)
kpi_card(c1, "Total monthly income", format_currency(snapshot.total_income))
kpi_card(c2, "Total monthly expenses", format_currency(snapshot.total_expenses))
kpi_card(c3, "Net monthly income", format_currency(snapshot.net_income))
st.progress(spending_bar_pct(snapshot) / 100.0)
st.caption(spending_caption(snapshot.expense_ratio_pct))
show_comment(budget_comment(snapshot.total_income, snapshot.total_expenses,
                            selections["housing"], selections["groceries"]))

breakdown = expense_breakdown(selections, catalog, st.session_state["other_costs"])
st.bar_chart(breakdown.set_index("label")["monthly"])

# ------------- Projection -------------
section("5) Retirement & savings projection",
        "Savings grow by your net income until retirement, then shrink by your monthly expenses.")
inputs = ProjectionInputs(
    partner1_age=p1_age,
    partner2_age=p2_age,
    current_savings=current_savings,
    retirement_age=retirement_age,
    net_monthly_income=snapshot.net_income,
    total_monthly_expenses=snapshot.total_expenses,
    annual_return=annual_return_pct / 100.0,
)
result = run_projection(inputs)

k1, k2, k3 = st.columns(3)
kpi_card(k1, "Savings at retirement", format_currency(result.savings_at_retirement))
kpi_card(k2, "Years of savings", format_years(result.years_of_savings_post_retirement))
kpi_card(k3, "Bankruptcy age", format_bankruptcy_age(result.age_at_bankruptcy))
show_comment(result.commentary)

df = result.to_frame()
fig = go.Figure()
fig.add_trace(go.Scatter(x=df["age"], y=df["savings"], mode="lines", name="Savings", fill="tozeroy"))
fig.add_vline(x=retirement_age, line_dash="dash", line_color="green", annotation_text="Retirement")
if result.age_at_bankruptcy is not None and result.age_at_bankruptcy <= HORIZON_AGE:
    fig.add_vline(x=result.age_at_bankruptcy, line_dash="dot", line_color="red", annotation_text="Broke")
ticks = np.linspace(0, max(float(df["savings"].max()), 1.0), 5)
fig.update_layout(
    title="Projected savings by age", xaxis_title="Age", yaxis_title="Savings",
    yaxis=dict(tickvals=ticks, ticktext=[format_compact(t) for t in ticks]),
    hovermode="x unified", margin=dict(l=30, r=20, t=60, b=30),
)
st.plotly_chart(fig, use_container_width=True)

# ------------- Quick what-ifs -------------
section("6) Quick what-ifs")
a, b, c = st.columns(3)
save_more = a.slider("Save more each month", 0, 2000, DEFAULTS["whatif_save_more"], 50)
retire_later = b.slider("Retire later (years)", 0, 10, DEFAULTS["whatif_retire_later"], 1)
spend_less = c.slider("Spend less in retirement (%)", 0, 50, DEFAULTS["whatif_spend_less_pct"], 1)

if st.button("Run what-ifs"):
    results = compare(inputs, default_what_ifs(inputs, save_more, retire_later, spend_less))
    st.dataframe([
        {
            "Scenario": name,
            "Savings at retirement": format_currency(r.savings_at_retirement),
            "Years of savings": format_years(r.years_of_savings_post_retirement),
            "Bankruptcy age": format_bankruptcy_age(r.age_at_bankruptcy),
            "Verdict": r.commentary.title,
        }
        for name, r in results.items()
    ], use_container_width=True)

# ------------- Export -------------
section("7) Export")
name_csv, data_csv = export_projection_series(result)
st.download_button("⬇️ Download projection (CSV)", data_csv, file_name=name_csv, mime="text/csv")
name_cfg, data_cfg = export_config({
    "inputs": inputs.__dict__,
    "selections": selections,
    "other_costs": [c.__dict__ for c in st.session_state["other_costs"]],
    "years_of_savings_post_retirement": result.years_of_savings_post_retirement,
})
st.download_button("⬇️ Download your inputs (JSON)", data_cfg, file_name=name_cfg, mime="application/json")

st.markdown("---")
st.caption("A deliberately simple model: no inflation, no taxes, no market swings. It's a reality check, not advice.")
