import math

import streamlit as st

_ALERTS = {
    "success": st.success,
    "info": st.info,
    "warning": st.warning,
    "danger": st.error,
}


def inject_css():
    try:
        with open("assets/styles.css", "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        pass


def app_header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def section(title: str, explainer: str = ""):
    st.markdown(f"### {title}")
    if explainer:
        st.caption(explainer)


def kpi_card(col, caption: str, value: str, note: str = ""):
    extra = f"<div class='caption'>{note}</div>" if note else ""
    col.markdown(
        f"<div class='card'><div class='caption'>{caption}</div>"
        f"<div class='kpi'>{value}</div>{extra}</div>",
        unsafe_allow_html=True,
    )


def show_comment(comment):
    _ALERTS.get(comment.severity, st.info)(f"**{comment.title}**  \n{comment.message}")


def format_currency(amount: float, annual: bool = False) -> str:
    sign = "-" if amount < 0 else ""
    out = f"{sign}${abs(amount):,.2f}"
    return f"{out}/yr" if annual else out


def format_compact(value: float) -> str:
    """Axis-style money: $1.2M, $450K, $900, -$3K."""
    sign = "-" if value < 0 else ""
    amount = abs(value)
    # Promote when rounding would print 1000K or 1000
    if round(amount / 1_000) >= 1_000:
        return f"{sign}${amount / 1_000_000:.1f}M"
    if round(amount) >= 1_000:
        return f"{sign}${amount / 1_000:.0f}K"
    return f"{sign}${amount:.0f}"


def format_years(years: float) -> str:
    if math.isinf(years) or years > 50:
        return "50+"
    return f"{years:.1f}"


def format_bankruptcy_age(age) -> str:
    return "Never!" if age is None else str(age)


def spending_caption(expense_ratio_pct: float) -> str:
    if expense_ratio_pct >= 0:
        return f"You are spending {expense_ratio_pct:.0f}% of your income."
    return f'Your "expenses" are generating income equal to {abs(expense_ratio_pct):.0f}% of your primary income!'
