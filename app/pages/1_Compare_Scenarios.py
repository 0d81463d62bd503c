"""Compare Scenarios page — take-home pay before and after a change."""

from __future__ import annotations

from decimal import Decimal

import streamlit as st

st.set_page_config(page_title="Compare Scenarios — takehome", layout="wide")

from app.components.theme import register_theme

register_theme()

from app.components.charts import comparison_chart, raise_curve_chart
from app.components.forms import calculation_input_form
from takehome.config.defaults import (
    DEFAULT_TAX_YEAR,
    max_retirement_scenario,
    raise_scenario,
    sample_input,
)
from takehome.core.engine import TaxCalculationEngine
from takehome.io.serialize import dump_comparison, round_cents
from takehome.taxes.embedded import EmbeddedTaxData


@st.cache_resource
def _provider() -> EmbeddedTaxData:
    return EmbeddedTaxData(tax_year=DEFAULT_TAX_YEAR)


st.title("Compare Scenarios")
st.markdown("See how a raise, a move or a change in contributions affects take-home pay.")

base_default = st.session_state.get("input", sample_input())
if "scenario_input" not in st.session_state:
    st.session_state["scenario_input"] = raise_scenario(base_default, Decimal("10000"))

st.subheader("Base")
base = calculation_input_form("base", base_default)

st.subheader("Scenario")
col1, col2 = st.columns(2)
with col1:
    if st.button("+$10k Raise"):
        st.session_state["scenario_input"] = raise_scenario(base, Decimal("10000"))
        st.rerun()
with col2:
    if st.button("Max Traditional 401(k)"):
        st.session_state["scenario_input"] = max_retirement_scenario(base)
        st.rerun()
scenario = calculation_input_form("scenario", st.session_state["scenario_input"])
st.session_state["scenario_input"] = scenario

engine = TaxCalculationEngine(_provider(), DEFAULT_TAX_YEAR)
comparison = engine.compare_scenarios(base, scenario)

sign = "+" if comparison.is_positive else ""
m1, m2, m3 = st.columns(3)
m1.metric("Base Take-Home", f"${round_cents(comparison.base.income.net):,}")
m2.metric(
    "Scenario Take-Home",
    f"${round_cents(comparison.scenario.income.net):,}",
    delta=f"{sign}{round_cents(comparison.net_difference_percent)}%",
)
m3.metric("Monthly Difference", f"{sign}${round_cents(comparison.monthly_difference):,}")

st.plotly_chart(comparison_chart(comparison), use_container_width=True)

# Take-home curve for the base taxpayer across a range of gross incomes
st.subheader("Take-Home Curve")
upper = max(int(base.gross_income) * 2, 50_000)
grosses = [Decimal(g) for g in range(0, upper + 1, max(upper // 50, 1))]
nets = [engine.calculate(base.model_copy(update={"gross_income": g})).income.net for g in grosses]
st.plotly_chart(
    raise_curve_chart([float(g) for g in grosses], [float(n) for n in nets]),
    use_container_width=True,
)

st.download_button(
    "Download Comparison (JSON)",
    data=dump_comparison(comparison),
    file_name="takehome_comparison.json",
    mime="application/json",
)
