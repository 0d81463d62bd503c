"""takehome — Take-Home Pay Calculator."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `from app.components...` imports work
# when Streamlit Cloud runs `streamlit run app/Home.py`.
_root = str(Path(__file__).resolve().parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import streamlit as st

st.set_page_config(
    page_title="takehome",
    page_icon="💵",
    layout="wide",
    initial_sidebar_state="expanded",
)

from app.components.theme import register_theme

register_theme()

from app.components.charts import (
    bracket_chart,
    income_breakdown_donut,
    tax_component_bar,
    timeframe_bar_chart,
)
from app.components.forms import calculation_input_form
from takehome.config.defaults import DEFAULT_TAX_YEAR, default_input, sample_input
from takehome.core.engine import TaxCalculationEngine
from takehome.io.serialize import dump_result, round_cents
from takehome.taxes.embedded import EmbeddedTaxData


@st.cache_resource
def _provider() -> EmbeddedTaxData:
    return EmbeddedTaxData(tax_year=DEFAULT_TAX_YEAR)


st.title("takehome")
st.subheader("Take-Home Pay Calculator")

st.markdown(
    """
    Estimate what actually lands in your bank account after federal income
    tax, state income tax, disability insurance, local tax estimates and
    payroll (Social Security and Medicare) taxes.

    This is an **educational tool**, not tax advice. Brackets come from the
    bundled 2024 tables; local taxes are coarse averages.
    """
)

if "input" not in st.session_state:
    st.session_state["input"] = sample_input()

col1, col2 = st.columns(2)
with col1:
    if st.button("Sample $100k Filer", type="primary"):
        st.session_state["input"] = sample_input()
        st.rerun()
with col2:
    if st.button("Reset"):
        st.session_state["input"] = default_input()
        st.rerun()

inp = calculation_input_form("home", st.session_state["input"])
st.session_state["input"] = inp

engine = TaxCalculationEngine(_provider(), DEFAULT_TAX_YEAR)
result = engine.calculate(inp)
st.session_state["last_result"] = result

taxes = result.tax_breakdown
m1, m2, m3, m4 = st.columns(4)
m1.metric("Take-Home (annual)", f"${round_cents(result.income.net):,}")
m2.metric("Monthly", f"${round_cents(result.income.timeframes.monthly):,}")
m3.metric("Total Taxes", f"${round_cents(taxes.total_taxes):,}")
m4.metric("Effective Rate", f"{round_cents(result.effective_rates.total_percent)}%")

left, right = st.columns(2)
with left:
    st.plotly_chart(income_breakdown_donut(result), use_container_width=True)
with right:
    st.plotly_chart(timeframe_bar_chart(result.income.timeframes), use_container_width=True)

st.plotly_chart(tax_component_bar(result), use_container_width=True)

fed_col, state_col = st.columns(2)
with fed_col:
    st.markdown(
        f"**Federal** — marginal rate {round_cents(taxes.federal.marginal_rate * 100)}%, "
        f"taxable income ${round_cents(taxes.federal.taxable_income):,}"
    )
    if taxes.federal.bracket_breakdown:
        st.plotly_chart(
            bracket_chart(taxes.federal.bracket_breakdown, "Federal Tax by Bracket"),
            use_container_width=True,
        )
with state_col:
    jurisdiction = taxes.jurisdiction
    st.markdown(
        f"**{inp.jurisdiction.display_name}** — income tax "
        f"${round_cents(jurisdiction.income_tax):,}, disability "
        f"${round_cents(jurisdiction.disability_tax):,}, local (est.) "
        f"${round_cents(jurisdiction.local_tax):,}"
    )
    if jurisdiction.bracket_breakdown:
        st.plotly_chart(
            bracket_chart(jurisdiction.bracket_breakdown, "State Tax by Bracket"),
            use_container_width=True,
        )
    elif inp.jurisdiction.no_income_tax:
        st.info(f"{inp.jurisdiction.display_name} has no wage income tax.")

st.download_button(
    "Download Results (JSON)",
    data=dump_result(result),
    file_name="takehome_result.json",
    mime="application/json",
)
