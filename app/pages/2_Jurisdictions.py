"""Jurisdictions page — the same paycheck in every state."""

from __future__ import annotations

import streamlit as st

st.set_page_config(page_title="Jurisdictions — takehome", layout="wide")

from app.components.theme import register_theme

register_theme()

from app.components.charts import jurisdiction_ranking_chart
from takehome.analytics.jurisdictions import rank_jurisdictions
from takehome.config.defaults import DEFAULT_TAX_YEAR, sample_input
from takehome.io.serialize import round_cents
from takehome.taxes.embedded import EmbeddedTaxData


@st.cache_resource
def _provider() -> EmbeddedTaxData:
    return EmbeddedTaxData(tax_year=DEFAULT_TAX_YEAR)


st.title("Jurisdictions")

inp = st.session_state.get("input", sample_input())
st.markdown(
    f"Ranking all 51 jurisdictions for a **{inp.filing_status.display_name}** filer earning "
    f"**${round_cents(inp.gross_income):,}**, compared with "
    f"**{inp.jurisdiction.display_name}**. Change the inputs on the Home page."
)

top = st.slider("Jurisdictions to show", min_value=5, max_value=51, value=15)

with st.spinner("Calculating..."):
    ranking = rank_jurisdictions(inp, _provider(), DEFAULT_TAX_YEAR)

best = ranking.best()
c1, c2, c3 = st.columns(3)
c1.metric("Home Take-Home", f"${round_cents(ranking.home_net_income):,}")
c2.metric(
    f"Best: {best.jurisdiction.display_name}",
    f"${round_cents(best.net_income):,}",
    delta=f"${round_cents(best.difference):,}",
)
c3.metric("Home Rank", f"{ranking.rank_of(inp.jurisdiction)} of {len(ranking.rows)}")

st.plotly_chart(jurisdiction_ranking_chart(ranking, top=top), use_container_width=True)

st.dataframe(
    [
        {
            "State": row.jurisdiction.display_name,
            "Code": row.jurisdiction.code,
            "Take-Home": float(round_cents(row.net_income)),
            "State Tax": float(round_cents(row.jurisdiction_tax)),
            "Total Taxes": float(round_cents(row.total_taxes)),
            "vs. Home": float(round_cents(row.difference)),
        }
        for row in ranking.rows
    ],
    use_container_width=True,
)
