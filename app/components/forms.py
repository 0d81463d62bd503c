"""Reusable form components for the Streamlit app."""

from __future__ import annotations

from decimal import Decimal

import streamlit as st

from takehome.config.schema import CalculationInput
from takehome.models.filing_status import FilingStatus
from takehome.models.jurisdiction import Jurisdiction

_STATUSES = list(FilingStatus)
_JURISDICTIONS = list(Jurisdiction)


def _money_input(label: str, value: Decimal, key: str, step: float = 1_000.0) -> Decimal:
    amount = st.number_input(
        label,
        min_value=0.0,
        value=float(value),
        step=step,
        key=key,
    )
    # number_input yields a float
    return Decimal(str(round(amount, 2)))


def calculation_input_form(key_prefix: str, inp: CalculationInput) -> CalculationInput:
    """Render input widgets and return the resulting input."""
    col1, col2, col3 = st.columns(3)
    with col1:
        gross = _money_input("Annual Gross Income ($)", inp.gross_income, f"{key_prefix}_gross")
    with col2:
        status = st.selectbox(
            "Filing Status",
            _STATUSES,
            index=_STATUSES.index(inp.filing_status),
            format_func=lambda s: s.display_name,
            key=f"{key_prefix}_status",
        )
    with col3:
        jurisdiction = st.selectbox(
            "State",
            _JURISDICTIONS,
            index=_JURISDICTIONS.index(inp.jurisdiction),
            format_func=lambda j: f"{j.display_name} ({j.code})",
            key=f"{key_prefix}_state",
        )

    with st.expander("Deductions & Retirement"):
        col1, col2 = st.columns(2)
        with col1:
            pre_tax = _money_input(
                "Pre-tax deductions ($/yr)", inp.pre_tax_deductions, f"{key_prefix}_pre", 100.0
            )
            traditional = _money_input(
                "Traditional 401(k) ($/yr)", inp.traditional_retirement, f"{key_prefix}_trad"
            )
        with col2:
            post_tax = _money_input(
                "Post-tax deductions ($/yr)", inp.post_tax_deductions, f"{key_prefix}_post", 100.0
            )
            roth = _money_input("Roth 401(k) ($/yr)", inp.roth_retirement, f"{key_prefix}_roth")

    return CalculationInput(
        gross_income=gross,
        filing_status=status,
        jurisdiction=jurisdiction,
        pre_tax_deductions=pre_tax,
        post_tax_deductions=post_tax,
        traditional_retirement=traditional,
        roth_retirement=roth,
    )
