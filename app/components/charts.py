"""Chart components for the Streamlit app."""

from __future__ import annotations

from collections.abc import Sequence

import plotly.graph_objects as go

from app.components.theme import (
    DEDUCTION_COLOR,
    FEDERAL_COLOR,
    JURISDICTION_COLOR,
    LOSS_COLOR,
    NET_COLOR,
    PAYROLL_COLOR,
    add_zero_hline,
    make_rgba,
)
from takehome.analytics.jurisdictions import JurisdictionRanking
from takehome.core.engine import CalculationResult, ScenarioComparison
from takehome.core.timeframe import Timeframe, TimeframeIncome
from takehome.taxes.brackets import BracketAmount


def income_breakdown_donut(result: CalculationResult) -> go.Figure:
    """Donut chart of where gross income goes: taxes, deductions and take-home."""
    taxes = result.tax_breakdown
    inp = result.input
    deductions = (
        inp.pre_tax_deductions
        + inp.traditional_retirement
        + inp.post_tax_deductions
        + inp.roth_retirement
    )
    labels = ["Federal Tax", "Jurisdiction Tax", "Payroll Tax", "Deductions", "Take-Home"]
    values = [
        float(taxes.federal.tax),
        float(taxes.jurisdiction.total_tax),
        float(taxes.payroll.total),
        float(deductions),
        float(max(result.income.net, 0)),
    ]
    colors = [FEDERAL_COLOR, JURISDICTION_COLOR, PAYROLL_COLOR, DEDUCTION_COLOR, NET_COLOR]

    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=values,
            hole=0.55,
            marker=dict(colors=colors),
            sort=False,
            textinfo="percent",
            hovertemplate="%{label}: $%{value:,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title="Where Your Gross Income Goes",
        annotations=[
            dict(
                text=f"${float(result.income.net):,.0f}<br>take-home",
                x=0.5,
                y=0.5,
                showarrow=False,
                font=dict(size=15),
            )
        ],
        height=420,
    )
    return fig


def tax_component_bar(result: CalculationResult) -> go.Figure:
    """Stacked bar of tax components, split into their sub-parts."""
    taxes = result.tax_breakdown
    parts = [
        ("Federal income", taxes.federal.tax, FEDERAL_COLOR),
        ("Jurisdiction income", taxes.jurisdiction.income_tax, JURISDICTION_COLOR),
        ("Disability insurance", taxes.jurisdiction.disability_tax, "#FFD8B1"),
        ("Local (est.)", taxes.jurisdiction.local_tax, "#AAFFC3"),
        ("Social Security", taxes.payroll.base_tax, PAYROLL_COLOR),
        ("Medicare", taxes.payroll.supplemental_tax, "#DCBEFF"),
        ("Additional Medicare", taxes.payroll.surtax, "#F032E6"),
    ]

    fig = go.Figure()
    for name, amount, color in parts:
        if amount == 0:
            continue
        fig.add_trace(
            go.Bar(
                x=[float(amount)],
                y=["Taxes"],
                orientation="h",
                name=name,
                marker_color=color,
                hovertemplate=f"{name}: $%{{x:,.0f}}<extra></extra>",
            )
        )
    fig.update_layout(
        title="Tax Components",
        barmode="stack",
        xaxis_tickformat="$,.0f",
        yaxis=dict(tickformat=""),
        height=260,
    )
    return fig


def bracket_chart(breakdown: Sequence[BracketAmount], title: str = "Tax by Bracket") -> go.Figure:
    """Bar chart of income and tax in each bracket reached."""
    labels = [f"{float(row.rate) * 100:g}%" for row in breakdown]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=labels,
            y=[float(row.taxable_in_bracket) for row in breakdown],
            name="Income in bracket",
            marker_color=DEDUCTION_COLOR,
        )
    )
    fig.add_trace(
        go.Bar(
            x=labels,
            y=[float(row.tax_paid) for row in breakdown],
            name="Tax paid",
            marker_color=FEDERAL_COLOR,
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Bracket rate",
        barmode="group",
        height=380,
    )
    return fig


_TIMEFRAMES = [
    Timeframe.MONTHLY,
    Timeframe.SEMI_MONTHLY,
    Timeframe.BI_WEEKLY,
    Timeframe.WEEKLY,
    Timeframe.DAILY,
    Timeframe.HOURLY,
]


def timeframe_bar_chart(timeframes: TimeframeIncome) -> go.Figure:
    """Take-home pay per period."""
    values = [float(timeframes.get(tf)) for tf in _TIMEFRAMES]
    fig = go.Figure(
        go.Bar(
            x=[tf.display_name for tf in _TIMEFRAMES],
            y=values,
            marker_color=NET_COLOR,
            text=[f"${v:,.2f}" for v in values],
            textposition="outside",
        )
    )
    fig.update_layout(
        title="Take-Home Pay by Period",
        yaxis_title="Net pay ($)",
        height=380,
    )
    return fig


def comparison_chart(comparison: ScenarioComparison) -> go.Figure:
    """Grouped bars of taxes and take-home pay for base vs. scenario."""
    categories = ["Federal", "Jurisdiction", "Payroll", "Take-Home"]

    def _values(result: CalculationResult) -> list[float]:
        taxes = result.tax_breakdown
        return [
            float(taxes.federal.tax),
            float(taxes.jurisdiction.total_tax),
            float(taxes.payroll.total),
            float(result.income.net),
        ]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(x=categories, y=_values(comparison.base), name="Base", marker_color=DEDUCTION_COLOR)
    )
    fig.add_trace(
        go.Bar(
            x=categories,
            y=_values(comparison.scenario),
            name="Scenario",
            marker_color=NET_COLOR if comparison.is_positive else LOSS_COLOR,
        )
    )
    fig.update_layout(
        title="Base vs. Scenario",
        barmode="group",
        height=420,
    )
    return fig


def jurisdiction_ranking_chart(ranking: JurisdictionRanking, top: int | None = None) -> go.Figure:
    """Horizontal bars of net-income difference against the home jurisdiction.

    Args:
        ranking: Output of ``rank_jurisdictions``.
        top: Show only the first ``top`` rows. ``None`` shows all.

    Returns:
        Plotly Figure.
    """
    rows = ranking.rows if top is None else ranking.rows[:top]
    # Reverse so the best jurisdiction is drawn at the top
    rows = list(reversed(rows))
    diffs = [float(row.difference) for row in rows]

    fig = go.Figure(
        go.Bar(
            y=[row.jurisdiction.code for row in rows],
            x=diffs,
            orientation="h",
            marker_color=[NET_COLOR if d >= 0 else LOSS_COLOR for d in diffs],
            customdata=[row.jurisdiction.display_name for row in rows],
            hovertemplate="%{customdata}: %{x:$,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=f"Take-Home vs. {ranking.home.display_name}",
        xaxis_title="Change in annual take-home ($)",
        xaxis_tickformat="$,.0f",
        yaxis=dict(tickformat=""),
        height=max(350, 18 * len(rows)),
    )
    fig.add_vline(x=0, line_dash="solid", line_color="gray", line_width=1)
    return fig


def raise_curve_chart(gross_values: Sequence[float], net_values: Sequence[float]) -> go.Figure:
    """Net income as a function of gross income."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=list(gross_values),
            y=list(net_values),
            mode="lines",
            line=dict(color=NET_COLOR, width=2),
            fill="tozeroy",
            fillcolor=make_rgba(NET_COLOR, 0.15),
            name="Take-home",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=list(gross_values),
            y=list(gross_values),
            mode="lines",
            line=dict(color=DEDUCTION_COLOR, width=1, dash="dot"),
            name="Gross",
        )
    )
    add_zero_hline(fig)
    fig.update_layout(
        title="Take-Home Pay vs. Gross Income",
        xaxis_title="Gross income ($)",
        xaxis_tickformat="$,.0f",
        yaxis_title="Take-home ($)",
        hovermode="x unified",
        height=420,
    )
    return fig
