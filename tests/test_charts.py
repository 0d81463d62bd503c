"""Smoke tests for chart functions: each returns a go.Figure with expected traces."""

from __future__ import annotations

from decimal import Decimal

import plotly.graph_objects as go
import plotly.io as pio
import pytest
from app.components.charts import (
    bracket_chart,
    comparison_chart,
    income_breakdown_donut,
    jurisdiction_ranking_chart,
    raise_curve_chart,
    tax_component_bar,
    timeframe_bar_chart,
)
from app.components.theme import make_rgba, register_theme

from takehome.analytics.jurisdictions import rank_jurisdictions
from takehome.config.schema import CalculationInput
from takehome.core.engine import CalculationResult, TaxCalculationEngine
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.embedded import EmbeddedTaxData

# Register theme once for all tests
register_theme()

D = Decimal


@pytest.fixture
def california(engine: TaxCalculationEngine) -> CalculationResult:
    return engine.calculate(
        CalculationInput(gross_income=D("100000"), jurisdiction=Jurisdiction.CALIFORNIA)
    )


class TestTheme:
    def test_make_rgba(self) -> None:
        assert make_rgba("#3CB44B", 0.5) == "rgba(60, 180, 75, 0.5)"

    def test_template_is_default(self) -> None:
        assert pio.templates.default == "takehome"
        layout = pio.templates["takehome"].layout
        assert layout.yaxis.tickformat == "$,.0f"
        assert layout.plot_bgcolor == "white"

    def test_horizontal_bars_reset_category_tickformat(self, california: CalculationResult) -> None:
        fig = tax_component_bar(california)
        assert fig.layout.yaxis.tickformat == ""
        assert fig.layout.xaxis.tickformat == "$,.0f"


class TestResultCharts:
    def test_income_breakdown_donut(self, california: CalculationResult) -> None:
        fig = income_breakdown_donut(california)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert len(fig.data[0].values) == 5

    def test_tax_component_bar_skips_zero_parts(self, california: CalculationResult) -> None:
        fig = tax_component_bar(california)
        assert isinstance(fig, go.Figure)
        names = [trace.name for trace in fig.data]
        assert len(names) == 5
        assert "Disability insurance" in names
        assert "Additional Medicare" not in names

    def test_bracket_chart(self, california: CalculationResult) -> None:
        breakdown = california.tax_breakdown.federal.bracket_breakdown
        fig = bracket_chart(breakdown)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
        assert list(fig.data[0].x) == ["10%", "12%", "22%"]

    def test_bracket_chart_empty(self) -> None:
        fig = bracket_chart(())
        assert len(fig.data) == 2

    def test_timeframe_bar_chart(self, california: CalculationResult) -> None:
        fig = timeframe_bar_chart(california.income.timeframes)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert len(fig.data[0].x) == 6


class TestComparisonCharts:
    def test_comparison_chart(self, engine: TaxCalculationEngine) -> None:
        base = CalculationInput(gross_income=D("100000"), jurisdiction=Jurisdiction.CALIFORNIA)
        scenario = base.model_copy(update={"jurisdiction": Jurisdiction.TEXAS})
        fig = comparison_chart(engine.compare_scenarios(base, scenario))
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2

    def test_jurisdiction_ranking_chart(self, provider: EmbeddedTaxData) -> None:
        ranking = rank_jurisdictions(
            CalculationInput(gross_income=D("100000")), provider, max_workers=1
        )
        fig = jurisdiction_ranking_chart(ranking, top=10)
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert len(fig.data[0].y) == 10
        # Best jurisdiction is drawn last, at the top
        assert fig.data[0].y[-1] == "AK"

    def test_raise_curve_chart(self) -> None:
        fig = raise_curve_chart([0.0, 50_000.0, 100_000.0], [0.0, 40_000.0, 72_000.0])
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 2
