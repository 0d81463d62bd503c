"""Tests for ranking jurisdictions by take-home pay."""

from __future__ import annotations

from decimal import Decimal

import pytest

from takehome.analytics.jurisdictions import rank_jurisdictions
from takehome.config.schema import CalculationInput
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.embedded import EmbeddedTaxData

D = Decimal


@pytest.fixture
def california_input() -> CalculationInput:
    return CalculationInput(gross_income=D("100000"), jurisdiction=Jurisdiction.CALIFORNIA)


class TestRankJurisdictions:
    def test_covers_all_jurisdictions(
        self, provider: EmbeddedTaxData, california_input: CalculationInput
    ) -> None:
        ranking = rank_jurisdictions(california_input, provider, max_workers=1)
        assert len(ranking.rows) == 51
        assert ranking.home is Jurisdiction.CALIFORNIA
        assert ranking.home_net_income == D("71954.909")

    def test_sorted_by_net_income(
        self, provider: EmbeddedTaxData, california_input: CalculationInput
    ) -> None:
        ranking = rank_jurisdictions(california_input, provider, max_workers=1)
        nets = [row.net_income for row in ranking.rows]
        assert nets == sorted(nets, reverse=True)

    def test_ties_keep_registry_order(
        self, provider: EmbeddedTaxData, california_input: CalculationInput
    ) -> None:
        ranking = rank_jurisdictions(california_input, provider, max_workers=1)
        best = ranking.best()
        assert best.jurisdiction is Jurisdiction.ALASKA
        assert best.net_income == D("78509")
        assert best.difference == D("6554.091")
        no_tax = [row.jurisdiction for row in ranking.rows[:9]]
        assert all(j.no_income_tax for j in no_tax)
        assert no_tax == [j for j in Jurisdiction if j.no_income_tax]

    def test_parallel_matches_sequential(
        self, provider: EmbeddedTaxData, california_input: CalculationInput
    ) -> None:
        sequential = rank_jurisdictions(california_input, provider, max_workers=1)
        parallel = rank_jurisdictions(california_input, provider, max_workers=4)
        assert parallel.rows == sequential.rows

    def test_subset(self, provider: EmbeddedTaxData, california_input: CalculationInput) -> None:
        ranking = rank_jurisdictions(
            california_input,
            provider,
            jurisdictions=[Jurisdiction.CALIFORNIA, Jurisdiction.TEXAS],
        )
        assert [row.jurisdiction for row in ranking.rows] == [
            Jurisdiction.TEXAS,
            Jurisdiction.CALIFORNIA,
        ]
        assert ranking.rank_of(Jurisdiction.CALIFORNIA) == 2
        assert ranking.rows[1].difference == 0

    def test_home_outside_subset(
        self, provider: EmbeddedTaxData, california_input: CalculationInput
    ) -> None:
        ranking = rank_jurisdictions(
            california_input, provider, jurisdictions=[Jurisdiction.FLORIDA]
        )
        assert ranking.home_net_income == D("71954.909")
        assert ranking.rows[0].difference == D("6554.091")

    def test_rank_of_missing(
        self, provider: EmbeddedTaxData, california_input: CalculationInput
    ) -> None:
        ranking = rank_jurisdictions(
            california_input, provider, jurisdictions=[Jurisdiction.TEXAS]
        )
        with pytest.raises(KeyError):
            ranking.rank_of(Jurisdiction.OHIO)
