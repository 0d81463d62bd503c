"""Take-home pay for one input across every jurisdiction."""

from __future__ import annotations

import concurrent.futures
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from takehome.config.schema import CalculationInput
from takehome.core.engine import CalculationResult, TaxCalculationEngine
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.base import TaxDataProvider


@dataclass(frozen=True)
class JurisdictionComparison:
    """Outcome of moving the same input to one jurisdiction."""

    jurisdiction: Jurisdiction
    net_income: Decimal
    total_taxes: Decimal
    jurisdiction_tax: Decimal
    difference: Decimal  # net_income - net in the input's own jurisdiction


@dataclass
class JurisdictionRanking:
    """All jurisdictions, highest net income first."""

    home: Jurisdiction
    home_net_income: Decimal = Decimal("0")
    rows: list[JurisdictionComparison] = field(default_factory=list)

    def best(self) -> JurisdictionComparison:
        return self.rows[0]

    def rank_of(self, jurisdiction: Jurisdiction) -> int:
        """1-based position of ``jurisdiction`` in the ranking."""
        for i, row in enumerate(self.rows, start=1):
            if row.jurisdiction is jurisdiction:
                return i
        raise KeyError(jurisdiction)


def _run_one(engine: TaxCalculationEngine, inp: CalculationInput) -> CalculationResult:
    return engine.calculate(inp)


def rank_jurisdictions(
    inp: CalculationInput,
    provider: TaxDataProvider,
    tax_year: int = 2024,
    jurisdictions: Iterable[Jurisdiction] | None = None,
    max_workers: int | None = None,
) -> JurisdictionRanking:
    """Rank jurisdictions by take-home pay for the same taxpayer.

    Args:
        inp: Taxpayer input; only its jurisdiction varies between runs.
        provider: Shared, read-only tax data.
        tax_year: Year for every run.
        jurisdictions: Jurisdictions to include. Defaults to all 51.
        max_workers: Maximum number of worker threads. ``None`` lets the
            executor decide; ``1`` forces sequential execution.

    Returns:
        JurisdictionRanking sorted by net income, highest first. Ties keep
        registry order.
    """
    engine = TaxCalculationEngine(provider, tax_year)
    targets = list(Jurisdiction) if jurisdictions is None else list(jurisdictions)
    jobs = [inp.model_copy(update={"jurisdiction": j}) for j in targets]

    results: dict[Jurisdiction, CalculationResult] = {}
    if max_workers == 1:
        for job in jobs:
            results[job.jurisdiction] = _run_one(engine, job)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_key: dict[concurrent.futures.Future[CalculationResult], Jurisdiction] = {
                executor.submit(_run_one, engine, job): job.jurisdiction for job in jobs
            }
            for future in concurrent.futures.as_completed(future_to_key):
                results[future_to_key[future]] = future.result()

    home_result = results.get(inp.jurisdiction) or engine.calculate(inp)
    home_net = home_result.income.net

    ranking = JurisdictionRanking(home=inp.jurisdiction, home_net_income=home_net)
    for jurisdiction in targets:
        result = results[jurisdiction]
        ranking.rows.append(
            JurisdictionComparison(
                jurisdiction=jurisdiction,
                net_income=result.income.net,
                total_taxes=result.tax_breakdown.total_taxes,
                jurisdiction_tax=result.tax_breakdown.jurisdiction.total_tax,
                difference=result.income.net - home_net,
            )
        )
    ranking.rows.sort(key=lambda row: row.net_income, reverse=True)
    return ranking
