"""US federal bracket-based income tax."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from takehome.models.filing_status import FilingStatus
from takehome.taxes.base import TaxDataProvider
from takehome.taxes.brackets import ZERO, BracketAmount, evaluate


@dataclass(frozen=True, slots=True)
class FederalTaxResult:
    """Federal income tax on one taxable income."""

    taxable_income: Decimal
    tax: Decimal
    marginal_rate: Decimal
    effective_rate: Decimal
    bracket_breakdown: tuple[BracketAmount, ...]


class FederalTaxCalculator:
    """Applies the provider's federal brackets to taxable income.

    Taxable income is expected to already be net of the standard deduction;
    the engine takes care of that.
    """

    def __init__(self, provider: TaxDataProvider) -> None:
        self._provider = provider

    def calculate(
        self,
        taxable_income: Decimal,
        filing_status: FilingStatus,
        year: int,
    ) -> FederalTaxResult:
        brackets = self._provider.federal_brackets(filing_status, year)
        evaluation = evaluate(taxable_income, brackets)
        if taxable_income <= 0 or not brackets:
            return FederalTaxResult(
                taxable_income=ZERO,
                tax=ZERO,
                marginal_rate=evaluation.marginal_rate,
                effective_rate=ZERO,
                bracket_breakdown=(),
            )
        return FederalTaxResult(
            taxable_income=taxable_income,
            tax=evaluation.tax,
            marginal_rate=evaluation.marginal_rate,
            effective_rate=evaluation.tax / taxable_income,
            bracket_breakdown=evaluation.breakdown,
        )

    def standard_deduction(self, filing_status: FilingStatus, year: int) -> Decimal:
        return self._provider.standard_deduction(filing_status, year)
