"""Core calculation engine: gross income in, take-home income out."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from takehome.config.schema import CalculationInput
from takehome.core.timeframe import TimeframeIncome
from takehome.models.income import CalculatedIncome
from takehome.taxes.base import TaxDataProvider
from takehome.taxes.embedded import EmbeddedTaxData
from takehome.taxes.federal import FederalTaxCalculator, FederalTaxResult
from takehome.taxes.jurisdiction import JurisdictionTaxCalculator, JurisdictionTaxResult
from takehome.taxes.payroll import PayrollTaxCalculator, PayrollTaxResult

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")


@dataclass(frozen=True, slots=True)
class EffectiveRates:
    """Each tax component as a fraction of gross income."""

    federal: Decimal
    jurisdiction: Decimal
    payroll: Decimal
    total: Decimal

    @property
    def federal_percent(self) -> Decimal:
        return self.federal * HUNDRED

    @property
    def jurisdiction_percent(self) -> Decimal:
        return self.jurisdiction * HUNDRED

    @property
    def payroll_percent(self) -> Decimal:
        return self.payroll * HUNDRED

    @property
    def total_percent(self) -> Decimal:
        return self.total * HUNDRED


@dataclass(frozen=True, slots=True)
class TaxBreakdown:
    federal: FederalTaxResult
    jurisdiction: JurisdictionTaxResult
    payroll: PayrollTaxResult
    total_taxes: Decimal
    effective_rate: Decimal


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Output of one engine run."""

    income: CalculatedIncome
    tax_breakdown: TaxBreakdown
    effective_rates: EffectiveRates
    input: CalculationInput
    tax_year: int


@dataclass(frozen=True, slots=True)
class ScenarioComparison:
    """Two independent results and the change in net income between them.

    Attributes:
        base: Result for the starting scenario.
        scenario: Result for the alternative.
        net_difference: Scenario net minus base net (annual).
        monthly_difference: ``net_difference`` / 12.
    """

    base: CalculationResult
    scenario: CalculationResult
    net_difference: Decimal
    monthly_difference: Decimal

    @property
    def is_positive(self) -> bool:
        return self.net_difference > 0

    @property
    def net_difference_percent(self) -> Decimal:
        base_net = self.base.income.net
        if base_net <= 0:
            return ZERO
        return self.net_difference / base_net * HUNDRED


class TaxCalculationEngine:
    """Runs the federal, jurisdiction and payroll calculators for one input.

    The engine and its calculators only hold a reference to the provider,
    so a single engine can serve concurrent calls.

    Args:
        provider: Source of tax tables.
        tax_year: Year passed to every provider lookup.
    """

    def __init__(self, provider: TaxDataProvider, tax_year: int = 2024) -> None:
        self.provider = provider
        self.tax_year = tax_year
        self.federal = FederalTaxCalculator(provider)
        self.jurisdiction = JurisdictionTaxCalculator(provider)
        self.payroll = PayrollTaxCalculator(provider)

    def calculate(self, inp: CalculationInput) -> CalculationResult:
        """Compute taxes and take-home income.

        Pre-tax deductions and traditional contributions reduce federal and
        jurisdiction taxable income but not payroll wages. Post-tax
        deductions and Roth contributions only reduce net income.

        Args:
            inp: Validated calculation input.

        Returns:
            CalculationResult with the full tax breakdown, net income per
            period and effective rates.
        """
        year = self.tax_year
        gross = inp.gross_income
        total_pre_tax = inp.pre_tax_deductions + inp.traditional_retirement

        std_deduction = self.federal.standard_deduction(inp.filing_status, year)
        federal_taxable = max(ZERO, gross - total_pre_tax - std_deduction)
        federal = self.federal.calculate(federal_taxable, inp.filing_status, year)

        jurisdiction_taxable = gross - total_pre_tax
        jurisdiction = self.jurisdiction.calculate(
            jurisdiction_taxable, inp.jurisdiction, inp.filing_status, year
        )

        payroll = self.payroll.calculate_with_status(gross, inp.filing_status, year)

        total_taxes = federal.tax + jurisdiction.total_tax + payroll.total
        total_post_tax = inp.post_tax_deductions + inp.roth_retirement
        net = gross - total_taxes - total_pre_tax - total_post_tax

        if gross > 0:
            take_home_pct = net / gross * HUNDRED
            rates = EffectiveRates(
                federal=federal.tax / gross,
                jurisdiction=jurisdiction.total_tax / gross,
                payroll=payroll.total / gross,
                total=total_taxes / gross,
            )
        else:
            take_home_pct = ZERO
            rates = EffectiveRates(federal=ZERO, jurisdiction=ZERO, payroll=ZERO, total=ZERO)

        logger.debug(
            "Calculated %s/%s gross=%s taxes=%s net=%s",
            inp.jurisdiction.code,
            inp.filing_status.value,
            gross,
            total_taxes,
            net,
        )

        return CalculationResult(
            income=CalculatedIncome(
                gross=gross,
                net=net,
                timeframes=TimeframeIncome.from_annual(net),
                take_home_percentage=take_home_pct,
            ),
            tax_breakdown=TaxBreakdown(
                federal=federal,
                jurisdiction=jurisdiction,
                payroll=payroll,
                total_taxes=total_taxes,
                effective_rate=rates.total,
            ),
            effective_rates=rates,
            input=inp,
            tax_year=year,
        )

    def compare_scenarios(
        self, base: CalculationInput, scenario: CalculationInput
    ) -> ScenarioComparison:
        """Run both inputs and report the change in net income."""
        base_result = self.calculate(base)
        scenario_result = self.calculate(scenario)
        net_difference = scenario_result.income.net - base_result.income.net
        return ScenarioComparison(
            base=base_result,
            scenario=scenario_result,
            net_difference=net_difference,
            monthly_difference=net_difference / MONTHS_PER_YEAR,
        )


def calculate(
    inp: CalculationInput,
    provider: TaxDataProvider | None = None,
    tax_year: int = 2024,
) -> CalculationResult:
    """Run one calculation, loading the packaged tables if no provider is given."""
    if provider is None:
        provider = EmbeddedTaxData(tax_year=tax_year)
    return TaxCalculationEngine(provider, tax_year).calculate(inp)


def compare_scenarios(
    base: CalculationInput,
    scenario: CalculationInput,
    provider: TaxDataProvider | None = None,
    tax_year: int = 2024,
) -> ScenarioComparison:
    """Compare two inputs, loading the packaged tables if no provider is given."""
    if provider is None:
        provider = EmbeddedTaxData(tax_year=tax_year)
    return TaxCalculationEngine(provider, tax_year).compare_scenarios(base, scenario)
