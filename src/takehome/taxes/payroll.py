"""Payroll (FICA) taxes: Social Security, Medicare and the Additional Medicare surtax."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from takehome.models.filing_status import FilingStatus
from takehome.taxes.base import TaxDataProvider
from takehome.taxes.brackets import ZERO

# Additional Medicare Tax thresholds. These are fixed by statute rather than
# indexed, and are used when a year's table does not list its own.
SURTAX_THRESHOLDS: dict[FilingStatus, Decimal] = {
    FilingStatus.SINGLE: Decimal("200000"),
    FilingStatus.MARRIED_FILING_JOINTLY: Decimal("250000"),
    FilingStatus.MARRIED_FILING_SEPARATELY: Decimal("125000"),
    FilingStatus.HEAD_OF_HOUSEHOLD: Decimal("200000"),
    FilingStatus.QUALIFYING_WIDOWER: Decimal("200000"),
}


@dataclass(frozen=True, slots=True)
class PayrollTaxResult:
    """Payroll taxes on one year's gross wages.

    Attributes:
        base_tax: Social Security tax on wages up to ``wage_base``.
        wage_base: Social Security wage base that capped ``base_tax``.
        supplemental_tax: Medicare tax on all wages.
        surtax: Additional Medicare tax on wages above ``surtax_threshold``.
        surtax_threshold: Threshold applied for the filing status.
        total: Sum of the three taxes.
    """

    base_tax: Decimal
    wage_base: Decimal
    supplemental_tax: Decimal
    surtax: Decimal
    surtax_threshold: Decimal
    total: Decimal


class PayrollTaxCalculator:
    """Computes payroll taxes on full gross wages.

    Pre-tax deductions do not reduce payroll wages here; the engine always
    passes gross income.
    """

    def __init__(self, provider: TaxDataProvider) -> None:
        self._provider = provider

    def calculate(self, gross_income: Decimal, year: int) -> PayrollTaxResult:
        """Payroll taxes using the single-filer surtax threshold."""
        return self.calculate_with_status(gross_income, FilingStatus.SINGLE, year)

    def calculate_with_status(
        self,
        gross_income: Decimal,
        filing_status: FilingStatus,
        year: int,
    ) -> PayrollTaxResult:
        config = self._provider.payroll_config(year)
        thresholds = config.surtax_thresholds or SURTAX_THRESHOLDS
        threshold = thresholds.get(filing_status, SURTAX_THRESHOLDS[filing_status])

        if gross_income <= 0:
            return PayrollTaxResult(
                base_tax=ZERO,
                wage_base=config.wage_base,
                supplemental_tax=ZERO,
                surtax=ZERO,
                surtax_threshold=threshold,
                total=ZERO,
            )

        base_tax = min(gross_income, config.wage_base) * config.base_rate
        supplemental_tax = gross_income * config.supplemental_rate
        surtax = ZERO
        if gross_income > threshold:
            surtax = (gross_income - threshold) * config.surtax_rate

        return PayrollTaxResult(
            base_tax=base_tax,
            wage_base=config.wage_base,
            supplemental_tax=supplemental_tax,
            surtax=surtax,
            surtax_threshold=threshold,
            total=base_tax + supplemental_tax + surtax,
        )
