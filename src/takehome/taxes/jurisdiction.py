"""State and District of Columbia income tax, disability insurance and local estimates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from takehome.models.filing_status import FilingStatus
from takehome.models.jurisdiction import Jurisdiction
from takehome.taxes.base import (
    FlatRate,
    JurisdictionConfig,
    NoTax,
    Progressive,
    TaxDataProvider,
)
from takehome.taxes.brackets import ZERO, BracketAmount, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class JurisdictionTaxResult:
    """Jurisdiction taxes on one taxable income.

    ``bracket_breakdown`` is only present for progressive schedules that
    taxed something.
    """

    jurisdiction: Jurisdiction
    taxable_income: Decimal
    income_tax: Decimal
    disability_tax: Decimal
    local_tax: Decimal
    total_tax: Decimal
    effective_rate: Decimal
    bracket_breakdown: tuple[BracketAmount, ...] | None = None

    @property
    def code(self) -> str:
        return self.jurisdiction.code


class JurisdictionTaxCalculator:
    """Dispatches on the jurisdiction's tax type.

    The taxable income passed in is gross less pre-tax deductions; a
    progressive jurisdiction subtracts its own standard deduction on top.
    Disability insurance and the local estimate are charged on the same
    taxable income.
    """

    def __init__(self, provider: TaxDataProvider) -> None:
        self._provider = provider

    def calculate(
        self,
        taxable_income: Decimal,
        jurisdiction: Jurisdiction,
        filing_status: FilingStatus,
        year: int,
    ) -> JurisdictionTaxResult:
        config = self._provider.jurisdiction_config(jurisdiction, year)
        tax_type = config.tax_type

        if isinstance(tax_type, NoTax):
            return JurisdictionTaxResult(
                jurisdiction=jurisdiction,
                taxable_income=taxable_income,
                income_tax=ZERO,
                disability_tax=ZERO,
                local_tax=ZERO,
                total_tax=ZERO,
                effective_rate=ZERO,
            )

        breakdown: tuple[BracketAmount, ...] | None = None
        if isinstance(tax_type, FlatRate):
            income_tax = taxable_income * tax_type.rate if taxable_income > 0 else ZERO
        elif isinstance(tax_type, Progressive):
            income_tax, breakdown = self._progressive(taxable_income, tax_type, filing_status)
        else:
            raise TypeError(f"unsupported tax type {tax_type!r}")

        disability_tax = self._disability_tax(taxable_income, jurisdiction, config)
        local_tax = self._local_tax(taxable_income, jurisdiction, config)
        total = income_tax + disability_tax + local_tax
        effective = total / taxable_income if taxable_income > 0 else ZERO

        return JurisdictionTaxResult(
            jurisdiction=jurisdiction,
            taxable_income=taxable_income,
            income_tax=income_tax,
            disability_tax=disability_tax,
            local_tax=local_tax,
            total_tax=total,
            effective_rate=effective,
            bracket_breakdown=breakdown,
        )

    def _progressive(
        self,
        taxable_income: Decimal,
        tax_type: Progressive,
        filing_status: FilingStatus,
    ) -> tuple[Decimal, tuple[BracketAmount, ...] | None]:
        brackets = tax_type.brackets.get(filing_status, ())
        if not brackets:
            logger.debug("No %s brackets for this jurisdiction", filing_status.value)
        deduction = ZERO
        if tax_type.standard_deduction is not None:
            deduction = tax_type.standard_deduction.get(filing_status, ZERO)
        adjusted = max(ZERO, taxable_income - deduction)

        evaluation = evaluate(adjusted, brackets)
        if not evaluation.breakdown:
            return evaluation.tax, None
        return evaluation.tax, evaluation.breakdown

    @staticmethod
    def _disability_tax(
        income: Decimal, jurisdiction: Jurisdiction, config: JurisdictionConfig
    ) -> Decimal:
        sdi = config.disability_insurance
        if not jurisdiction.disability_insurance or sdi is None or income <= 0:
            return ZERO
        wages = income if sdi.wage_base is None else min(income, sdi.wage_base)
        return wages * sdi.rate

    @staticmethod
    def _local_tax(
        income: Decimal, jurisdiction: Jurisdiction, config: JurisdictionConfig
    ) -> Decimal:
        if not jurisdiction.local_tax or config.local_tax_rate is None or income <= 0:
            return ZERO
        return income * config.local_tax_rate
